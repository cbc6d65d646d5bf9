"""
Custom exception hierarchy for ledcube.

```
LedCubeError (base)
├── CubeError
│   ├── CubeConnectionError
│   ├── CubeIOError
│   └── CubeClosedError
└── ConfigurationError
    ├── ConfigFileInvalidError
    └── ConfigValidationError

CubePositionError (IndexError, programming error)
```

All custom exceptions except CubePositionError inherit from `LedCubeError`,
which provides `user_message`, `technical_message` and
`recovery_hint`.

### Example: Cube unplugged mid-session

```python
from ledcube.exceptions import CubeIOError

try:
    cube.flush()
except CubeIOError as e:
    logger.error(e.technical_message)
    cube.flush()  # pattern is unchanged, safe to retry
```
"""

from .base import LedCubeError
from .config import ConfigFileInvalidError, ConfigurationError, ConfigValidationError
from .cube import (
    CubeClosedError,
    CubeConnectionError,
    CubeError,
    CubeIOError,
    CubePositionError,
)
from .handlers import (
    ErrorContext,
    format_error_for_display,
    wrap_pydantic_error,
    wrap_serial_error,
)

__all__ = [
    # Base
    "LedCubeError",
    # Config
    "ConfigFileInvalidError",
    "ConfigValidationError",
    "ConfigurationError",
    # Cube
    "CubeClosedError",
    "CubeConnectionError",
    "CubeError",
    "CubeIOError",
    "CubePositionError",
    # Handlers
    "ErrorContext",
    "format_error_for_display",
    "wrap_pydantic_error",
    "wrap_serial_error",
]
