"""Light each LED in turn."""

import logging
import time
from collections.abc import Callable, Iterator
from typing import Optional

from ledcube.cube import SIZE, Cube

logger = logging.getLogger(__name__)


def positions() -> Iterator[tuple[int, int, int]]:
    """All 64 positions in sweep order: x fastest, then y, then z."""
    for z in range(SIZE):
        for y in range(SIZE):
            for x in range(SIZE):
                yield (x, y, z)


def sweep(
    cube: Cube,
    interval: float = 0.5,
    cycles: Optional[int] = 1,
    sleep: Callable[[float], None] = time.sleep,
    on_step: Optional[Callable[[tuple[int, int, int]], None]] = None,
) -> int:
    """
    Turn each light on in sequence, one at a time.

    Every step clears the buffer, sets one LED and flushes.

    Args:
        cube: Connected cube
        interval: Seconds each LED stays lit
        cycles: Number of full passes (None = run until interrupted)
        sleep: Delay function, replaceable in tests
        on_step: Optional callback receiving each position after it is flushed

    Returns:
        Number of steps flushed
    """
    steps = 0
    cycle = 0
    while cycles is None or cycle < cycles:
        for position in positions():
            cube.clear()
            cube.set(position, True)
            cube.flush()
            steps += 1
            if on_step:
                on_step(position)
            sleep(interval)
        cycle += 1
        logger.debug(f"Sweep cycle {cycle} complete")

    return steps
