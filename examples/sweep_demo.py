"""Basic example: turn each light on in sequence."""

import sys
import time

from ledcube import Cube


def main():
    """Sweep a single lit LED through the whole cube."""
    if len(sys.argv) != 2:
        print("Usage: python examples/sweep_demo.py PORT   (e.g. /dev/ttyUSB0 or COM5)")
        return

    with Cube(sys.argv[1]) as cube:
        print(f"Connected to {cube.port}")

        for z in range(4):
            for y in range(4):
                for x in range(4):
                    cube.clear()
                    cube.set((x, y, z), True)
                    cube.flush()
                    print(f"  ({x}, {y}, {z})")
                    time.sleep(0.5)

        cube.clear()
        cube.flush()
        print("Done!")


if __name__ == "__main__":
    main()
