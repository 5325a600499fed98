import argparse
import logging

import numpy as np

from . import (
    DegenerateGeometryError,
    dihedral,
    dihedral_unsigned,
    iter_windows,
    read_points,
    __version__,
)

from .config import DEFAULT_PARAMS

logger = logging.getLogger(__name__)


def format_angle(angle: float, degrees: bool = False) -> str:
    """Render one angle for output, in radians unless ``degrees`` is set."""
    if degrees:
        angle = float(np.degrees(angle))
    return f"{angle:.6f}"


def main(argv=None):
    p = argparse.ArgumentParser(
        description="Print the dihedral angle of every four consecutive points in a trace.")
    p.add_argument("points", nargs='?', help="Plain-text file with one 'x y z' row per point")

    p.add_argument("--version", action="store_true",
                    help="Print version information and exit")

    p.add_argument("-u", "--unsigned", action="store_true", default=DEFAULT_PARAMS['unsigned'],
                    help="Unsigned angles in [0, pi] (default: signed, in (-pi, pi])")
    p.add_argument("--degrees", action="store_true", default=DEFAULT_PARAMS['degrees'],
                    help="Print angles in degrees (default: radians)")
    p.add_argument("-d", "--debug", action="store_true",
                    help="Enable debug logging")

    args = p.parse_args(argv)

    if args.version:
        print(f"dihedral v{__version__} ({DEFAULT_PARAMS['precision']})")
        return

    if not args.points:
        p.error("the following arguments are required: points")

    logging.basicConfig(level=logging.DEBUG if args.debug else logging.WARNING,
                        format="%(levelname)s %(name)s: %(message)s")

    try:
        points = read_points(args.points)
    except (OSError, ValueError) as e:
        p.error(str(e))

    if len(points) < DEFAULT_PARAMS['window']:
        logger.warning("Need at least %d points, found %d", DEFAULT_PARAMS['window'], len(points))
        return

    fn = dihedral_unsigned if args.unsigned else dihedral
    for i, frame in enumerate(iter_windows(points, size=DEFAULT_PARAMS['window'])):
        try:
            angle = fn(frame)
        except DegenerateGeometryError as e:
            logger.warning("Window %d (points %d-%d): %s", i, i, i + DEFAULT_PARAMS['window'] - 1, e)
            print("nan")
            continue
        print(format_angle(angle, degrees=args.degrees))


if __name__ == "__main__":
    main()
