import argparse
import logging
import os
import sys
import time

from geometry import Point, to_points
from quickhull import QuickHullBuilder, MergingHullBuilder

logger = logging.getLogger(__name__)

ALGORITHMS = {
    "shared": QuickHullBuilder,
    "merging": MergingHullBuilder,
}


def timeit(method):
    def timed(*args, **kw):
        ts = time.time()
        result = method(*args, **kw)
        te = time.time()
        logger.info("%s elapsed time: %f sec", method.__qualname__, (te - ts))
        return result

    return timed


def load_points(filename: str) -> list[Point]:
    """
    Read points file: the first line holds the number of points n,
    followed by n lines with "x y" coordinates.
    """
    coords = []
    with open(filename, 'r', encoding='utf-8') as f:
        header = f.readline().strip()
        try:
            n = int(header)
        except ValueError:
            raise ValueError(f"{filename}: expected number of points, got {header!r}") from None
        if n < 0:
            raise ValueError(f"{filename}: negative number of points {n}")

        for line_no, line in enumerate(f, start=2):
            line = line.strip()
            if not line:
                continue
            if len(coords) == n:
                break
            parts = line.split()
            if len(parts) != 2:
                raise ValueError(f"{filename}:{line_no}: expected 'x y', got {line!r}")
            try:
                coords.append((float(parts[0]), float(parts[1])))
            except ValueError:
                raise ValueError(f"{filename}:{line_no}: bad coordinates {line!r}") from None

    if len(coords) < n:
        raise ValueError(f"{filename}: expected {n} points, found {len(coords)}")

    points = to_points(coords)
    logger.info("Loaded %d points from %s", len(points), os.path.basename(filename))
    return points


def format_points(points: list[Point]) -> str:
    lines = [str(len(points))]
    lines.extend(f"{p.x!r} {p.y!r}" for p in points)
    return "\n".join(lines) + "\n"


def save_hull(filename: str, hull: list[Point]):
    with open(filename, 'w', encoding='utf-8') as f:
        f.write(format_points(hull))
    logger.info("Saved %d hull points to %s", len(hull), os.path.basename(filename))


@timeit
def run_analysis(points: list[Point], algorithm: str = "shared") -> list[Point]:
    algo = ALGORITHMS[algorithm]()
    return algo.compute_hull(points)


def parse_args(argv=None):
    parser = argparse.ArgumentParser("quickhull", description="Convex hull of a planar point set")
    parser.add_argument("points", type=str, help="points file: count on the first line, then 'x y' lines")
    parser.add_argument("-o", "--output", type=str, default=None, help="write hull here instead of stdout")
    parser.add_argument("--algorithm", choices=sorted(ALGORITHMS), default="shared")
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="WARNING",
    )
    return parser.parse_args(argv)


def main(argv=None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=args.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        points = load_points(args.points)
        hull = run_analysis(points, args.algorithm)
        logger.info("Hull has %d of %d points", len(hull), len(points))
        if args.output:
            save_hull(args.output, hull)
        else:
            sys.stdout.write(format_points(hull))
    except (OSError, ValueError) as e:
        logger.error("Failed to compute hull: %s", e)
        return 1
    return 0


if __name__ == '__main__':
    sys.exit(main())
