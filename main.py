# main.py
import argparse
import json
import math
import sys

from campus_nav.app.build import build
from campus_nav.errors import NavigationError


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(description="Shortest path between two points of a campus model")
    p.add_argument("manifest", help="scene manifest (JSON)")
    p.add_argument("query", help='page parameters, e.g. "x1=0&y1=0&x2=12&y2=4"')
    p.add_argument("--frontier", choices=["sorted", "heap"], default="sorted")
    p.add_argument("--tour", action="store_true", help="also run the waypoint tour")
    p.add_argument(
        "--log-level",
        default="WARNING",
        type=str.upper,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
    )
    args = p.parse_args(argv)

    cfg = {
        "scene": {"manifest": args.manifest},
        "navigation": {"frontier": {"kind": args.frontier}},
        "log": {"level": args.log_level},
    }
    try:
        app = build(cfg)
        result = app.navigate_query(args.query)
    except NavigationError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    print(
        json.dumps(
            {
                "path": list(result.path),
                "distance": None if math.isinf(result.distance) else result.distance,
            }
        )
    )
    if args.tour:
        app.start_tour()
        app.kernel.run()
    return 0 if result.found else 1


if __name__ == "__main__":
    sys.exit(main())
