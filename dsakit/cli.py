"""Command-line demonstration of binary search."""

import argparse

from dsakit.search import binary_search

_SAMPLE = [5, 6, 7, 8, 9, 10, 11, 12, 13]


def main(argv=None):
    """Search the sample sorted list for a target and print its index."""
    parser = argparse.ArgumentParser(
        prog="dsakit",
        description=f"Binary search over {_SAMPLE}.",
    )
    parser.add_argument(
        "target", nargs="?", type=int, default=13, help="value to look for (default: 13)"
    )
    args = parser.parse_args(argv)
    print("Using binary search", binary_search(_SAMPLE, args.target))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())