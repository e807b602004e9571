"""Command-line entry point.

Usage: python3 -m measurements <count> <output_file>
"""

import sys

from measurements.generator import GenerateError, UsageError, generate, parse_args


def main(argv=None):
    if argv is None:
        argv = sys.argv[1:]

    try:
        config = parse_args(argv)
    except UsageError as e:
        print(e)
        return 1

    try:
        generate(config)
    except GenerateError as e:
        print(e)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
