#!/usr/bin/env python3
"""
Name: dirname
Description: print the directory name of a path
License: perl

Prints the directory component of each path. Everything starting
from the last path separator is deleted.
"""
import sys

from shellext import common

__version__ = "1.3"


def get_dirname(path: str) -> str:
    stripped = path.rstrip('/')
    if not stripped:
        return '/' if path else '.'
    slash = stripped.rfind('/')
    if slash < 0:
        return '.'
    return stripped[:slash].rstrip('/') or '/'


def main(argv=None):
    """Parses arguments and prints the directory name of each path."""
    parser = common.ToolArgumentParser(
        prog='dirname',
        description="Output each NAME with its last non-slash component removed.",
        usage="%(prog)s [-z] string [string ...]"
    )
    parser.add_argument('--version', action='version', version=f'%(prog)s {__version__}')
    parser.add_argument('-z', '--zero', action='store_true',
                        help='end each output line with NUL, not newline')
    parser.add_argument('names', nargs='*', metavar='string',
                        help='The path string from which to extract the directory name.')

    args = parser.parse_args(argv)
    if not args.names:
        parser.error("missing operand")

    end = common.terminator(args.zero)
    out = sys.stdout.buffer
    for name in args.names:
        common.write_record(out, get_dirname(name), end)
    out.flush()
    sys.exit(common.EX_SUCCESS)


if __name__ == "__main__":
    main()
