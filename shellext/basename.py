#!/usr/bin/env python3
"""
Name: basename
Description: print the basename of a file
License: perl

Prints the file component of a path. A second argument to
basename is interpreted as a suffix to remove from the file.
With -a every argument is a path, and -s names the suffix.
"""
import sys

from shellext import common

__version__ = "1.5"


def get_basename(path: str, suffix: str = None) -> str:
    """
    Implements the POSIX basename logic.

    1.  Trailing slashes are ignored; a path of only slashes is '/'
        and an empty path is '.'.
    2.  If a suffix is provided and it matches the end of the
        resulting string, it is removed.
    """
    stripped = path.rstrip('/')
    if not stripped:
        return '/' if path else '.'
    base = stripped[stripped.rfind('/') + 1:]

    # The suffix is not removed if it constitutes the entire string.
    if suffix and len(base) > len(suffix) and base.endswith(suffix):
        base = base[:-len(suffix)]
    return base


def main(argv=None):
    """Parses command-line arguments and runs the basename logic."""
    parser = common.ToolArgumentParser(
        prog='basename',
        description="Print NAME with any leading directory components removed.",
        usage="%(prog)s string [suffix]\n       %(prog)s [-a] [-s suffix] [-z] string [string ...]"
    )
    parser.add_argument('--version', action='version', version=f'%(prog)s {__version__}')
    parser.add_argument('-a', '--multiple', action='store_true',
                        help='support multiple arguments and treat each as a NAME')
    parser.add_argument('-s', '--suffix', metavar='SUFFIX',
                        help='remove a trailing SUFFIX; implies -a')
    parser.add_argument('-z', '--zero', action='store_true',
                        help='end each output line with NUL, not newline')
    parser.add_argument('names', nargs='*', metavar='string',
                        help='The path string (e.g., /usr/bin/local).')

    args = parser.parse_args(argv)
    if not args.names:
        parser.error("missing operand")

    if args.multiple or args.suffix is not None:
        names, suffix = args.names, args.suffix
    else:
        # Historical form: the second operand is the suffix.
        if len(args.names) > 2:
            parser.error(f"extra operand '{args.names[2]}'")
        names = args.names[:1]
        suffix = args.names[1] if len(args.names) > 1 else None

    end = common.terminator(args.zero)
    out = sys.stdout.buffer
    for name in names:
        common.write_record(out, get_basename(name, suffix), end)
    out.flush()
    sys.exit(common.EX_SUCCESS)


if __name__ == "__main__":
    main()
