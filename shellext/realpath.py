#!/usr/bin/env python3
"""
Name: realpath
Description: print the resolved absolute file name
License: perl
"""
import os
import sys
import errno

from shellext import common

__version__ = "1.0"

MUST_EXIST = 'existing'
MAY_BE_MISSING = 'missing'


def resolve(path: str, mode: str = MUST_EXIST) -> str:
    """
    Resolves symlinks, '.' and '..' into an absolute path. In MUST_EXIST
    mode every component has to exist, otherwise OSError is raised.
    """
    if not path:
        raise FileNotFoundError(errno.ENOENT, os.strerror(errno.ENOENT), path)
    return os.path.realpath(path, strict=(mode == MUST_EXIST))


def main(argv=None):
    """Parses arguments and prints the canonical form of each path."""
    parser = common.ToolArgumentParser(
        prog='realpath',
        description="Print the resolved absolute file name.",
        usage="%(prog)s [-e | -m] [-q] [-z] file [file ...]"
    )
    parser.add_argument('--version', action='version', version=f'%(prog)s {__version__}')
    # The last of -e and -m wins.
    parser.add_argument('-e', '--canonicalize-existing', dest='mode',
                        action='store_const', const=MUST_EXIST, default=MUST_EXIST,
                        help='all path components must exist')
    parser.add_argument('-m', '--canonicalize-missing', dest='mode',
                        action='store_const', const=MAY_BE_MISSING,
                        help='no path components need exist')
    parser.add_argument('-q', '--quiet', action='store_true',
                        help='suppress most error messages')
    parser.add_argument('-z', '--zero', action='store_true',
                        help='end each output line with NUL, not newline')
    parser.add_argument('files', nargs='*', metavar='file')

    args = parser.parse_args(argv)
    if not args.files:
        parser.error("missing operand")

    end = common.terminator(args.zero)
    out = sys.stdout.buffer
    exit_status = common.EX_SUCCESS
    for path in args.files:
        try:
            resolved = resolve(path, args.mode)
        except OSError as e:
            if not args.quiet:
                common.warn(parser.prog, f"{path}: {e.strerror}")
            exit_status = common.EX_FAILURE
            continue
        common.write_record(out, resolved, end)
    out.flush()
    sys.exit(exit_status)


if __name__ == "__main__":
    main()
