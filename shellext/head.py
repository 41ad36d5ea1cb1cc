#!/usr/bin/env python3
"""
Name: head
Description: print the first lines of a file
License: perl
"""

import os
import re
import sys
import itertools

from shellext import common

__version__ = "1.0"

DEFAULT_COUNT = 10


def preprocess_argv(args_list: list) -> list:
    """
    Translates the historical '-NUMBER' syntax to the standard '-n NUMBER'.
    For example, '-20' becomes ['-n', '20']. Nothing after '--' is touched.
    """
    processed_args = []
    for i, arg in enumerate(args_list):
        if arg == '--':
            processed_args.extend(args_list[i:])
            break
        # Match arguments like '-20' but not '-' or '--' or '-n'
        match = re.match(r'^-(\d+)$', arg)
        if match:
            processed_args.extend(['-n', match.group(1)])
        else:
            processed_args.append(arg)
    return processed_args


def parse_count(text: str) -> int:
    if not (text.isascii() and text.isdigit()) or int(text) <= 0:
        raise common.UsageError(f"invalid number of lines: '{text}'")
    return int(text)


def head_stream(stream, out, count: int) -> None:
    """Copies the first count lines of a binary stream, bytes unchanged."""
    out.writelines(itertools.islice(stream, count))


def main(argv=None):
    """Parses arguments and prints the first N lines of files or stdin."""
    if argv is None:
        argv = sys.argv[1:]

    parser = common.ToolArgumentParser(
        prog='head',
        description="Print the first lines of each file.",
        usage="%(prog)s [-n count] [-q | -v] [file ...]"
    )
    parser.add_argument('--version', action='version', version=f'%(prog)s {__version__}')
    parser.add_argument(
        '-n', '--lines',
        dest='count',
        default=str(DEFAULT_COUNT),
        help=f'The number of lines to print (default: {DEFAULT_COUNT}).'
    )
    # The last of -q and -v wins.
    parser.add_argument('-q', '--quiet', dest='headers', action='store_const', const=False,
                        help='never print headers giving file names')
    parser.add_argument('-v', '--verbose', dest='headers', action='store_const', const=True,
                        help='always print headers giving file names')
    parser.add_argument(
        'files',
        nargs='*', # Zero or more file arguments.
        help='Files to process. Reads from stdin if none are given.'
    )

    # Pre-process arguments to handle the '-NUMBER' syntax before parsing.
    args = parser.parse_args(preprocess_argv(argv))
    try:
        count = parse_count(args.count)
    except common.UsageError as e:
        parser.error(str(e))

    show_headers = args.headers if args.headers is not None else len(args.files) > 1
    out = sys.stdout.buffer
    exit_status = common.EX_SUCCESS
    needs_separator = False

    for name in args.files or [common.STDIN_NAME]:
        try:
            stream = common.open_source(name)
        except common.SourceOpenError as e:
            common.warn(parser.prog, e)
            exit_status = common.EX_FAILURE
            continue
        try:
            if show_headers:
                if needs_separator:
                    out.write(b'\n')
                label = common.STDIN_LABEL if name == common.STDIN_NAME else name
                out.write(b'==> ' + os.fsencode(label) + b' <==\n')
                needs_separator = True
            head_stream(stream, out, count)
        except OSError as e:
            common.warn(parser.prog, f"{name}: {e.strerror}")
            exit_status = common.EX_FAILURE
        finally:
            common.close_source(stream)

    out.flush()
    sys.exit(exit_status)


if __name__ == "__main__":
    main()
