#!/usr/bin/env python3
"""
Name: shellext
Description: a program launcher for the shellext tools
License: perl
"""

import sys
import argparse
import importlib

from shellext import __version__
from shellext import common

# Using a set for fast 'in' lookups.
TOOLS = {'basename', 'cut', 'dirname', 'head', 'realpath'}


def main(argv=None):
    """Parses arguments and launches the specified tool."""
    parser = common.ToolArgumentParser(
        prog='shellext',
        description="A program launcher for the shellext tools.",
        usage="%(prog)s [-l | --list] [-V | --version] [-h | --help] tool [arg ...]"
    )
    parser.add_argument(
        '-V', '--version',
        action='version',
        version=f'%(prog)s {__version__}'
    )
    parser.add_argument(
        '-l', '--list',
        action='store_true',
        help='list available tools'
    )
    # This collects the tool name and all subsequent arguments.
    parser.add_argument(
        'command',
        nargs=argparse.REMAINDER,
        help='The tool to run followed by its arguments.'
    )

    args = parser.parse_args(argv)

    # If --list is used, print tools and exit.
    if args.list:
        print("\n".join(sorted(TOOLS)))
        sys.exit(common.EX_SUCCESS)

    # If no tool is specified, show the help message.
    if not args.command:
        parser.print_help()
        sys.exit(common.EX_FAILURE)

    tool, tool_args = args.command[0], args.command[1:]
    if tool not in TOOLS:
        common.warn(parser.prog, f"'{tool}' is not a shellext tool; try '{parser.prog} --list'")
        sys.exit(common.EX_FAILURE)

    # Each tool's main exits with its own status.
    module = importlib.import_module(f"shellext.{tool}")
    module.main(tool_args)


if __name__ == "__main__":
    main()
