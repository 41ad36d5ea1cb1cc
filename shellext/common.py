"""
Name: common
Description: exit codes, diagnostics and option parsing shared by the tools
License: perl
"""

import os
import sys
import argparse

# Exit statuses
EX_SUCCESS = 0
EX_FAILURE = 1
EX_USAGE = 2

# The operand that means standard input; never opened as a real path.
STDIN_NAME = '-'
STDIN_LABEL = 'standard input'


class ShellExtError(Exception):
    """Base class for errors reported by the tools."""


class UsageError(ShellExtError):
    """Malformed or conflicting options and operands."""


class SourceOpenError(ShellExtError):
    """A named input file could not be opened."""

    def __init__(self, filename, strerror):
        super().__init__(f"{filename}: {strerror}")
        self.filename = filename
        self.strerror = strerror


def warn(prog: str, message) -> None:
    """Reports a diagnostic as 'prog: message' on standard error."""
    print(f"{prog}: {message}", file=sys.stderr)


class ToolArgumentParser(argparse.ArgumentParser):
    """
    The option scanner every tool uses. Usage errors are reported as
    'prog: message' after the usage line and exit with EX_USAGE.
    """

    def error(self, message):
        self.print_usage(sys.stderr)
        warn(self.prog, message)
        sys.exit(EX_USAGE)


def terminator(zero_terminated: bool) -> bytes:
    """The output line terminator selected by a -z flag."""
    return b'\0' if zero_terminated else b'\n'


def open_source(name: str):
    """
    Opens an input operand for binary reading. '-' is standard input.
    Raises SourceOpenError carrying the system error text on failure.
    """
    if name == STDIN_NAME:
        return sys.stdin.buffer
    try:
        return open(name, 'rb')
    except OSError as e:
        raise SourceOpenError(name, e.strerror) from e


def close_source(stream) -> None:
    # Standard input stays open for whoever reads it next.
    if stream is not sys.stdin.buffer:
        stream.close()


def write_record(out, text: str, end: bytes) -> None:
    """Writes a path or name, undecodable bytes and all, followed by end."""
    out.write(os.fsencode(text) + end)
