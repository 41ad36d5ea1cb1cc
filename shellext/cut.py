#!/usr/bin/env python3
"""
Name: cut
Description: select portions of each line of a file
License: perl

Lines are handled as raw bytes throughout. Character positions are
counted exactly like byte positions, so text outside ASCII is indexed
by its encoded bytes, not by its characters.
"""

import os
import re
import sys
import argparse
from collections import namedtuple
from enum import Enum

from shellext import common

__version__ = "1.0"

# When False, unparseable numbers in a list are read as 0 and ranges are
# accepted as written, the way atoi-based cut implementations behave.
STRICT_POSITIONS = True

# End of a range written as 'N-'.
UNBOUNDED = sys.maxsize

READ_SIZE = 65536

Range = namedtuple('Range', ['start', 'end'])

# What the projector produced for one line, and how many units went into it.
Projection = namedtuple('Projection', ['line', 'selected'])


class SelectorError(common.UsageError):
    """A malformed byte, character or field list."""


class Mode(Enum):
    BYTE = 'b'
    CHARACTER = 'c'
    FIELD = 'f'


def permissive_int(text: str) -> int:
    """Leading optional sign and digits, anything else reads as 0."""
    match = re.match(r'\s*([+-]?[0-9]+)', text)
    return int(match.group(1)) if match else 0


def parse_position(text: str, token: str) -> int:
    if text.isascii() and text.isdigit():
        return int(text)
    if STRICT_POSITIONS:
        raise SelectorError(f"invalid byte, character or field list '{token}'")
    return permissive_int(text)


def parse_range(token: str) -> Range:
    """
    Parses one item of a list: 'N', 'N-', '-M' or 'N-M'.
    """
    if not token:
        raise SelectorError("empty item in byte, character or field list")

    start_str, dash, end_str = token.partition('-')
    if not dash:
        start = end = parse_position(start_str, token)
    elif not start_str:
        if not end_str and STRICT_POSITIONS:
            raise SelectorError("invalid range with no endpoint: -")
        start, end = 1, parse_position(end_str, token)
    elif not end_str:
        start, end = parse_position(start_str, token), UNBOUNDED
    else:
        start, end = parse_position(start_str, token), parse_position(end_str, token)

    if STRICT_POSITIONS:
        if start == 0 or end == 0:
            raise SelectorError("byte, character and field positions are numbered from 1")
        if start > end:
            raise SelectorError(f"invalid decreasing range '{token}'")
    return Range(start, end)


class RangeSet:
    """
    The ranges of a byte, character or field list, in the order given.
    Overlapping and repeated ranges are kept; they only answer membership.
    """

    def __init__(self, ranges):
        self.ranges = tuple(ranges)

    @classmethod
    def parse(cls, selector: str) -> 'RangeSet':
        if not selector:
            raise SelectorError("you must specify a list of bytes, characters, or fields")
        return cls(parse_range(token) for token in selector.split(','))

    def contains(self, position: int) -> bool:
        for r in self.ranges:
            if r.start <= position <= r.end:
                return True
        return False

    __contains__ = contains

    def __iter__(self):
        return iter(self.ranges)

    def __len__(self):
        return len(self.ranges)

    def __repr__(self):
        return f"RangeSet({list(self.ranges)!r})"


class LineRecord:
    """One input line broken into the units its mode addresses."""

    __slots__ = ('line', 'units', 'has_delimiter')

    def __init__(self, line, units, has_delimiter=True):
        self.line = line
        self.units = units
        self.has_delimiter = has_delimiter


def split_line(line: bytes, mode: Mode, delimiter: bytes = b'\t') -> LineRecord:
    """Splits a line, terminator already removed, into bytes or fields."""
    if mode is not Mode.FIELD:
        # Bytes are addressed in place; indexing the line is enough.
        return LineRecord(line, line)
    fields = line.split(delimiter)
    return LineRecord(line, fields, has_delimiter=len(fields) > 1)


def project(record: LineRecord, mode: Mode, ranges: RangeSet,
            delimiter: bytes = b'\t', only_delimited: bool = False):
    """
    Builds the output for one line. Returns None when the line is
    dropped, otherwise a Projection of the selected units.
    """
    if mode is not Mode.FIELD:
        units = record.units
        picked = bytes(units[pos - 1] for pos in range(1, len(units) + 1)
                       if ranges.contains(pos))
        return Projection(picked, len(picked))

    if not record.has_delimiter:
        if only_delimited:
            return None
        return Projection(record.line, 1)

    # Delimiters go between selected fields only.
    picked = [field for pos, field in enumerate(record.units, 1)
              if ranges.contains(pos)]
    return Projection(delimiter.join(picked), len(picked))


class OutputPolicy:
    """
    How projected lines are terminated and how input is split into lines.

    terminator                 written after each output line
    only_delimited             drop field-mode lines with no delimiter (-s)
    terminate_empty_bytes      terminate byte/character lines that selected nothing
    terminate_empty_fields     terminate field lines that selected no field
    split_on_terminator        split input on the terminator instead of newline
    """

    def __init__(self, terminator=b'\n', only_delimited=False,
                 terminate_empty_bytes=True, terminate_empty_fields=False,
                 split_on_terminator=False):
        self.terminator = terminator
        self.only_delimited = only_delimited
        self.terminate_empty_bytes = terminate_empty_bytes
        self.terminate_empty_fields = terminate_empty_fields
        self.split_on_terminator = split_on_terminator

    @property
    def input_separator(self) -> bytes:
        return self.terminator if self.split_on_terminator else b'\n'

    def terminates_empty(self, mode: Mode) -> bool:
        if mode is Mode.FIELD:
            return self.terminate_empty_fields
        return self.terminate_empty_bytes


def read_records(stream, separator: bytes = b'\n'):
    """Yields the lines of a binary stream with their separator removed."""
    if separator == b'\n':
        for line in stream:
            yield line[:-1] if line.endswith(b'\n') else line
        return

    pending = b''
    while True:
        chunk = stream.read(READ_SIZE)
        if not chunk:
            break
        *records, pending = (pending + chunk).split(separator)
        yield from records
    if pending:
        yield pending


class Cutter:
    """Runs every line of every input source through the projector."""

    def __init__(self, mode: Mode, ranges: RangeSet, delimiter: bytes = b'\t',
                 policy: OutputPolicy = None):
        self.mode = mode
        self.ranges = ranges
        self.delimiter = delimiter
        self.policy = policy or OutputPolicy()

    def cut_line(self, line: bytes):
        """The bytes to write for one input line, or None to write nothing."""
        record = split_line(line, self.mode, self.delimiter)
        result = project(record, self.mode, self.ranges, self.delimiter,
                         self.policy.only_delimited)
        if result is None:
            return None
        if not result.selected and not self.policy.terminates_empty(self.mode):
            return None
        return result.line + self.policy.terminator

    def cut_stream(self, stream, out) -> None:
        for line in read_records(stream, self.policy.input_separator):
            output = self.cut_line(line)
            if output is not None:
                out.write(output)

    def run(self, files, out, prog='cut') -> int:
        """
        Processes each named source in turn, standard input when there
        are none. Returns EX_FAILURE if any source could not be read.
        """
        status = common.EX_SUCCESS
        for name in files or [common.STDIN_NAME]:
            try:
                stream = common.open_source(name)
            except common.SourceOpenError as e:
                common.warn(prog, e)
                status = common.EX_FAILURE
                continue
            try:
                self.cut_stream(stream, out)
            except MemoryError:
                common.warn(prog, f"{name}: memory exhausted")
                status = common.EX_FAILURE
            except OSError as e:
                common.warn(prog, f"{name}: {e.strerror}")
                status = common.EX_FAILURE
            finally:
                common.close_source(stream)
        return status


VALUE_OPTIONS = {
    '-b': '--bytes', '-c': '--characters', '-f': '--fields', '-d': '--delimiter',
}
LIST_DESTS = ('byte_list', 'char_list', 'field_list')


def preprocess_argv(args_list: list) -> list:
    """
    Attaches the value of -b, -c, -f and -d to its option, so a list
    such as '-2,4' is never taken for an option itself.
    For example, ['-f', '-2,4'] becomes ['-f-2,4'] and
    ['--fields', '-2,4'] becomes ['--fields=-2,4'].
    """
    processed_args = []
    i = 0
    while i < len(args_list):
        arg = args_list[i]
        if arg == '--':
            processed_args.extend(args_list[i:])
            break
        if i + 1 < len(args_list):
            if arg in VALUE_OPTIONS:
                processed_args.append(arg + args_list[i + 1])
                i += 2
                continue
            if arg in VALUE_OPTIONS.values():
                processed_args.append(f"{arg}={args_list[i + 1]}")
                i += 2
                continue
        processed_args.append(arg)
        i += 1
    return processed_args


class ListAction(argparse.Action):
    """Stores a byte, character or field list; only one may be given."""

    def __call__(self, parser, namespace, values, option_string=None):
        if any(getattr(namespace, dest, None) is not None for dest in LIST_DESTS):
            parser.error("only one type of list may be specified")
        setattr(namespace, self.dest, values)


def build_parser():
    parser = common.ToolArgumentParser(
        prog='cut',
        description="Print selected parts of lines from each FILE to standard output.",
        usage="%(prog)s (-b list | -c list | -f list) [-d delim] [-s] [-z] [file ...]",
        epilog="LIST is one or more of N, N-, N-M or -M separated by commas, counted from 1."
    )
    # The three modes are mutually exclusive and one is required.
    mode_group = parser.add_mutually_exclusive_group(required=True)
    mode_group.add_argument('-b', '--bytes', dest='byte_list', metavar='LIST',
                            action=ListAction, help='select only these bytes')
    mode_group.add_argument('-c', '--characters', dest='char_list', metavar='LIST',
                            action=ListAction, help='select only these characters')
    mode_group.add_argument('-f', '--fields', dest='field_list', metavar='LIST',
                            action=ListAction, help='select only these fields')

    parser.add_argument('-d', '--delimiter', metavar='DELIM',
                        help='use DELIM instead of TAB for field delimiter')
    parser.add_argument('-s', '--only-delimited', action='store_true',
                        help='do not print lines not containing delimiters')
    parser.add_argument('-z', '--zero-terminated', action='store_true',
                        help='end output lines with NUL, not newline')
    parser.add_argument('--version', action='version',
                        version=f'%(prog)s {__version__}')
    parser.add_argument('files', nargs='*', metavar='file',
                        help='Files to process. Reads from stdin if none are given.')
    return parser


def main(argv=None):
    """Parses arguments, builds the range set and cuts every source."""
    if argv is None:
        argv = sys.argv[1:]

    parser = build_parser()
    # Join option values first so lists like '-2,4' parse as values.
    args = parser.parse_args(preprocess_argv(argv))

    if args.field_list is not None:
        mode, selector = Mode.FIELD, args.field_list
    elif args.byte_list is not None:
        mode, selector = Mode.BYTE, args.byte_list
    else:
        mode, selector = Mode.CHARACTER, args.char_list

    if mode is not Mode.FIELD:
        if args.delimiter is not None:
            parser.error("an input delimiter may be specified only when operating on fields")
        if args.only_delimited:
            parser.error("suppressing non-delimited lines makes sense only when operating on fields")

    delimiter = '\t' if args.delimiter is None else args.delimiter
    if len(delimiter) != 1:
        parser.error("the delimiter must be a single character")

    try:
        ranges = RangeSet.parse(selector)
    except SelectorError as e:
        parser.error(str(e))

    policy = OutputPolicy(terminator=common.terminator(args.zero_terminated),
                          only_delimited=args.only_delimited)
    cutter = Cutter(mode, ranges, os.fsencode(delimiter), policy)
    out = sys.stdout.buffer
    status = cutter.run(args.files, out, parser.prog)
    out.flush()
    sys.exit(status)


if __name__ == "__main__":
    main()
