#!/usr/bin/env python3
"""
Name: wc
Description: line, word, byte, and character counter
License: perl
"""

import sys
import os
import argparse
import re
from collections import namedtuple

from streams import STDIN_TOKEN, InputDiagnostic, __version__, program_name, resolve

# Constants
EX_SUCCESS = 0
EX_FAILURE = 1
FIELD_WIDTH = 8

# Runs of anything but Unicode White_Space. \s also matches U+001C..U+001F,
# which are not White_Space, so those stay inside words.
WORD_PATTERN = re.compile(r'(?:\S|[\x1c-\x1f])+')

FileInfo = namedtuple('FileInfo', ['num_lines', 'num_words', 'num_chars', 'num_bytes'])

EMPTY_INFO = FileInfo(0, 0, 0, 0)


def count(reader) -> FileInfo:
    """
    Reads a stream to the end and returns its FileInfo.

    Bytes are counted raw, terminators included. Characters are Unicode
    scalar values of the lossily decoded line; malformed bytes count as
    replacement characters. Read errors propagate as OSError.
    """
    num_lines = num_words = num_chars = num_bytes = 0

    while True:
        bytes_read, line = reader.read_line()
        if bytes_read == 0:
            break

        num_lines += 1
        num_bytes += bytes_read
        num_chars += len(line)
        num_words += len(WORD_PATTERN.findall(line))

    return FileInfo(num_lines, num_words, num_chars, num_bytes)


def add_info(total: FileInfo, info: FileInfo) -> FileInfo:
    return FileInfo(*(a + b for a, b in zip(total, info)))


def format_field(value: int, show: bool) -> str:
    if show:
        return f"{value:>{FIELD_WIDTH}}"
    return ""


def format_counts(info: FileInfo, args, label=""):
    """Fields in the fixed order lines, words, bytes, chars, then the label."""
    output_parts = [
        format_field(info.num_lines, args.lines),
        format_field(info.num_words, args.words),
        format_field(info.num_bytes, args.bytes),
        format_field(info.num_chars, args.chars),
    ]
    if label:
        output_parts.append(f" {label}")
    return "".join(output_parts)


def run(files, args) -> int:
    """
    Counts every token in order. A token that cannot be opened is reported
    and skipped; it contributes nothing to the total.
    """
    exit_status = EX_SUCCESS
    total = EMPTY_INFO

    for filename in files:
        try:
            reader = resolve(filename)
        except OSError as e:
            InputDiagnostic.from_os_error(filename, e).report()
            continue

        with reader:
            try:
                info = count(reader)
            except OSError as e:
                InputDiagnostic.from_os_error(filename, e).report(program_name())
                exit_status = EX_FAILURE
                continue

        print(format_counts(info, args, "" if filename == STDIN_TOKEN else filename))
        total = add_info(total, info)

    if len(files) > 1:
        print(format_counts(total, args, "total"))

    return exit_status


def build_parser():
    parser = argparse.ArgumentParser(
        description="Line, word, byte, and character counter.",
        usage="%(prog)s [-l] [-w] [-c | -m] [file ...]"
    )
    parser.add_argument('-V', '--version', action='version', version=f'%(prog)s {__version__}')
    parser.add_argument('-l', '--lines', action='store_true', help='Show line count.')
    parser.add_argument('-w', '--words', action='store_true', help='Show word count.')

    # Bytes and characters cannot be shown together.
    size_group = parser.add_mutually_exclusive_group()
    size_group.add_argument('-c', '--bytes', action='store_true', help='Show byte count.')
    size_group.add_argument('-m', '--chars', action='store_true', help='Show character count.')

    parser.add_argument(
        'files',
        nargs='*',
        default=[STDIN_TOKEN],
        help="Files to process. Reads from stdin if none are given or for '-'."
    )
    return parser


def main():
    """Parses arguments and orchestrates the counting process."""
    parser = build_parser()
    try:
        args = parser.parse_args()
    except SystemExit as e:
        # --help and --version exit 0; usage errors exit 1 rather than 2.
        sys.exit(EX_SUCCESS if e.code == 0 else EX_FAILURE)

    # Default is -lwc if no flags are specified.
    if not any([args.lines, args.words, args.bytes, args.chars]):
        args.lines = args.words = args.bytes = True

    try:
        exit_status = run(args.files, args)
        sys.stdout.flush()
    except BrokenPipeError:
        devnull = os.open(os.devnull, os.O_WRONLY)
        os.dup2(devnull, sys.stdout.fileno())
        exit_status = EX_FAILURE
    except KeyboardInterrupt:
        exit_status = EX_FAILURE

    sys.exit(exit_status)


if __name__ == "__main__":
    main()
