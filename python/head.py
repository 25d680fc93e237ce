#!/usr/bin/env python3
"""
Name: head
Description: print the first lines or bytes of a file
License: perl
"""

import sys
import os
import argparse
import re

from streams import STDIN_TOKEN, InputDiagnostic, __version__, decode, program_name, resolve

# Constants
EX_SUCCESS = 0
EX_FAILURE = 1
DEFAULT_LINES = 10


def preprocess_argv(args_list: list) -> list:
    """
    Translates the historical '-NUMBER' syntax to the standard '-n NUMBER'.
    For example, '-20' becomes ['-n', '20'].
    """
    processed_args = []
    for arg in args_list:
        # Match arguments like '-20' but not '-' or '--' or '-n'
        match = re.match(r'^-(\d+)$', arg)
        if match:
            processed_args.extend(['-n', match.group(1)])
        else:
            processed_args.append(arg)
    return processed_args


def positive_count(value: str) -> int:
    """argparse type for NUM: an integer of at least 1."""
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid number '{value}'")
    if number < 1:
        raise argparse.ArgumentTypeError(f"count is too small: '{value}'")
    return number


def head_lines(reader, count: int, out=None):
    """Writes at most `count` lines, each as soon as it is read."""
    if out is None:
        out = sys.stdout
    for _ in range(count):
        bytes_read, line = reader.read_line()
        if bytes_read == 0:
            break
        out.write(line)


def head_bytes(reader, count: int, out=None):
    """Writes the first `count` bytes, decoded lossily; may cut mid-line."""
    if out is None:
        out = sys.stdout
    _, buffer = reader.read_bytes(count)
    out.write(decode(buffer))


def run(files, lines=DEFAULT_LINES, byte_count=None) -> int:
    """
    Prints the head of every token in order. With more than one token each
    output is preceded by a '==> name <==' header, and every header except
    the first token's is preceded by a blank line, even when earlier tokens
    could not be opened.
    """
    exit_status = EX_SUCCESS
    is_multi_file = len(files) > 1

    for file_num, filename in enumerate(files):
        try:
            reader = resolve(filename)
        except OSError as e:
            InputDiagnostic.from_os_error(filename, e).report()
            continue

        with reader:
            if is_multi_file:
                # Keyed on the token's position, not on headers printed so far.
                if file_num > 0:
                    print()
                print(f"==> {filename} <==")

            try:
                if byte_count is not None:
                    head_bytes(reader, byte_count)
                else:
                    head_lines(reader, lines)
            except BrokenPipeError:
                raise
            except OSError as e:
                sys.stdout.flush()
                InputDiagnostic.from_os_error(filename, e).report(program_name())
                exit_status = EX_FAILURE

    return exit_status


def build_parser():
    parser = argparse.ArgumentParser(
        description="Print the first lines of a file.",
        usage="%(prog)s [-n count | -c bytes] [file ...]"
    )
    parser.add_argument('-V', '--version', action='version', version=f'%(prog)s {__version__}')

    # Line and byte modes exclude each other.
    mode_group = parser.add_mutually_exclusive_group()
    mode_group.add_argument(
        '-n', '--lines',
        type=positive_count,
        default=DEFAULT_LINES,
        metavar='NUM',
        help=f'The number of lines to print (default: {DEFAULT_LINES}).'
    )
    mode_group.add_argument(
        '-c', '--bytes',
        type=positive_count,
        metavar='NUM',
        help='The number of bytes to print.'
    )
    parser.add_argument(
        'files',
        nargs='*',
        default=[STDIN_TOKEN],
        help="Files to process. Reads from stdin if none are given or for '-'."
    )
    return parser


def main():
    """Parses arguments and prints the head of files or stdin."""
    # Pre-process arguments to handle the '-NUMBER' syntax before parsing.
    args_to_parse = preprocess_argv(sys.argv[1:])

    parser = build_parser()
    try:
        args = parser.parse_args(args_to_parse)
    except SystemExit as e:
        # argparse exits 2 on error; report failure as 1.
        sys.exit(EX_SUCCESS if e.code == 0 else EX_FAILURE)

    try:
        exit_status = run(args.files, lines=args.lines, byte_count=args.bytes)
        sys.stdout.flush()
    except BrokenPipeError:
        # The reader went away; stop quietly like the C utility.
        devnull = os.open(os.devnull, os.O_WRONLY)
        os.dup2(devnull, sys.stdout.fileno())
        exit_status = EX_FAILURE
    except KeyboardInterrupt:
        exit_status = EX_FAILURE

    sys.exit(exit_status)


if __name__ == "__main__":
    main()
