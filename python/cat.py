#!/usr/bin/env python3
"""
Name: cat
Description: concatenate and print files
License: perl
"""

import sys
import os
import argparse

from streams import STDIN_TOKEN, InputDiagnostic, __version__, program_name, resolve

# Constants
EX_SUCCESS = 0
EX_FAILURE = 1
NUMBER_WIDTH = 6


def strip_terminator(line: str) -> str:
    if line.endswith('\r\n'):
        return line[:-2]
    if line.endswith('\n'):
        return line[:-1]
    return line


def cat_stream(reader, number_all=False, number_nonblank=False, out=None):
    """
    Copies one stream to `out` a line at a time. Numbering starts at 1 for
    every stream; with -b, empty lines are printed but not counted.
    """
    if out is None:
        out = sys.stdout
    line_number = 0
    for _, line in reader:
        line = strip_terminator(line)

        prefix = ""
        if number_all or (number_nonblank and line):
            line_number += 1
            prefix = f"{line_number:{NUMBER_WIDTH}d}\t"

        out.write(f"{prefix}{line}\n")


def run(files, number_all=False, number_nonblank=False) -> int:
    exit_status = EX_SUCCESS

    for filename in files:
        try:
            reader = resolve(filename)
        except OSError as e:
            InputDiagnostic.from_os_error(filename, e).report()
            continue

        with reader:
            try:
                cat_stream(reader, number_all, number_nonblank)
            except BrokenPipeError:
                raise
            except OSError as e:
                sys.stdout.flush()
                InputDiagnostic.from_os_error(filename, e).report(program_name())
                exit_status = EX_FAILURE

    return exit_status


def main():
    """Parses arguments and runs the cat logic."""
    parser = argparse.ArgumentParser(
        description="Concatenate and print files.",
        usage="%(prog)s [-n | -b] [file ...]"
    )
    parser.add_argument('-V', '--version', action='version', version=f'%(prog)s {__version__}')

    numbering_group = parser.add_mutually_exclusive_group()
    numbering_group.add_argument('-n', '--number', action='store_true', help='Number all output lines.')
    numbering_group.add_argument('-b', '--number-nonblank', action='store_true',
                                 help='Number non-empty output lines.')

    parser.add_argument('files', nargs='*', default=[STDIN_TOKEN],
                        help="Files to process. Reads from stdin if none are given or for '-'.")

    try:
        args = parser.parse_args()
    except SystemExit as e:
        sys.exit(EX_SUCCESS if e.code == 0 else EX_FAILURE)

    try:
        exit_status = run(args.files, number_all=args.number, number_nonblank=args.number_nonblank)
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
