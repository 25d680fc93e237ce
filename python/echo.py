#!/usr/bin/env python3
"""
Name: echo
Description: echo arguments
License: perl

Prints the command line arguments separated by spaces. A newline is
printed at the end unless the '-n' option is given as the first argument.
At least one word of text is required.
"""

import sys

from streams import program_name

EX_SUCCESS = 0
EX_FAILURE = 1


def render(words, omit_newline=False) -> str:
    return " ".join(words) + ("" if omit_newline else "\n")


def main():
    args = sys.argv[1:]
    omit_newline = False

    # Only a leading '-n' is an option; everything else is text.
    if args and args[0] == '-n':
        omit_newline = True
        args.pop(0)

    if not args:
        print(f"usage: {program_name()} [-n] text ...", file=sys.stderr)
        sys.exit(EX_FAILURE)

    sys.stdout.write(render(args, omit_newline))
    sys.exit(EX_SUCCESS)


if __name__ == "__main__":
    main()
