#!/usr/bin/env python3
"""
Name: textutils
Description: run one of the text utilities by name
License: artistic2
"""

import sys
import argparse
import importlib

from streams import __version__

EX_SUCCESS = 0
EX_FAILURE = 1

# Tool name -> one-line summary shown by --list
TOOLS = {
    'cat': 'concatenate and print files',
    'echo': 'echo arguments',
    'head': 'print the first lines or bytes of a file',
    'wc': 'line, word, byte, and character counter',
}


def build_parser():
    parser = argparse.ArgumentParser(
        description="Run one of the text utilities by name.",
        usage="%(prog)s [-l] [-V] tool [arg ...]"
    )
    parser.add_argument('-V', '--version', action='version', version=f'%(prog)s {__version__}')
    parser.add_argument('-l', '--list', action='store_true', help='List the available tools.')
    parser.add_argument('tool', nargs='?', help='Name of the tool to run.')
    parser.add_argument('tool_args', nargs=argparse.REMAINDER, help='Arguments passed to the tool.')
    return parser


def format_tool_list() -> str:
    width = max(len(name) for name in TOOLS)
    return "\n".join(f"{name:<{width}}  {TOOLS[name]}" for name in sorted(TOOLS))


def run_tool(tool, tool_args):
    """Runs the tool's main() as if it had been invoked directly."""
    module = importlib.import_module(tool)
    sys.argv = [tool] + list(tool_args)
    module.main()


def main():
    parser = build_parser()
    try:
        args = parser.parse_args()
    except SystemExit as e:
        sys.exit(EX_SUCCESS if e.code == 0 else EX_FAILURE)

    if args.list:
        print(format_tool_list())
        sys.exit(EX_SUCCESS)

    if args.tool is None:
        parser.print_usage(sys.stderr)
        sys.exit(EX_FAILURE)

    if args.tool not in TOOLS:
        print(f"Error: unknown tool '{args.tool}'", file=sys.stderr)
        sys.exit(EX_FAILURE)

    run_tool(args.tool, args.tool_args)


if __name__ == "__main__":
    main()
