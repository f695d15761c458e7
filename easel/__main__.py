"""Command line driver: `python -m easel program.json [--dbg]`."""

from __future__ import annotations

import argparse
import logging
import sys

from easel.config import get_log_level
from easel.debug_utils.pprint import format_scope
from easel.errors import EaselError
from easel.interpreter import Interpreter
from easel.reader.ast_loader import load_ast_file


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="easel", description="Run a serialized Easel program.")
    parser.add_argument("program", help="path to the program's JSON AST")
    parser.add_argument(
        "--dbg",
        action="store_true",
        help="log every executed statement and dump the final root scope to stderr",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.dbg else get_log_level(),
        format="%(levelname)s %(name)s: %(message)s",
    )
    try:
        program = load_ast_file(args.program)
    except OSError as ex:
        print(f"Failed to read file: {ex}", file=sys.stderr)
        return 1
    except EaselError as ex:
        print(f"Interpreter Error: {ex}", file=sys.stderr)
        return 1
    try:
        scope = Interpreter().run(program)
    except EaselError as ex:
        print(f"Interpreter Error: {ex}", file=sys.stderr)
        return 1
    if args.dbg:
        print(format_scope(scope), end="", file=sys.stderr)
    return 0


if __name__ == "__main__":
    sys.exit(main())
