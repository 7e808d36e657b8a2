#!/usr/bin/env python3
"""
CLI for the astlisp evaluator.

Usage:
    python -m astlisp [FILE] [--dump-ast] [--dump-ast-options JSON] [--log-level LEVEL]

Reads a JSON-encoded program from FILE, or from standard input when no file is
given, evaluates each top-level node in order and prints one result per line.
Evaluation stops at the first error.

Examples:
    echo '[{"type":"list","value":[{"type":"symbol","value":"+"},
           {"type":"number","value":1},{"type":"number","value":2}]}]' | python -m astlisp
    3

Exit status: 0 on success (including empty input), 1 for bad input,
2 for an evaluation error.
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Sequence, TextIO

from astlisp.config import get_log_level
from astlisp.debug_utils.pprint import pprint_node, plain_options, load_options_from_json, DEFAULT_OPTIONS
from astlisp.errors import BadInput, EvalError
from astlisp.interpreter import Interpreter, read_input
from astlisp.printer import print_values
from astlisp.reader.decoder import decode_program

logger = logging.getLogger("astlisp")

EXIT_OK = 0
EXIT_BAD_INPUT = 1
EXIT_EVAL_ERROR = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="astlisp",
        description="Evaluate a JSON-encoded astlisp program.",
    )
    parser.add_argument("file", nargs="?", help="Program file (default: read stdin)")
    parser.add_argument("--dump-ast", action="store_true", help="Pretty-print the decoded tree to stderr")
    parser.add_argument(
        "--dump-ast-options",
        default=None,
        metavar="JSON",
        help="Pretty-printer options for --dump-ast, e.g. '{\"max_line_length\": 40}'",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        type=str.upper,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Logging level (default: $ASTLISP_LOG_LEVEL or WARNING)",
    )
    return parser


def main(
    argv: Sequence[str] | None = None,
    stdin: TextIO | None = None,
    stdout: TextIO | None = None,
    stderr: TextIO | None = None,
) -> int:
    stdout = stdout or sys.stdout
    stderr = stderr or sys.stderr
    args = build_parser().parse_args(argv)

    level = args.log_level or get_log_level()
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")

    try:
        data = read_input(args.file, stdin)
    except OSError as ex:
        print(f"error: cannot read {args.file}: {ex.strerror}", file=stderr)
        return EXIT_BAD_INPUT

    if data is None:
        logger.info("No input, nothing to evaluate")
        return EXIT_OK

    try:
        nodes = decode_program(data)
    except BadInput as ex:
        print(f"error: {ex.describe()}", file=stderr)
        return EXIT_BAD_INPUT

    if args.dump_ast:
        opts = DEFAULT_OPTIONS if stderr.isatty() else plain_options()
        if args.dump_ast_options:
            opts = load_options_from_json(args.dump_ast_options, base=opts)
        for node in nodes:
            print(pprint_node(node, options=opts), file=stderr)

    interp = Interpreter()
    try:
        count = print_values(interp.run(nodes), stdout)
    except EvalError as ex:
        print(f"error: {ex.describe()}", file=stderr)
        return EXIT_EVAL_ERROR
    except RecursionError:
        print("error: RecursionError: expression nested too deeply to evaluate", file=stderr)
        return EXIT_EVAL_ERROR
    logger.info("Evaluated %d top-level node(s)", count)
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
