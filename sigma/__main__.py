"""Command line calculator: ``python -m sigma "(+ 1 2)"``.

Each expression is evaluated on its own against the default builtin table;
definitions do not carry over from one expression to the next.
"""
from __future__ import annotations

import argparse
import logging
import sys
from typing import Iterable, Optional, TextIO

from sigma.builtins import default_builtins
from sigma.interpreter import evaluate


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="sigma",
        description="Evaluate Sigma expressions with the default calculator builtins.",
    )
    parser.add_argument(
        "expressions",
        nargs="*",
        help="expressions to evaluate; read one per line from stdin when omitted",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="enable debug logging")
    parser.add_argument(
        "--lax-arity",
        action="store_true",
        help="tolerate closure calls with too many or too few arguments",
    )
    return parser


def run(
    expressions: Iterable[str],
    strict_arity: Optional[bool],
    out: TextIO,
    err: TextIO,
) -> int:
    builtins = default_builtins()
    status = 0
    for source in expressions:
        if not source.strip():
            continue
        value, error = evaluate(builtins, source, strict_arity=strict_arity)
        if error is not None:
            print(f"error: {error}", file=err)
            status = 1
        else:
            print(value, file=out)
    return status


def main(argv: Optional[list[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    # None defers to SIGMA_STRICT_ARITY
    strict_arity = False if args.lax_arity else None
    expressions = args.expressions or sys.stdin
    return run(expressions, strict_arity, sys.stdout, sys.stderr)


if __name__ == "__main__":
    sys.exit(main())
