"""Command line entry point: run a script or start a REPL.

    lust script.ls     evaluate every form, exit 1 on the first error
    lust               interactive read-eval-print loop
"""
from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional, Sequence, TextIO

from lust import config
from lust.errors import LustError
from lust.interpreter import Interpreter

logger = logging.getLogger("lust")

PROMPT = "-> "


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="lust", description="Run Lust scripts or start a REPL.")
    parser.add_argument("script", nargs="?", help=f"script to run (conventionally *{config.SCRIPT_SUFFIX})")
    parser.add_argument("--ns", dest="namespace", default=None, help="default namespace name")
    parser.add_argument("-v", "--verbose", action="store_true", help="log at DEBUG level")
    return parser


def run_script(interp: Interpreter, path: str, err: TextIO) -> int:
    try:
        interp.eval_file(path)
    except LustError as exc:
        print(exc, file=err)
        return 1
    return 0


def repl(interp: Interpreter, stdin: TextIO, out: TextIO) -> int:
    while True:
        out.write(PROMPT)
        out.flush()
        line = stdin.readline()
        if not line:
            out.write("\n")
            return 0
        if not line.strip():
            continue
        try:
            print(interp.eval(line), file=out)
        except LustError as exc:
            print(f"Whoops, error detected.\n{exc}.\nPlease, try again...", file=out)


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_arg_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else config.get_log_level(),
        format="%(levelname)s %(name)s: %(message)s",
    )
    interp = Interpreter(default_namespace=args.namespace)
    if args.script is not None:
        logger.debug("running %s", args.script)
        return run_script(interp, args.script, sys.stderr)
    return repl(interp, sys.stdin, sys.stdout)


if __name__ == "__main__":
    sys.exit(main())
