"""Command line entry point: `lispoo PATH`."""

from __future__ import annotations

import argparse
import logging
import sys

from lispoo import config
from lispoo.errors import LispooError
from lispoo.interpreter import Interpreter

logger = logging.getLogger("lispoo.cli")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="lispoo",
        description="Run a lispoo program.",
    )
    parser.add_argument("path", help="source file to evaluate")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(format="%(name)s: %(levelname)s: %(message)s")
    logging.getLogger("lispoo").setLevel(config.get_log_level())
    sys.setrecursionlimit(max(sys.getrecursionlimit(), config.get_recursion_limit()))

    try:
        Interpreter().run_file(args.path)
    except LispooError as exc:
        logger.debug("aborting on %s", type(exc).__name__)
        print(f"error: {exc}", file=sys.stderr)
        return 1
    except RecursionError:
        print("fatal: maximum evaluation depth exceeded", file=sys.stderr)
        return 1
    finally:
        sys.stdout.flush()
    return 0


if __name__ == "__main__":
    sys.exit(main())
