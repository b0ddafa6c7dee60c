from __future__ import annotations

import logging
from pathlib import Path
from typing import TextIO

from lispoo import LispValue
from lispoo import config
from lispoo.builtin.env_builtin import register
from lispoo.errors import LispooStartupError
from lispoo.evaluation.evaluator import evaluate
from lispoo.reader.parser import read
from lispoo.types.environment import Environment
from lispoo.types.nil import Nil

logger = logging.getLogger("lispoo.interpreter")


class Interpreter:
    """
    Reads and evaluates lispoo programs against one root Environment.
    The root holds every builtin and every top-level define, and lives as
    long as the Interpreter does.
    """

    def __init__(self, out: TextIO | None = None, strict_unbound: bool | None = None):
        if strict_unbound is None:
            strict_unbound = config.strict_unbound()
        self.env = Environment(strict_unbound=strict_unbound)
        register(self.env, out)

    def eval(self, code: str) -> LispValue:
        """Parse every top-level form in `code`, evaluate them in order,
        and return the value of the last one (nil for an empty program)."""
        # Parse everything first so a syntax error anywhere runs nothing
        forms = read(code)
        result: LispValue = Nil
        for form in forms:
            result = evaluate(form, self.env)
        return result

    def run_file(self, path: str | Path) -> LispValue:
        source = read_source(path)
        logger.debug("running %s", path)
        return self.eval(source)


def read_source(path: str | Path) -> str:
    try:
        return Path(path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise LispooStartupError(f"can't open: {path}") from exc
