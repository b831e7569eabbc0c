"""
Interactive front end for chao.

Reads one line at a time, keeps prompting with a continuation prompt while the
input is an unfinished expression, evaluates every expression read and prints
`=> <value>`. Line editing and history come from `readline` where the platform
provides it; history is persisted to the configured history file.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Callable, Optional, TextIO

from chao import Expression, config
from chao.interpreter import Interpreter
from chao.log_support import setup_logging
from chao.printer import colorize, render
from chao.reader.parser import parse_all
from chao.types.errors import ChaoConfigError, ParseError
from chao.types.fault import Error

try:
    import readline
except ImportError:  # line editing is optional (e.g. Windows)
    readline = None

logger = logging.getLogger(__name__)

PROMPT = "chao> "
CONTINUATION_PROMPT = "....> "


class Repl:
    def __init__(
        self,
        interpreter: Optional[Interpreter] = None,
        history_file: Optional[Path] = None,
        color: bool = False,
        input_fn: Callable[[str], str] = input,
        output: Optional[TextIO] = None,
    ):
        self.interpreter = interpreter if interpreter is not None else Interpreter()
        self.history_file = history_file
        self.color = color
        self.input_fn = input_fn
        self.output = output if output is not None else sys.stdout

    def write(self, text: str) -> None:
        self.output.write(text + "\n")

    def load_history(self) -> None:
        if readline is None or self.history_file is None:
            return
        try:
            readline.read_history_file(self.history_file)
        except OSError as ex:
            logger.debug("no history loaded from %s: %s", self.history_file, ex)

    def save_history(self) -> None:
        if readline is None or self.history_file is None:
            return
        try:
            readline.write_history_file(self.history_file)
        except OSError as ex:
            logger.warning("could not save history to %s: %s", self.history_file, ex)

    def read(self) -> list[Expression]:
        """Read lines until they form complete expressions."""
        lines = [self.input_fn(PROMPT)]
        while True:
            try:
                return list(parse_all("\n".join(lines)))
            except ParseError as ex:
                if not ex.incomplete:
                    raise
            lines.append(self.input_fn(CONTINUATION_PROMPT))

    def print_result(self, result: Expression) -> None:
        self.write("=> " + (colorize(result) if self.color else render(result)))

    def run(self) -> int:
        self.load_history()
        try:
            while True:
                try:
                    exprs = self.read()
                except KeyboardInterrupt:
                    self.write("")
                    continue
                except EOFError:
                    self.write("")
                    break
                except ParseError as ex:
                    self.write(f"error: {ex}")
                    continue
                for expr in exprs:
                    result = self.interpreter.eval_expr(expr)
                    logger.debug("%s => %s", render(expr), render(result))
                    self.print_result(result)
        finally:
            self.save_history()
        return 0


def run_once(interpreter: Interpreter, code: str, output: TextIO, color: bool = False) -> int:
    """Evaluate `code`, print the last result; non-zero status on any fault."""
    try:
        result = interpreter.eval(code)
    except ParseError as ex:
        output.write(f"error: {ex}\n")
        return 1
    output.write((colorize(result) if color else render(result)) + "\n")
    return 1 if isinstance(result, Error) else 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="chao", description="chao s-expression interpreter")
    parser.add_argument("-e", "--eval", dest="code", metavar="EXPR",
                        help="evaluate EXPR, print the result and exit")
    parser.add_argument("--max-depth", type=int, metavar="N",
                        help="evaluation depth ceiling (default: $CHAO_MAX_DEPTH or 128)")
    parser.add_argument("--history-file", type=Path, metavar="PATH",
                        help="REPL history file (default: $CHAO_HISTORY_FILE or .chaohistory)")
    parser.add_argument("--no-color", action="store_true",
                        help="do not colour printed values")
    parser.add_argument("--log-level", choices=("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"),
                        help="logging level (default: $CHAO_LOG_LEVEL or WARNING)")
    return parser


def main(argv: Optional[list[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        log_level = args.log_level or config.get_log_level()
        max_depth = args.max_depth if args.max_depth is not None else config.get_max_depth()
        history_file = args.history_file or config.get_history_file()
    except ChaoConfigError as ex:
        parser.error(str(ex))
    if max_depth < 1:
        parser.error("--max-depth must be positive")

    setup_logging(log_level)
    interpreter = Interpreter(max_depth=max_depth)
    color = not args.no_color and sys.stdout.isatty()

    if args.code is not None:
        return run_once(interpreter, args.code, sys.stdout, color)
    return Repl(interpreter, history_file=history_file, color=color).run()
