"""
Line-oriented shell for rlisp.

Reads one line at a time, evaluates it against a session-long root
environment and prints the display form of the result. Parse failures print a
generic error and skip evaluation; evaluation failures print their message.
Both leave the session running. History is kept in a file via readline.
"""

from __future__ import annotations

import argparse
import logging
import readline
import sys
from pathlib import Path
from typing import Callable, TextIO

from rlisp import config
from rlisp.errors import RlispError, RlispSyntaxError
from rlisp.interpreter import Interpreter

log = logging.getLogger(__name__)

PARSE_ERROR_MESSAGE = "Error!"
EXIT_MESSAGE = "exiting..."


class Repl:
    def __init__(
        self,
        interp: Interpreter | None = None,
        *,
        prompt: str | None = None,
        history_path: Path | None = None,
        input_fn: Callable[[str], str] | None = None,
        output: TextIO | None = None,
    ):
        self.interp = interp if interp is not None else Interpreter()
        self.prompt = prompt if prompt is not None else config.get_prompt()
        self.history_path = history_path if history_path is not None else config.get_history_path()
        self.input_fn = input_fn if input_fn is not None else input
        self.output = output if output is not None else sys.stdout

    def _write(self, text: str) -> None:
        self.output.write(text + "\n")

    def load_history(self) -> None:
        if not self.history_path.exists():
            return
        try:
            readline.read_history_file(str(self.history_path))
        except OSError as e:
            log.warning("could not read history from %s: %s", self.history_path, e)

    def save_history(self) -> None:
        try:
            readline.write_history_file(str(self.history_path))
        except OSError as e:
            log.warning("could not write history to %s: %s", self.history_path, e)

    def handle_line(self, line: str) -> str | None:
        """Evaluate one line and return the text to print (None for a blank line)."""
        if not line.strip():
            return None
        try:
            return self.interp.eval_display(line)
        except RlispSyntaxError as e:
            log.debug("parse error: %s", e)
            return PARSE_ERROR_MESSAGE
        except RlispError as e:
            log.debug("evaluation error: %s", e)
            return str(e)

    def run(self) -> int:
        self.load_history()
        try:
            while True:
                try:
                    line = self.input_fn(self.prompt)
                except (EOFError, KeyboardInterrupt):
                    self._write(EXIT_MESSAGE)
                    break
                result = self.handle_line(line)
                if result is not None:
                    self._write(result)
        finally:
            self.save_history()
        return 0


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="rlisp", description="rlisp interactive shell")
    parser.add_argument("--history", type=Path, default=None,
                        help="history file (default: $RLISP_HISTORY_FILE or history.txt)")
    parser.add_argument("--log-level", default=None,
                        help="logging level name (default: $RLISP_LOG_LEVEL or WARNING)")
    args = parser.parse_args(argv)

    level = config.get_log_level()
    if args.log_level:
        level = logging.getLevelName(args.log_level.upper())
        if not isinstance(level, int):
            parser.error(f"unknown log level: {args.log_level}")
    logging.basicConfig(level=level, format="%(asctime)s %(name)s %(levelname)s: %(message)s")

    return Repl(history_path=args.history).run()
