# axcalc, a simple calculator.
#
# Copyright (c) 2024 zhengxyz123
#
# Permission is hereby granted, free of charge, to any person obtaining a copy
# of this software and associated documentation files (the "Software"), to deal
# in the Software without restriction, including without limitation the rights
# to use, copy, modify, merge, publish, distribute, sublicense, and/or sell
# copies of the Software, and to permit persons to whom the Software is
# furnished to do so, subject to the following conditions:
#
# The above copyright notice and this permission notice shall be included in all
# copies or substantial portions of the Software.
#
# THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND, EXPRESS OR
# IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF MERCHANTABILITY,
# FITNESS FOR A PARTICULAR PURPOSE AND NONINFRINGEMENT. IN NO EVENT SHALL THE
# AUTHORS OR COPYRIGHT HOLDERS BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER
# LIABILITY, WHETHER IN AN ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM,
# OUT OF OR IN CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN THE
# SOFTWARE.

import argparse
import logging
import math
import sys
from pathlib import Path
from typing import Mapping, TextIO

from . import __version__, calculate, config, constants, history, units
from .errors import AxCalcError, SettingError, UnitError, display_error
from .functions import registry
from .logging_config import configure_logging

try:
    import readline

    is_rl_available = True
except ModuleNotFoundError:
    is_rl_available = False

logger = logging.getLogger(__name__)

MAX_PRECISION = 20

help_text = """\
Commands:
  <expression>                   evaluate an expression, e.g. 2 + 3 * 4
  name = <expression>            assign a variable, e.g. area = pi * r^2
  convert <v> <from> to <to>     convert units, e.g. convert 10 km to m
  precision [n]                  show or set significant digits (0-20)
  vars                           show stored variables
  clear                          forget all variables
  history                        show calculation history
  help                           show this message
  exit                           leave the calculator

Operators:    + - * / ^ !  == != < <= > >=  && ||
Functions:    {functions}
Units:        length {length}; weight {weight}; time {time}"""


def format_result(value: float, precision: int) -> str:
    if math.isnan(value):
        return "undefined (NaN)"
    if math.isinf(value):
        return "+∞" if value > 0 else "-∞"
    return f"{value:.{precision}g}"


class Context:
    def __init__(
        self,
        consts: Mapping[str, float] | None = None,
        history_file: Path | None = None,
        out: TextIO | None = None,
    ) -> None:
        self._code = ""
        self._commands = [
            "clear",
            "convert",
            "exit",
            "help",
            "history",
            "precision",
            "quit",
            "variables",
            "vars",
        ]
        self._settings: dict[str, int] = {"precision": 6}
        self._variables: dict[str, float] = {}
        self._constants = (
            consts if consts is not None else constants.load_or_default(config.CONSTANTS_FILE)
        )
        self.history_file = history_file or config.HISTORY_FILE
        self.out = out or sys.stdout
        self.redirected_stdin = False
        try:
            self.set_precision(config.PRECISION)
        except SettingError as error:
            logger.warning("ignoring AXCALC_PRECISION: %s", error.message)

    @property
    def variables(self) -> dict[str, float]:
        return self._variables

    @property
    def precision(self) -> int:
        return self._settings["precision"]

    def enable_completion(self) -> None:
        if is_rl_available:
            readline.parse_and_bind("tab: complete")
            readline.set_completer(self._rl_completer)

    def _rl_completer(self, text: str, state: int) -> str | None:
        names = set(self._commands) | set(self._variables) | set(self._constants)
        names |= {name for name in registry if name.isidentifier()}
        matches = sorted(name for name in names if name.startswith(text))
        if state < len(matches):
            return matches[state]
        return None

    def _print(self, *args) -> None:
        print(*args, file=self.out)

    def format(self, value: float) -> str:
        return format_result(value, self.precision)

    def set_precision(self, value: str | int) -> None:
        try:
            precision = int(value)
        except ValueError:
            raise SettingError(
                self._code, message=f"invalid number: '{value}'"
            ) from None
        if not 0 <= precision <= MAX_PRECISION:
            raise SettingError(
                self._code, message=f"precision must be between 0 and {MAX_PRECISION}"
            )
        self._settings["precision"] = precision

    def show_help(self) -> None:
        self._print(
            help_text.format(
                functions=", ".join(sorted(n for n in registry if n.isidentifier())),
                length=", ".join(units.length_units),
                weight=", ".join(units.weight_units),
                time=", ".join(units.time_units),
            )
        )

    def show_variables(self) -> None:
        if not self._variables:
            self._print("no variables defined")
            return
        for name in sorted(self._variables):
            self._print(f"{name}={self.format(self._variables[name])}")

    def show_history(self) -> None:
        try:
            entries = history.read(self.history_file)
        except (OSError, ValueError) as error:
            logger.warning("failed to read history: %s", error)
            entries = []
        if not entries:
            self._print("no history data")
            return
        for entry in reversed(entries):
            self._print(f"{entry.expression} = {self.format(entry.result)}")

    def precision_command(self, args: list[str]) -> None:
        if len(args) > 1:
            raise SettingError(self._code, message="usage: precision [n]")
        if args:
            self.set_precision(args[0])
        if not self.redirected_stdin or not args:
            self._print(f"precision={self.precision}")

    def convert(self, args: list[str]) -> float:
        if len(args) != 4 or args[2] != "to":
            raise UnitError(
                self._code, message="usage: convert <value> <from> to <to>"
            )
        value = calculate(args[0], dict(self._variables), self._constants)
        try:
            result = units.convert(value, args[1], args[3])
        except UnitError as error:
            raise error.locate(self._code)
        self._print(
            f"{self.format(value)} {args[1]} = {self.format(result)} {args[3]}"
        )
        return result

    def calculate(self, code: str) -> float:
        result = calculate(code, self._variables, self._constants)
        self._print(self.format(result))
        try:
            history.append(self.history_file, code, result)
        except (OSError, ValueError) as error:
            logger.warning("failed to save history: %s", error)
        return result

    def execute(self, code: str) -> float | None:
        """Run one line of input, returning the numeric result if there is one."""
        self._code = code = code.strip()
        if not code:
            return None
        command, *args = code.split()
        logger.debug("executing %r", code)
        if command in ("exit", "quit") and not args:
            sys.exit(0)
        elif command == "help" and not args:
            self.show_help()
        elif command in ("vars", "variables") and not args:
            self.show_variables()
        elif command == "clear" and not args:
            self._variables.clear()
            self._print("variables cleared")
        elif command == "history" and not args:
            self.show_history()
        elif command == "precision":
            self.precision_command(args)
        elif command == "convert":
            return self.convert(args)
        else:
            return self.calculate(code)
        return None


def main() -> int:
    parser = argparse.ArgumentParser(prog="axcalc", description="a simple calculator")
    parser.add_argument(
        "-q",
        "--quiet",
        dest="banner",
        action="store_false",
        help="don't print initial banner",
    )
    parser.add_argument(
        "-v", "--version", action="version", version=f"axcalc {__version__}"
    )
    parser.add_argument(
        "expression", nargs="*", help="evaluate an expression and exit"
    )
    args = parser.parse_args()
    configure_logging(config.LOG_LEVEL)

    ctx = Context()
    if args.expression:
        try:
            ctx.execute(" ".join(args.expression))
        except AxCalcError as error:
            display_error(error)
            return 1
        return 0
    if not sys.stdin.isatty():
        ctx.redirected_stdin = True
        for line in sys.stdin.readlines():
            try:
                ctx.execute(line)
            except AxCalcError as error:
                display_error(error)
                return 1
        return 0
    ctx.enable_completion()
    if args.banner:
        print(f"axcalc {__version__}, a simple calculator")
        print("Copyright (c) 2024 zhengxyz123")
        print("This is an open source software released under MIT license.")
        print("Type 'help' for commands.")
    while True:
        try:
            code = input(">>> ")
        except (EOFError, KeyboardInterrupt):
            print()
            return 0
        try:
            ctx.execute(code)
        except AxCalcError as error:
            display_error(error)
