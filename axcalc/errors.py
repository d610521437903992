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

"""Error hierarchy shared by every stage of the calculator.

Each stage raises exactly one family: the tokenizer raises :class:`LexError`,
the parser :class:`ParseError` and the evaluator :class:`EvalError`. All of
them remember the source line and the span that caused the failure so that
:func:`display_error` can underline it.
"""

import sys
from typing import TextIO


class AxCalcError(Exception):
    def __init__(
        self,
        code: str = "",
        position: tuple[int, int] | None = None,
        message: str | None = None,
    ) -> None:
        self.code = code
        self.position = position
        self.message = message or "found an error"
        super().__init__(self.message)

    def locate(self, code: str) -> "AxCalcError":
        """Attach the source line if the raising stage did not know it."""
        if not self.code:
            self.code = code
        return self


def display_error(error: AxCalcError, file: TextIO | None = None) -> None:
    out = file or sys.stdout
    print(f"{error.message}:", file=out)
    if error.code:
        print(f"  {error.code}", file=out)
    if error.code and error.position:
        highlight = " " * error.position[0] + "^" * max(
            error.position[1] - error.position[0], 1
        )
        print(f"  {highlight}", file=out)


class LexError(AxCalcError):
    pass


class InvalidCharacterError(LexError):
    def __init__(self, char: str, code: str = "", position=None) -> None:
        self.char = char
        super().__init__(code, position, f"invalid character '{char}'")


class MultipleDecimalPointsError(LexError):
    def __init__(self, literal: str, code: str = "", position=None) -> None:
        self.literal = literal
        super().__init__(
            code, position, f"invalid number: multiple decimal points in '{literal}'"
        )


class MalformedExponentError(LexError):
    def __init__(self, literal: str, code: str = "", position=None) -> None:
        self.literal = literal
        super().__init__(
            code, position, f"invalid scientific notation in '{literal}'"
        )


class InvalidOperatorError(LexError):
    def __init__(self, op: str, code: str = "", position=None) -> None:
        self.op = op
        super().__init__(code, position, f"invalid operator '{op}', did you mean '{op * 2}'")


class ParseError(AxCalcError):
    pass


class EmptyExpressionError(ParseError):
    def __init__(self, code: str = "", position=None) -> None:
        super().__init__(code, position, "empty expression")


class UnmatchedParenError(ParseError):
    def __init__(self, code: str = "", position=None) -> None:
        super().__init__(code, position, "expected ')'")


class MissingOperandError(ParseError):
    def __init__(self, context: str, code: str = "", position=None) -> None:
        self.context = context
        super().__init__(code, position, f"missing operand {context}")


class UnexpectedTrailingTokenError(ParseError):
    def __init__(self, text: str, code: str = "", position=None) -> None:
        self.text = text
        super().__init__(code, position, f"unexpected '{text}'")


class EvalError(AxCalcError):
    pass


class DivisionByZeroError(EvalError):
    def __init__(self, code: str = "", position=None) -> None:
        super().__init__(code, position, "division by zero")


class DomainError(EvalError):
    def __init__(self, message: str, code: str = "", position=None) -> None:
        super().__init__(code, position, f"domain error: {message}")


class NumericOverflowError(EvalError):
    def __init__(self, message: str, code: str = "", position=None) -> None:
        super().__init__(code, position, f"overflow: {message}")


class UndefinedResultError(EvalError):
    def __init__(self, message: str, code: str = "", position=None) -> None:
        super().__init__(code, position, f"undefined result: {message}")


class UndefinedVariableError(EvalError):
    def __init__(self, name: str, code: str = "", position=None) -> None:
        self.name = name
        super().__init__(code, position, f"undefined variable '{name}'")


class ArityError(EvalError):
    def __init__(
        self, name: str, expected: str, got: int, code: str = "", position=None
    ) -> None:
        self.name = name
        self.expected = expected
        self.got = got
        plural = "" if expected.split()[-1] == "1" else "s"
        super().__init__(
            code,
            position,
            f"function '{name}' requires {expected} argument{plural}, got {got}",
        )


class UnknownFunctionError(EvalError):
    def __init__(self, name: str, code: str = "", position=None) -> None:
        self.name = name
        super().__init__(code, position, f"unknown function '{name}'")


class InvalidLiteralError(EvalError):
    def __init__(self, text: str, code: str = "", position=None) -> None:
        self.text = text
        super().__init__(code, position, f"invalid number '{text}'")


class UnitError(AxCalcError):
    pass


class SettingError(AxCalcError):
    pass
