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

import logging
import re
from typing import Iterator, NamedTuple

from .errors import (
    InvalidCharacterError,
    InvalidOperatorError,
    MalformedExponentError,
    MultipleDecimalPointsError,
)
from .functions import is_function_name

logger = logging.getLogger(__name__)

NUMBER = "number"
OPERATOR = "operator"
PAREN = "paren"
FUNCTION = "function"
IDENTIFIER = "identifier"
ASSIGN = "assign"
COMPARISON = "comparison"
LOGICAL = "logical"


class Token(NamedTuple):
    kind: str
    text: str
    where: tuple[int, int] = (0, 0)

    def matches(self, kind: str, *texts: str) -> bool:
        return self.kind == kind and (not texts or self.text in texts)


# Order matters: two-character operators must be tried before their
# one-character prefixes.
token_patterns = {
    "num": r"[0-9.]+(?:[eE][+\-]?[0-9]*)?",
    "name": r"[A-Za-z_][A-Za-z0-9_]*",
    "cmp": r"==|!=|>=|<=|>|<",
    "logic": r"&&|\|\|",
    "badop": r"[&|]",
    "assign": r"=",
    "op": r"[+\-*/^!,]",
    "paren": r"[()]",
    "skip": r"\s+",
    "error": r".",
}
token_regex = re.compile(
    "|".join(f"(?P<{name}>{text})" for name, text in token_patterns.items())
)


def _check_number(text: str, code: str, where: tuple[int, int]) -> None:
    mantissa, _, exponent = text.lower().partition("e")
    if mantissa.count(".") > 1:
        raise MultipleDecimalPointsError(text, code, where)
    if not any(c.isdigit() for c in mantissa):
        raise InvalidCharacterError(".", code, where)
    if "e" in text.lower() and not exponent.lstrip("+-").isdigit():
        raise MalformedExponentError(text, code, where)


def _needs_multiplication(last: Token, new: Token) -> bool:
    if not (last.kind == NUMBER or last.matches(PAREN, ")")):
        return False
    return new.kind in (NUMBER, FUNCTION, IDENTIFIER) or new.matches(PAREN, "(")


def scan(code: str) -> Iterator[Token]:
    """Yield the raw tokens of ``code`` without implicit multiplication."""
    for mo in token_regex.finditer(code):
        kind = str(mo.lastgroup)
        value = mo.group()
        where = mo.start(), mo.end()
        if kind == "skip":
            continue
        elif kind == "num":
            _check_number(value, code, where)
            yield Token(NUMBER, value, where)
        elif kind == "name":
            yield Token(FUNCTION if is_function_name(value) else IDENTIFIER, value, where)
        elif kind == "cmp":
            yield Token(COMPARISON, value, where)
        elif kind == "logic":
            yield Token(LOGICAL, value, where)
        elif kind == "badop":
            raise InvalidOperatorError(value, code, where)
        elif kind == "assign":
            yield Token(ASSIGN, value, where)
        elif kind == "op":
            yield Token(OPERATOR, value, where)
        elif kind == "paren":
            yield Token(PAREN, value, where)
        else:
            raise InvalidCharacterError(value, code, where)


def tokenize(code: str) -> list[Token]:
    """Split ``code`` into tokens, inserting ``*`` where it is implied.

    ``2sin(90)`` becomes ``2 * sin(90)`` and ``(1+2)(3)`` becomes
    ``(1+2) * (3)``.
    """
    tokens: list[Token] = []
    for token in scan(code):
        if tokens and _needs_multiplication(tokens[-1], token):
            start = token.where[0]
            tokens.append(Token(OPERATOR, "*", (start, start)))
        tokens.append(token)
    logger.debug("tokenized %r into %d tokens", code, len(tokens))
    return tokens
