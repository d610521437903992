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

"""axcalc, a simple calculator.

The core is a three stage pipeline::

    >>> from axcalc import calculate
    >>> env = {}
    >>> calculate("x = 2^3^2", env)
    512.0
    >>> calculate("x / 8 > 60 && 2sin(90) == 2", env)
    1.0
"""

from typing import Mapping, MutableMapping

from .errors import AxCalcError, EvalError, LexError, ParseError
from .evaluator import evaluate
from .parser import parse
from .tokenizer import Token, tokenize

__version__ = "1.0"


def calculate(
    code: str,
    env: MutableMapping[str, float],
    consts: Mapping[str, float] | None = None,
) -> float:
    """Tokenize, parse and evaluate one line of input."""
    try:
        return evaluate(parse(tokenize(code), code), env, consts)
    except AxCalcError as error:
        raise error.locate(code)


__all__ = [
    "AxCalcError",
    "EvalError",
    "LexError",
    "ParseError",
    "Token",
    "calculate",
    "evaluate",
    "parse",
    "tokenize",
]
