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

"""Built-in function library.

Every function takes and returns ``float``. Trigonometric functions work in
degrees. Domain problems raise :class:`~axcalc.errors.EvalError` subclasses
instead of leaking ``ValueError``/``OverflowError`` from :mod:`math`.
"""

import math
from collections import Counter
from typing import Callable, NamedTuple

from .errors import (
    ArityError,
    DivisionByZeroError,
    DomainError,
    NumericOverflowError,
    UndefinedResultError,
    UnknownFunctionError,
)

FACTORIAL_LIMIT = 170


class Function(NamedTuple):
    name: str
    min_args: int
    max_args: int | None
    call: Callable[..., float]

    def expected(self) -> str:
        if self.max_args is None:
            return f"at least {self.min_args}"
        if self.min_args == self.max_args:
            return str(self.min_args)
        return f"{self.min_args} or {self.max_args}"

    def check_arity(self, got: int) -> None:
        if got < self.min_args or (self.max_args is not None and got > self.max_args):
            raise ArityError(self.name, self.expected(), got)


registry: dict[str, Function] = {}


def define(name: str, min_args: int = 1, max_args: int | None = -1):
    """Register the decorated callable under ``name``.

    ``max_args`` defaults to ``min_args``; pass ``None`` for variadic
    functions.
    """

    def wrapper(func: Callable[..., float]) -> Callable[..., float]:
        upper = min_args if max_args == -1 else max_args
        registry[name] = Function(name, min_args, upper, func)
        return func

    return wrapper


def lookup(name: str) -> Function:
    try:
        return registry[name]
    except KeyError:
        raise UnknownFunctionError(name) from None


def is_function_name(word: str) -> bool:
    return word in registry


def power(base: float, exponent: float) -> float:
    if base == 0 and exponent < 0:
        raise DomainError("zero raised to a negative power")
    if base < 0 and not float(exponent).is_integer():
        raise DomainError("negative base with non-integer exponent")
    try:
        result = math.pow(base, exponent)
    except OverflowError:
        raise NumericOverflowError(f"{base:g}^{exponent:g} is too large") from None
    if math.isinf(result) and not (math.isinf(base) or math.isinf(exponent)):
        raise NumericOverflowError(f"{base:g}^{exponent:g} is too large")
    return result


@define("!")
def factorial(n: float) -> float:
    if math.isnan(n) or n < 0 or not float(n).is_integer():
        raise DomainError("factorial only defined for non-negative integers")
    if n > FACTORIAL_LIMIT:
        raise NumericOverflowError(
            f"factorial too large: {n:g}! exceeds maximum representable value "
            f"(limit: {FACTORIAL_LIMIT}!)"
        )
    return float(math.factorial(int(n)))


def _finite(name: str, x: float) -> float:
    if math.isinf(x):
        raise DomainError(f"{name} requires a finite input")
    return x


@define("sin")
def sin(x: float) -> float:
    return math.sin(math.radians(_finite("sin", x)))


@define("cos")
def cos(x: float) -> float:
    return math.cos(math.radians(_finite("cos", x)))


@define("tan")
def tan(x: float) -> float:
    _finite("tan", x)
    if abs(math.fmod(x, 180)) == 90:
        raise UndefinedResultError(f"tan({x:g}) is undefined")
    return math.tan(math.radians(x))


@define("asin")
def asin(x: float) -> float:
    if not -1 <= x <= 1:
        raise DomainError("asin input must be in [-1, 1]")
    return math.degrees(math.asin(x))


@define("acos")
def acos(x: float) -> float:
    if not -1 <= x <= 1:
        raise DomainError("acos input must be in [-1, 1]")
    return math.degrees(math.acos(x))


@define("atan")
def atan(x: float) -> float:
    return math.degrees(math.atan(x))


@define("atan2", 2)
def atan2(y: float, x: float) -> float:
    return math.degrees(math.atan2(y, x))


@define("deg2rad")
def deg2rad(x: float) -> float:
    return math.radians(x)


@define("rad2deg")
def rad2deg(x: float) -> float:
    return math.degrees(x)


def _positive(name: str, x: float) -> float:
    if not x > 0:
        raise DomainError(f"{name} requires a positive input")
    return x


@define("sqrt")
def sqrt(x: float) -> float:
    if x < 0:
        raise DomainError("sqrt of a negative number")
    return math.sqrt(x)


@define("ln")
def ln(x: float) -> float:
    return math.log(_positive("ln", x))


@define("log", 1, 2)
def log(x: float, base: float = 10) -> float:
    _positive("log", x)
    if base <= 0 or base == 1:
        raise DomainError("log base must be positive and not equal to 1")
    if base == 10:
        return math.log10(x)
    return math.log(x, base)


@define("log10")
def log10(x: float) -> float:
    return math.log10(_positive("log10", x))


@define("log2")
def log2(x: float) -> float:
    return math.log2(_positive("log2", x))


@define("exp")
def exp(x: float) -> float:
    try:
        return math.exp(x)
    except OverflowError:
        raise NumericOverflowError(f"exp({x:g}) is too large") from None


@define("pow", 2)
def pow_(base: float, exponent: float) -> float:
    return power(base, exponent)


@define("abs")
def abs_(x: float) -> float:
    return math.fabs(x)


@define("ceil")
def ceil(x: float) -> float:
    return float(math.ceil(x)) if math.isfinite(x) else x


@define("floor")
def floor(x: float) -> float:
    return float(math.floor(x)) if math.isfinite(x) else x


@define("trunc")
def trunc(x: float) -> float:
    return float(math.trunc(x)) if math.isfinite(x) else x


@define("round")
def round_(x: float) -> float:
    # half away from zero, 2.5 -> 3 and -4.5 -> -5
    if not math.isfinite(x):
        return x
    magnitude = math.fabs(x)
    whole = math.floor(magnitude)
    return math.copysign(whole + (magnitude - whole >= 0.5), x)


@define("sign")
def sign(x: float) -> float:
    if x > 0:
        return 1.0
    if x < 0:
        return -1.0
    return 0.0


@define("mod", 2)
def mod(x: float, y: float) -> float:
    if y == 0:
        raise DivisionByZeroError()
    return math.fmod(_finite("mod", x), y)


@define("max", 2, None)
def max_(*values: float) -> float:
    return max(values)


@define("min", 2, None)
def min_(*values: float) -> float:
    return min(values)


@define("sum", 1, None)
def sum_(*values: float) -> float:
    try:
        return math.fsum(values)
    except OverflowError:
        raise NumericOverflowError("sum is too large") from None
    except ValueError:
        # fsum refuses inf + -inf
        raise UndefinedResultError("sum of opposite infinities") from None


@define("product", 1, None)
def product(*values: float) -> float:
    return math.prod(values)


@define("mean", 1, None)
def mean(*values: float) -> float:
    return sum_(*values) / len(values)


@define("median", 1, None)
def median(*values: float) -> float:
    ordered = sorted(values)
    mid = len(ordered) // 2
    if len(ordered) % 2:
        return ordered[mid]
    return (ordered[mid - 1] + ordered[mid]) / 2


@define("mode", 1, None)
def mode(*values: float) -> float:
    counts: Counter[float] = Counter()
    best, best_count = values[0], 0
    for value in values:
        counts[value] += 1
        if counts[value] > best_count:
            best, best_count = value, counts[value]
    return best
