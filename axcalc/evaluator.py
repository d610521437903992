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
import operator
from collections import ChainMap
from typing import Mapping, MutableMapping

from . import functions
from .errors import (
    AxCalcError,
    DivisionByZeroError,
    EvalError,
    InvalidLiteralError,
    UndefinedVariableError,
)
from .nodes import (
    Assignment,
    BinaryOp,
    Comparison,
    FunctionCall,
    Identifier,
    LogicalAnd,
    LogicalOr,
    Node,
    Number,
    UnaryOp,
)

logger = logging.getLogger(__name__)


def _divide(left: float, right: float) -> float:
    if right == 0:
        raise DivisionByZeroError()
    return left / right


binary_ops = {
    "+": operator.add,
    "-": operator.sub,
    "*": operator.mul,
    "/": _divide,
    "^": functions.power,
}
comparison_ops = {
    ">": operator.gt,
    "<": operator.lt,
    ">=": operator.ge,
    "<=": operator.le,
    "==": operator.eq,
    "!=": operator.ne,
}


class Evaluator:
    """Walk one AST against a variable scope and a constant table.

    ``scope`` receives every assignment. :func:`evaluate` passes a
    :class:`~collections.ChainMap` whose first map holds the pending writes
    so the caller's environment only changes once the whole expression has
    succeeded.
    """

    def __init__(self, scope: MutableMapping[str, float], consts: Mapping[str, float]):
        self.scope = scope
        self.consts = consts

    def eval(self, node: Node) -> float:
        try:
            return self._eval(node)
        except AxCalcError as error:
            if error.position is None and getattr(node, "where", None):
                error.position = node.where
            raise

    def _eval(self, node: Node) -> float:
        if isinstance(node, Number):
            try:
                return float(node.text)
            except ValueError:
                raise InvalidLiteralError(node.text) from None

        if isinstance(node, Identifier):
            if node.name in self.scope:
                return self.scope[node.name]
            if node.name in self.consts:
                return float(self.consts[node.name])
            raise UndefinedVariableError(node.name)

        if isinstance(node, Assignment):
            value = self.eval(node.value)
            self.scope[node.name] = value
            logger.debug("assigned %s = %r", node.name, value)
            return value

        if isinstance(node, UnaryOp):
            return -self.eval(node.operand)

        if isinstance(node, BinaryOp):
            left = self.eval(node.left)
            right = self.eval(node.right)
            return binary_ops[node.op](left, right)

        if isinstance(node, Comparison):
            left = self.eval(node.left)
            right = self.eval(node.right)
            return 1.0 if comparison_ops[node.op](left, right) else 0.0

        if isinstance(node, LogicalAnd):
            left = self.eval(node.left) != 0
            right = self.eval(node.right) != 0
            return 1.0 if left and right else 0.0

        if isinstance(node, LogicalOr):
            left = self.eval(node.left) != 0
            right = self.eval(node.right) != 0
            return 1.0 if left or right else 0.0

        if isinstance(node, FunctionCall):
            func = functions.lookup(node.name)
            func.check_arity(len(node.args))
            args = [self.eval(arg) for arg in node.args]
            return func.call(*args)

        raise EvalError(message=f"unsupported node {type(node).__name__}")


def evaluate(
    node: Node,
    env: MutableMapping[str, float],
    consts: Mapping[str, float] | None = None,
) -> float:
    """Evaluate ``node``; assignments reach ``env`` only on success."""
    pending: dict[str, float] = {}
    result = Evaluator(ChainMap(pending, env), consts or {}).eval(node)
    env.update(pending)
    return result
