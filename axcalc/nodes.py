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

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Node:
    pass


def _where():
    return field(default=None, compare=False, repr=False)


@dataclass(frozen=True)
class Number(Node):
    text: str
    where: tuple[int, int] | None = _where()


@dataclass(frozen=True)
class Identifier(Node):
    name: str
    where: tuple[int, int] | None = _where()


@dataclass(frozen=True)
class Assignment(Node):
    name: str
    value: Node
    where: tuple[int, int] | None = _where()


@dataclass(frozen=True)
class UnaryOp(Node):
    op: str
    operand: Node
    where: tuple[int, int] | None = _where()


@dataclass(frozen=True)
class BinaryOp(Node):
    op: str
    left: Node
    right: Node
    where: tuple[int, int] | None = _where()


@dataclass(frozen=True)
class Comparison(Node):
    op: str
    left: Node
    right: Node
    where: tuple[int, int] | None = _where()


@dataclass(frozen=True)
class LogicalAnd(Node):
    left: Node
    right: Node
    where: tuple[int, int] | None = _where()


@dataclass(frozen=True)
class LogicalOr(Node):
    left: Node
    right: Node
    where: tuple[int, int] | None = _where()


# Postfix factorial is a call to "!" with one argument.
@dataclass(frozen=True)
class FunctionCall(Node):
    name: str
    args: tuple[Node, ...] = ()
    where: tuple[int, int] | None = _where()
