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

"""Recursive descent parser.

One method per precedence level, lowest first::

    assignment   name "=" logical_or | logical_or
    logical_or   logical_and ("||" logical_and)*
    logical_and  comparison ("&&" comparison)*
    comparison   additive (("<" | ">" | "<=" | ">=" | "==" | "!=") additive)*
    additive     term (("+" | "-") term)*
    term         unary (("*" | "/") unary)*
    unary        ("-" | "+") (unary | exponent) | exponent
    exponent     postfix ("^" unary)?
    postfix      primary "!"*
    primary      number | name call? | function call? | "(" assignment ")"
    call         "(" (assignment ("," assignment)*)? ")"

Unary minus binds looser than ``^`` so ``-3^2`` is ``-(3^2)``, and ``^`` is
right associative because its right operand re-enters the exponent level.
"""

from .errors import (
    EmptyExpressionError,
    MissingOperandError,
    UnexpectedTrailingTokenError,
    UnmatchedParenError,
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
from .tokenizer import (
    ASSIGN,
    COMPARISON,
    FUNCTION,
    IDENTIFIER,
    LOGICAL,
    NUMBER,
    OPERATOR,
    PAREN,
    Token,
)


class Parser:
    def __init__(self) -> None:
        self.source = ""
        self.tokens: list[Token] = []
        self.pos = 0

    @property
    def token(self) -> Token | None:
        return self.peek(0)

    def peek(self, offset: int) -> Token | None:
        index = self.pos + offset
        if index < len(self.tokens):
            return self.tokens[index]
        return None

    def advance(self) -> Token:
        token = self.tokens[self.pos]
        self.pos += 1
        return token

    def accept(self, kind: str, *texts: str) -> Token | None:
        """Consume and return the current token if it matches."""
        token = self.token
        if token is not None and token.matches(kind, *texts):
            return self.advance()
        return None

    def end_position(self) -> tuple[int, int]:
        return len(self.source), len(self.source) + 1

    def missing_operand(self) -> MissingOperandError:
        token = self.token
        if token is None:
            return MissingOperandError(
                "at end of input", self.source, self.end_position()
            )
        return MissingOperandError(
            f"before '{token.text}'", self.source, token.where
        )

    def expect_close(self) -> None:
        if self.accept(PAREN, ")") is None:
            token = self.token
            where = token.where if token else self.end_position()
            raise UnmatchedParenError(self.source, where)

    def assignment(self) -> Node:
        name, eq = self.token, self.peek(1)
        if (
            name is not None
            and eq is not None
            and name.kind == IDENTIFIER
            and eq.kind == ASSIGN
        ):
            self.pos += 2
            return Assignment(name.text, self.logical_or(), where=name.where)
        return self.logical_or()

    def logical_or(self) -> Node:
        node = self.logical_and()
        while op := self.accept(LOGICAL, "||"):
            node = LogicalOr(node, self.logical_and(), where=op.where)
        return node

    def logical_and(self) -> Node:
        node = self.comparison()
        while op := self.accept(LOGICAL, "&&"):
            node = LogicalAnd(node, self.comparison(), where=op.where)
        return node

    def comparison(self) -> Node:
        node = self.additive()
        while op := self.accept(COMPARISON):
            node = Comparison(op.text, node, self.additive(), where=op.where)
        return node

    def additive(self) -> Node:
        node = self.term()
        while op := self.accept(OPERATOR, "+", "-"):
            node = BinaryOp(op.text, node, self.term(), where=op.where)
        return node

    def term(self) -> Node:
        node = self.unary()
        while op := self.accept(OPERATOR, "*", "/"):
            node = BinaryOp(op.text, node, self.unary(), where=op.where)
        return node

    def unary(self) -> Node:
        op = self.accept(OPERATOR, "-", "+")
        if op is None:
            return self.exponent()
        if self.token is not None and self.token.matches(OPERATOR, "-", "+"):
            operand = self.unary()
        else:
            operand = self.exponent()
        if op.text == "+":
            return operand
        return UnaryOp("-", operand, where=op.where)

    def exponent(self) -> Node:
        node = self.postfix()
        if op := self.accept(OPERATOR, "^"):
            return BinaryOp("^", node, self.unary(), where=op.where)
        return node

    def postfix(self) -> Node:
        node = self.primary()
        while op := self.accept(OPERATOR, "!"):
            node = FunctionCall("!", (node,), where=op.where)
        return node

    def primary(self) -> Node:
        token = self.token
        if token is None or token.kind in (OPERATOR, COMPARISON, LOGICAL, ASSIGN):
            raise self.missing_operand()
        if token.matches(PAREN, ")"):
            raise self.missing_operand()
        self.advance()
        if token.kind == NUMBER:
            return Number(token.text, where=token.where)
        if token.kind in (IDENTIFIER, FUNCTION):
            if self.accept(PAREN, "("):
                return FunctionCall(token.text, self.arguments(), where=token.where)
            if token.kind == FUNCTION:
                return FunctionCall(token.text, (), where=token.where)
            return Identifier(token.text, where=token.where)
        node = self.assignment()
        self.expect_close()
        return node

    def arguments(self) -> tuple[Node, ...]:
        args: list[Node] = []
        if self.accept(PAREN, ")"):
            return ()
        while True:
            args.append(self.assignment())
            if self.accept(OPERATOR, ","):
                continue
            self.expect_close()
            return tuple(args)

    def parse(self, tokens: list[Token], source: str = "") -> Node:
        try:
            self.source = source
            self.tokens = list(tokens)
            self.pos = 0
            if not self.tokens:
                raise EmptyExpressionError(source)
            node = self.assignment()
            if (token := self.token) is not None:
                raise UnexpectedTrailingTokenError(token.text, source, token.where)
            return node
        finally:
            self.tokens = []
            self.pos = 0


def parse(tokens: list[Token], source: str = "") -> Node:
    return Parser().parse(tokens, source)
