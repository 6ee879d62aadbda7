"""
Recursive-descent parser for arithmetic expressions, producing an immutable
expression tree of numbers, named constants, unary and binary operators and
function calls.

Grammar, lowest precedence first::

    expr    := term (("+" | "-") term)*
    term    := unary (("*" | "/" | "%") unary)*
    unary   := ("+" | "-") unary | power
    power   := atom (("^" | "**") unary)?
    atom    := NUMBER | NAME | NAME "(" [expr ("," expr)*] ")" | "(" expr ")"

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import List, Optional, Tuple, Union


class ExpressionError(Exception):
    pass


class ExpressionSyntaxError(ExpressionError):
    def __init__(self, message: str, position: int):
        super().__init__(f"{message} at position {position}")
        self.position = position


@dataclass(frozen=True)
class Number:
    value: float


@dataclass(frozen=True)
class Name:
    name: str


@dataclass(frozen=True)
class UnaryOp:
    op: str
    operand: "ExpressionTree"


@dataclass(frozen=True)
class BinaryOp:
    op: str
    left: "ExpressionTree"
    right: "ExpressionTree"


@dataclass(frozen=True)
class Call:
    name: str
    args: Tuple["ExpressionTree", ...]


ExpressionTree = Union[Number, Name, UnaryOp, BinaryOp, Call]


@dataclass(frozen=True)
class Token:
    kind: str
    text: str
    position: int


_TOKEN_RE = re.compile(
    r"""
    (?P<ws>\s+)
    |(?P<number>(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)
    |(?P<name>[A-Za-z_][A-Za-z_0-9]*)
    |(?P<op>\*\*|[-+*/%^(),])
    """,
    re.VERBOSE,
)


def tokenize(source: str) -> List[Token]:
    tokens: List[Token] = []
    pos = 0
    while pos < len(source):
        match = _TOKEN_RE.match(source, pos)
        if match is None:
            raise ExpressionSyntaxError(f"unexpected character {source[pos]!r}", pos)
        kind = match.lastgroup or ""
        if kind != "ws":
            tokens.append(Token(kind=kind, text=match.group(), position=pos))
        pos = match.end()
    tokens.append(Token(kind="end", text="", position=len(source)))
    return tokens


class _Parser:
    def __init__(self, tokens: List[Token]):
        self.tokens = tokens
        self.index = 0

    @property
    def current(self) -> Token:
        return self.tokens[self.index]

    def _accept(self, *ops: str) -> Optional[Token]:
        tok = self.current
        if tok.kind == "op" and tok.text in ops:
            self.index += 1
            return tok
        return None

    def _expect(self, op: str) -> Token:
        tok = self._accept(op)
        if tok is None:
            found = self.current.text or "end of input"
            raise ExpressionSyntaxError(f"expected {op!r} but found {found!r}", self.current.position)
        return tok

    def parse(self) -> ExpressionTree:
        if self.current.kind == "end":
            raise ExpressionSyntaxError("empty expression", 0)
        tree = self._expr()
        if self.current.kind != "end":
            raise ExpressionSyntaxError(f"unexpected token {self.current.text!r}", self.current.position)
        return tree

    def _expr(self) -> ExpressionTree:
        node = self._term()
        while True:
            tok = self._accept("+", "-")
            if tok is None:
                return node
            node = BinaryOp(tok.text, node, self._term())

    def _term(self) -> ExpressionTree:
        node = self._unary()
        while True:
            tok = self._accept("*", "/", "%")
            if tok is None:
                return node
            node = BinaryOp(tok.text, node, self._unary())

    def _unary(self) -> ExpressionTree:
        tok = self._accept("+", "-")
        if tok is not None:
            return UnaryOp(tok.text, self._unary())
        return self._power()

    def _power(self) -> ExpressionTree:
        base = self._atom()
        if self._accept("^", "**") is not None:
            # right-associative; binds tighter than a leading minus on the base
            return BinaryOp("^", base, self._unary())
        return base

    def _atom(self) -> ExpressionTree:
        tok = self.current
        if tok.kind == "number":
            self.index += 1
            return Number(float(tok.text))
        if tok.kind == "name":
            self.index += 1
            if self._accept("(") is None:
                return Name(tok.text.lower())
            args: List[ExpressionTree] = []
            if self._accept(")") is None:
                args.append(self._expr())
                while self._accept(",") is not None:
                    args.append(self._expr())
                self._expect(")")
            return Call(tok.text.lower(), tuple(args))
        if self._accept("(") is not None:
            node = self._expr()
            self._expect(")")
            return node
        found = tok.text or "end of input"
        raise ExpressionSyntaxError(f"unexpected {found!r}", tok.position)


def parse_expression(source: str) -> ExpressionTree:
    return _Parser(tokenize(source)).parse()
