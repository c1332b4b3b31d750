"""Evaluation of simple integer arithmetic expressions."""

from __future__ import annotations

import string
from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum


class CalcError(ValueError):
    """Raised when an expression cannot be evaluated."""


class _Associativity(Enum):
    LEFT = "left"
    RIGHT = "right"


@dataclass(frozen=True)
class _Operator:
    precedence: int
    associativity: _Associativity
    apply: Callable[[int, int], int]


def _power(x: int, y: int) -> int:
    return 1 if y <= 0 else x**y


def _divide(x: int, y: int) -> int:
    """Euclidean division: the remainder is never negative."""
    if y == 0:
        raise CalcError("division by zero")
    q, r = divmod(x, y)
    if r < 0:
        q += 1
    return q


_OPERATORS = {
    "^": _Operator(3, _Associativity.RIGHT, _power),
    "*": _Operator(3, _Associativity.LEFT, lambda x, y: x * y),
    "/": _Operator(3, _Associativity.LEFT, _divide),
    "+": _Operator(2, _Associativity.LEFT, lambda x, y: x + y),
    "-": _Operator(2, _Associativity.LEFT, lambda x, y: x - y),
}

_DECIMAL = string.digits
_PREFIXES = {"0b": ("01", 2), "0x": ("0123456789abcdef", 16)}


class _Yard:
    """Operand and operator stacks of the shunting-yard algorithm."""

    def __init__(self) -> None:
        self.operands: list[int] = []
        self.operators: list[_Operator] = []

    def push_operator(self, op: _Operator) -> None:
        while self.operators:
            top = self.operators[-1]
            if top.precedence < op.precedence or (
                top.precedence == op.precedence
                and op.associativity is not _Associativity.LEFT
            ):
                break
            self._apply(top)
            self.operators.pop()
        self.operators.append(op)

    def _apply(self, op: _Operator) -> None:
        if len(self.operands) < 2:
            raise CalcError("too few operands")
        y = self.operands.pop()
        x = self.operands.pop()
        self.operands.append(op.apply(x, y))

    def result(self) -> int:
        while self.operators:
            self._apply(self.operators.pop())
        if len(self.operands) != 1:
            raise CalcError("wrong operand count")
        return self.operands[0]


def _parse_literal(text: str) -> int:
    negative = text.startswith("-")
    body = text[1:] if negative else text
    prefix = body[:2]
    if prefix in _PREFIXES:
        allowed, base = _PREFIXES[prefix]
        digits = body[2:]
    elif len(body) > 1 and body.startswith("0"):
        allowed, base = "01234567", 8
        digits = body[1:]
    else:
        allowed, base = _DECIMAL, 10
        digits = body
    if not digits or any(c not in allowed for c in digits):
        raise CalcError("expected number")
    value = int(digits, base)
    return -value if negative else value


def _number(expr: str, pos: int) -> tuple[int, int]:
    end = pos
    if expr.startswith("-", end):
        end += 1
    allowed = _DECIMAL
    for prefix, (digits, _) in _PREFIXES.items():
        if expr.startswith(prefix, end):
            allowed = digits
            end += len(prefix)
            break
    while end < len(expr) and expr[end] in allowed:
        end += 1
    return _parse_literal(expr[pos:end]), end


def evaluate(expr: str) -> int:
    """Evaluate an integer arithmetic expression."""
    yard = _Yard()
    expect_operand = True
    pos = 0
    while pos < len(expr):
        if expr[pos] == " ":
            pos += 1
            continue
        if expect_operand:
            value, pos = _number(expr, pos)
            yard.operands.append(value)
            expect_operand = False
            continue
        op = _OPERATORS.get(expr[pos])
        if op is None:
            raise CalcError("expected operator")
        yard.push_operator(op)
        pos += 1
        expect_operand = True
    return yard.result()