"""
Evaluation of parsed arithmetic expression trees against a fixed table of
constants and math functions.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

import math
from typing import Callable, Dict, Tuple

from engine.expression.parser import (
    BinaryOp,
    Call,
    ExpressionError,
    ExpressionTree,
    Name,
    Number,
    UnaryOp,
)

RADIANS = "radians"
DEGREES = "degrees"


class EvaluationError(ExpressionError):
    pass


CONSTANTS: Dict[str, float] = {
    "pi": math.pi,
    "e": math.e,
    "tau": math.tau,
}

_TRIG = {"sin": math.sin, "cos": math.cos, "tan": math.tan}
_INVERSE_TRIG = {"asin": math.asin, "acos": math.acos, "atan": math.atan}

# name -> (callable, min args, max args)
FUNCTIONS: Dict[str, Tuple[Callable[..., float], int, int]] = {
    "sqrt": (math.sqrt, 1, 1),
    "abs": (abs, 1, 1),
    "log": (math.log, 1, 2),
    "ln": (math.log, 1, 1),
    "log10": (math.log10, 1, 1),
    "exp": (math.exp, 1, 1),
    "floor": (math.floor, 1, 1),
    "ceil": (math.ceil, 1, 1),
    "round": (round, 1, 2),
    "min": (min, 1, 64),
    "max": (max, 1, 64),
    "pow": (math.pow, 2, 2),
}


def _binary(op: str, left: float, right: float) -> float:
    if op == "+":
        return left + right
    if op == "-":
        return left - right
    if op == "*":
        return left * right
    if op in ("/", "%") and right == 0:
        raise EvaluationError("division by zero")
    if op == "/":
        return left / right
    if op == "%":
        return math.fmod(left, right)
    if op == "^":
        if left == 0 and right < 0:
            raise EvaluationError("division by zero")
        if left < 0 and not float(right).is_integer():
            raise EvaluationError("fractional power of a negative number")
        return math.pow(left, right)
    raise EvaluationError(f"unknown operator {op!r}")


def _call(name: str, args: Tuple[float, ...], angle_unit: str) -> float:
    if name in _TRIG or name in _INVERSE_TRIG:
        if len(args) != 1:
            raise EvaluationError(f"{name}() takes exactly 1 argument ({len(args)} given)")
        if name in _TRIG:
            arg = math.radians(args[0]) if angle_unit == DEGREES else args[0]
            return _TRIG[name](arg)
        value = _INVERSE_TRIG[name](args[0])
        return math.degrees(value) if angle_unit == DEGREES else value

    entry = FUNCTIONS.get(name)
    if entry is None:
        raise EvaluationError(f"unknown function {name!r}")
    func, lo, hi = entry
    if not lo <= len(args) <= hi:
        expected = str(lo) if lo == hi else f"{lo} to {hi}"
        raise EvaluationError(f"{name}() takes {expected} arguments ({len(args)} given)")
    if name == "round" and len(args) == 2:
        return float(round(args[0], int(args[1])))
    return float(func(*args))


def evaluate(tree: ExpressionTree, angle_unit: str = RADIANS) -> float:
    try:
        value = _evaluate(tree, angle_unit)
    except (ValueError, OverflowError) as exc:
        raise EvaluationError(f"math error: {exc}") from exc
    if not math.isfinite(value):
        raise EvaluationError("result is not a finite number")
    return value


def _evaluate(tree: ExpressionTree, angle_unit: str) -> float:
    if isinstance(tree, Number):
        return tree.value
    if isinstance(tree, Name):
        if tree.name not in CONSTANTS:
            raise EvaluationError(f"unknown name {tree.name!r}")
        return CONSTANTS[tree.name]
    if isinstance(tree, UnaryOp):
        operand = _evaluate(tree.operand, angle_unit)
        return -operand if tree.op == "-" else operand
    if isinstance(tree, BinaryOp):
        return _binary(tree.op, _evaluate(tree.left, angle_unit), _evaluate(tree.right, angle_unit))
    if isinstance(tree, Call):
        args = tuple(_evaluate(arg, angle_unit) for arg in tree.args)
        return _call(tree.name, args, angle_unit)
    raise EvaluationError(f"unsupported node {type(tree).__name__}")
