"""
Arithmetic expression parsing and evaluation without dynamic code execution.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from engine.expression.evaluate import DEGREES, RADIANS, EvaluationError, evaluate
from engine.expression.parser import ExpressionError, ExpressionSyntaxError, ExpressionTree, parse_expression

__all__ = [
    "DEGREES",
    "RADIANS",
    "EvaluationError",
    "ExpressionError",
    "ExpressionSyntaxError",
    "ExpressionTree",
    "evaluate",
    "parse_expression",
]
