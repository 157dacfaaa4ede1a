# wengert/ops/__init__.py

# Convenience re-exports so users can do: from wengert.ops import mul, exp, ...
from .arithmetic import add, sub, mul, div, reciprocal
from .transcendental import sqrt, sin, cos, exp, log

__all__ = [
    "add", "sub", "mul", "div", "reciprocal",
    "sqrt", "sin", "cos", "exp", "log",
]
