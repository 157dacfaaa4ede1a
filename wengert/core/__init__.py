# wengert/core/__init__.py

"""
Core public API for the wengert package.

Exports:
    Tape          : Append-only log of recorded operations (one per computation).
    Node          : One entry on a tape.
    Var           : Immutable handle (value + node index + tape).
    Gradient      : Adjoints from one reverse sweep, queried per handle.
    gradient      : Run a reverse sweep seeded at a handle.
    grad, grads, grads_list, value_and_grad, value : functional helpers.
"""

from .node import Node
from .tape import Tape
from .var import Var
from .engine import Gradient, gradient
from .seeds import grad, grads, grads_list, value, value_and_grad

__all__ = [
    "Node",
    "Tape",
    "Var",
    "Gradient",
    "gradient",
    "grad",
    "grads",
    "grads_list",
    "value",
    "value_and_grad",
]
