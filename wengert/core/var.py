# wengert/core/var.py
from __future__ import annotations
import numbers
from dataclasses import dataclass, field
from typing import Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from .tape import Tape
    from .engine import Gradient

@dataclass(frozen=True, eq=False)
class Var:
    """
    Handle to one node of a Tape.

    Attributes
    ----------
    value : float
        Forward (primal) value, computed eagerly when the handle is made.
    index : int
        Position of the node that produced this value on `tape`.
    tape : Tape
        The tape this handle records onto. Binary operations require both
        operands to share the same tape instance.
    name : Optional[str]
        Optional debug/pretty-print name.

    Handles never change after creation: every operation returns a new
    handle and appends one node to the shared tape.
    """
    value: float
    index: int
    tape: "Tape" = field(repr=False)
    name: Optional[str] = None

    def __float__(self):
        return float(self.value)

    def grad(self) -> "Gradient":
        """Run one reverse sweep seeded at this handle."""
        from .engine import gradient
        return gradient(self)

    # Operator overloading for arithmetic operations
    def __add__(self, other):
        if not _is_operand(other):
            return NotImplemented
        from ..ops.arithmetic import add
        return add(self, other)

    def __radd__(self, other):
        if not _is_operand(other):
            return NotImplemented
        from ..ops.arithmetic import add
        return add(other, self)

    def __sub__(self, other):
        if not _is_operand(other):
            return NotImplemented
        from ..ops.arithmetic import sub
        return sub(self, other)

    def __rsub__(self, other):
        if not _is_operand(other):
            return NotImplemented
        from ..ops.arithmetic import sub
        return sub(other, self)

    def __mul__(self, other):
        if not _is_operand(other):
            return NotImplemented
        from ..ops.arithmetic import mul
        return mul(self, other)

    def __rmul__(self, other):
        if not _is_operand(other):
            return NotImplemented
        from ..ops.arithmetic import mul
        return mul(other, self)

    def __truediv__(self, other):
        if not _is_operand(other):
            return NotImplemented
        from ..ops.arithmetic import div
        return div(self, other)

    def __rtruediv__(self, other):
        if not _is_operand(other):
            return NotImplemented
        from ..ops.arithmetic import div
        return div(other, self)

    # Elementary functions
    def reciprocal(self) -> "Var":
        from ..ops.arithmetic import reciprocal
        return reciprocal(self)

    def sqrt(self) -> "Var":
        from ..ops.transcendental import sqrt
        return sqrt(self)

    def sin(self) -> "Var":
        from ..ops.transcendental import sin
        return sin(self)

    def cos(self) -> "Var":
        from ..ops.transcendental import cos
        return cos(self)

    def exp(self) -> "Var":
        from ..ops.transcendental import exp
        return exp(self)

    def log(self) -> "Var":
        from ..ops.transcendental import log
        return log(self)

def _is_operand(x) -> bool:
    # bool is a numbers.Real too; treat it like any other constant
    return isinstance(x, (Var, numbers.Real))
