# wengert/ops/arithmetic.py
import logging
import numbers
import numpy as np
from ..core.var import Var
from ..errors import TapeMismatchError, ZeroDivisorError

logger = logging.getLogger(__name__)

def _pair(x, y):
    """
    Resolve the operands of a binary primitive to two handles on one tape.
    A plain real number is recorded as a constant leaf on the other operand's tape.
    """
    if isinstance(x, Var) and isinstance(y, Var):
        if x.tape is not y.tape:
            logger.debug("rejected binary op: handles %d and %d live on different tapes", x.index, y.index)
            raise TapeMismatchError(
                f"cannot combine handles from different tapes ({id(x.tape):#x} vs {id(y.tape):#x})"
            )
        return x, y
    if isinstance(x, Var):
        return x, _constant(x.tape, y)
    if isinstance(y, Var):
        return _constant(y.tape, x), y
    raise TypeError(f"expected at least one Var operand, got {type(x).__name__} and {type(y).__name__}")

def _constant(tape, c):
    if not isinstance(c, numbers.Real):
        raise TypeError(f"Var operands must be Var or a real number, got {type(c).__name__}")
    return tape.var(c)

def _require_var(x, tag):
    """Unary primitives need a handle: a plain number has no tape to record on."""
    if not isinstance(x, Var):
        raise TypeError(f"{tag}() expects a Var, got {type(x).__name__}; use tape.var() to record it first")

def _binary(x, y, f, dfdx, dfdy, tag):
    """
    Generic binary primitive:
      - computes out.value = f(x.value, y.value)
      - pushes a Node with local partials (∂out/∂x, ∂out/∂y)
    """
    x, y = _pair(x, y)
    a, b = x.value, y.value
    index = x.tape.record_binary(x.index, dfdx(a, b), y.index, dfdy(a, b), op=tag)
    return Var(f(a, b), index, x.tape)

def add(x, y): return _binary(x, y, lambda a,b:a+b, lambda a,b:1.0, lambda a,b:1.0, "add")
def mul(x, y): return _binary(x, y, lambda a,b:a*b, lambda a,b:b,   lambda a,b:a,   "mul")

def sub(x, y):
    """
    Subtraction. The weight recorded for `y` comes from the tape's
    TapeConfig.subtrahend_weight: +1.0 by default (recorded like addition),
    -1.0 under TapeConfig.signed().
    """
    x, y = _pair(x, y)
    w = x.tape.config.subtrahend_weight
    return _binary(x, y, lambda a,b:a-b, lambda a,b:1.0, lambda a,b:w, "sub")

def reciprocal(x):
    """
    1/x with local partial -1/x². Raises ZeroDivisorError for x == 0.0
    before anything is recorded.
    """
    divisor = x.value if isinstance(x, Var) else x
    if divisor == 0.0:
        logger.debug("rejected reciprocal of zero")
        raise ZeroDivisorError("reciprocal of zero")
    _require_var(x, "reciprocal")
    v = np.float64(x.value)
    # tiny |x| overflows to inf here; keep the IEEE result
    with np.errstate(divide="ignore", over="ignore"):
        r = 1.0 / v
        d = -1.0 / (v * v)
    index = x.tape.record_unary(x.index, float(d), op="reciprocal")
    return Var(float(r), index, x.tape)

def div(x, y):
    """
    x / y, recorded as x * reciprocal(y) (two nodes).
    The zero-divisor and cross-tape checks both run before either node is recorded.
    """
    divisor = y.value if isinstance(y, Var) else y
    if divisor == 0.0:
        logger.debug("rejected division by zero")
        raise ZeroDivisorError("division by zero")
    x, y = _pair(x, y)
    return mul(x, reciprocal(y))
