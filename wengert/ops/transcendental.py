# wengert/ops/transcendental.py
import numpy as np
from ..core.var import Var
from .arithmetic import _require_var

def _unary(x, f, dfdx, tag):
    """
    Generic unary primitive:
      - computes out.value = f(x.value)
      - pushes a Node with the local partial ∂out/∂x

    Out-of-domain inputs give NaN/inf as NumPy does (sqrt(-1), log(0), ...);
    the warnings are silenced, nothing is raised.
    """
    _require_var(x, tag)
    v = np.float64(x.value)
    with np.errstate(all="ignore"):
        out, d = f(v), dfdx(v)
    index = x.tape.record_unary(x.index, float(d), op=tag)
    return Var(float(out), index, x.tape)

def sqrt(x): return _unary(x, np.sqrt, lambda v: 1.0 / (2.0 * np.sqrt(v)), "sqrt")
def sin(x):  return _unary(x, np.sin,  np.cos,                             "sin")
def cos(x):  return _unary(x, np.cos,  lambda v: -np.sin(v),               "cos")
def exp(x):  return _unary(x, np.exp,  np.exp,                             "exp")
def log(x):  return _unary(x, np.log,  lambda v: 1.0 / v,                  "log")
