# wengert/core/seeds.py

#-----------------------------------------------------------------------------
# We "plant" a seed (dy/dy = 1) at the scalar output and let gradients grow
# backwards through the tape. Each helper builds its own fresh tape.
#-----------------------------------------------------------------------------
from __future__ import annotations
from typing import Any, Callable, Dict, Iterable, List, Optional, Tuple

from .var import Var
from .tape import Tape
from .engine import gradient
from ..config import TapeConfig


def value(x: Any) -> Any:
    """Return the numeric value of a Var; pass through plain numbers unchanged."""
    return x.value if isinstance(x, Var) else x


def _partials(y: Any, xs: List[Var]) -> List[float]:
    if not isinstance(y, Var):
        # f ignored its inputs and returned a constant
        return [0.0 for _ in xs]
    g = gradient(y)
    return g.wrt_all(xs)


# ----------------------------- single-input grad ----------------------------- #
def grad(f: Callable[[Var], Any], x0: float, *, config: Optional[TapeConfig] = None) -> float:
    """
    Derivative of a scalar function y=f(x) at x0.
    Runs one reverse pass on a fresh tape.
    """
    tape = Tape(config)
    x = tape.var(x0, name="x")
    return _partials(f(x), [x])[0]


# ----------------------------- multi-input grads ----------------------------- #
def grads(f: Callable[[Dict[str, Var]], Any],
          inputs: Dict[str, float], *, config: Optional[TapeConfig] = None) -> Dict[str, float]:
    """
    Gradient of y=f(vars) w.r.t. ALL inputs (dict form).
    Performs ONE reverse pass to obtain all ∂y/∂var simultaneously.

    Parameters
    ----------
    f       : function taking a dict {name: Var} and returning a Var
    inputs  : dict {name: number}

    Returns
    -------
    dict {name: float}  # in the same key order as `inputs`
    """
    tape = Tape(config)
    xs = {k: tape.var(v, name=k) for k, v in inputs.items()}
    partials = _partials(f(xs), list(xs.values()))
    return dict(zip(xs.keys(), partials))


def grads_list(f: Callable[[List[Var]], Any],
               x0_list: Iterable[float], *, config: Optional[TapeConfig] = None) -> List[float]:
    """
    Same as grads(), but the inputs are provided as a list and the result is a list
    of partials in the same order.

    Example
    -------
    f = lambda xs: xs[0]*xs[0] + 3*xs[1]
    grads_list(f, [2.0, 4.0]) -> [4.0, 3.0]
    """
    _, partials = value_and_grad(f, x0_list, config=config)
    return partials


def value_and_grad(f: Callable[[List[Var]], Any],
                   x0_list: Iterable[float], *, config: Optional[TapeConfig] = None) -> Tuple[float, List[float]]:
    """Return (f(x0_list), [∂f/∂x_i]) from a single forward and reverse pass."""
    tape = Tape(config)
    xs = [tape.var(v, name=f"x{i}") for i, v in enumerate(x0_list)]
    y = f(xs)
    return float(value(y)), _partials(y, xs)
