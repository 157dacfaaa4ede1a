# wengert/core/engine.py
from __future__ import annotations
import logging
import numpy as np
from typing import Iterable, List
from .var import Var
from ..errors import TapeMismatchError

logger = logging.getLogger(__name__)

class Gradient:
    """
    Adjoints of one output with respect to every node of its tape.

    Built once by `gradient()` and read-only afterwards. The array is sized to
    the tape length at the time of the sweep; nodes recorded later are not
    part of it.
    """
    __slots__ = ("_tape", "_adjoints")

    def __init__(self, tape, adjoints: np.ndarray):
        adjoints.setflags(write=False)
        self._tape = tape
        self._adjoints = adjoints

    def __len__(self) -> int:
        return len(self._adjoints)

    def __getitem__(self, var: Var) -> float:
        return self.wrt(var)

    def __repr__(self):
        return f"Gradient(nodes={len(self._adjoints)})"

    @property
    def adjoints(self) -> np.ndarray:
        """Read-only view of the dense adjoint array, indexed by node."""
        return self._adjoints.view()

    def wrt(self, var: Var) -> float:
        """Partial derivative of the seeded output with respect to `var`."""
        if var.tape is not self._tape:
            raise TapeMismatchError("handle belongs to a different tape than this gradient")
        if var.index >= len(self._adjoints):
            raise IndexError(
                f"node {var.index} was recorded after this gradient was built "
                f"({len(self._adjoints)} nodes)"
            )
        return float(self._adjoints[var.index])

    def wrt_all(self, variables: Iterable[Var]) -> List[float]:
        return [self.wrt(v) for v in variables]

def gradient(output: Var) -> Gradient:
    """
    Run a single reverse pass from `output`.

    Notes:
        - Seed: adj[output] = 1.0.
        - Sweep node indices from high to low; for each edge (dep, weight)
          of node i: adj[dep] += weight * adj[i].
        - Every dependency has a smaller index than its consumer, so a
          node's adjoint is complete before it is propagated.
        - Self-referencing slots (leaves, unary padding) are skipped.
    """
    tape = output.tape
    n = len(tape)  # bound the sweep to the tape as it is now
    nodes = tape.nodes
    adj = [0.0] * n
    adj[output.index] = 1.0

    # Backward sweep over every node; 0 * inf contributions stay NaN
    for i in range(n - 1, -1, -1):
        d = adj[i]
        for dep, weight in nodes[i].edges(i):
            adj[dep] += weight * d

    logger.debug("reverse sweep over %d nodes seeded at node %d", n, output.index)
    return Gradient(tape, np.asarray(adj, dtype=np.float64))
