# wengert/core/node.py
from dataclasses import dataclass
from typing import Iterator, Tuple

@dataclass(frozen=True)
class Node:
    """
    One entry on the tape, produced by a leaf or a primitive operation.

    Attributes
    ----------
    weights : Tuple[float, float]
        Local partials of this node's output with respect to each of its two
        operand nodes. Unused slots hold 0.0.
    deps : Tuple[int, int]
        Tape indices of the operand nodes. A slot with no operand points at
        the node's own index, so a leaf is (i, i) and a unary op is (dep, i).
    op : str
        Debug tag (e.g., "leaf", "add", "sin").
    """
    weights: Tuple[float, float]
    deps: Tuple[int, int]
    op: str = "leaf"

    @property
    def is_leaf(self) -> bool:
        return self.op == "leaf"

    def edges(self, index: int) -> Iterator[Tuple[int, float]]:
        """Yield the (dep, weight) pairs that point at an earlier node."""
        for dep, weight in zip(self.deps, self.weights):
            if dep != index:
                yield dep, weight
