# wengert/core/tape.py
from __future__ import annotations
import logging
import threading
from typing import Iterator, List, Optional, Tuple
from .node import Node
from ..config import DEFAULT_CONFIG, TapeConfig
from ..errors import TapeOwnershipError

logger = logging.getLogger(__name__)

class Tape:
    """
    Append-only Wengert list: records Nodes in forward order.

    Every handle derived from a tape keeps a reference to it, and every
    operation on those handles appends exactly one node. Nodes only ever
    depend on earlier nodes, so insertion order is a topological order.

    The tape belongs to the thread that created it; appending from any other
    thread raises TapeOwnershipError.
    """
    def __init__(self, config: Optional[TapeConfig] = None):
        self.config = config or DEFAULT_CONFIG
        self._nodes: List[Node] = []
        self._owner = threading.get_ident()
        logger.debug("new tape %#x (subtrahend_weight=%s)", id(self), self.config.subtrahend_weight)

    def __len__(self) -> int:
        return len(self._nodes)

    def __getitem__(self, index: int) -> Node:
        return self._nodes[index]

    def __iter__(self) -> Iterator[Node]:
        return iter(self._nodes)

    def __repr__(self):
        return f"Tape(nodes={len(self._nodes)})"

    @property
    def nodes(self) -> Tuple[Node, ...]:
        """Snapshot of the recorded nodes."""
        return tuple(self._nodes)

    def var(self, value, name: Optional[str] = None):
        """Record a fresh independent variable and return its handle."""
        from .var import Var  # local import to avoid cycles
        value = float(value)
        return Var(value, self.record_leaf(value), self, name=name)

    # ---------------------------- insertion primitives ---------------------------- #
    def record_leaf(self, value: float) -> int:
        """
        Append a leaf node: deps = (i, i), weights = (0, 0).
        `value` is not stored; it lives on the handle.
        """
        self._check_owner()
        index = len(self._nodes)
        self._nodes.append(Node(weights=(0.0, 0.0), deps=(index, index)))
        return index

    def record_unary(self, dep: int, weight: float, op: str = "unary") -> int:
        """Append a node with one operand; the second slot self-references with weight 0."""
        self._check_owner()
        index = len(self._nodes)
        self._check_dep(dep, index)
        self._nodes.append(Node(weights=(float(weight), 0.0), deps=(dep, index), op=op))
        return index

    def record_binary(self, dep0: int, weight0: float, dep1: int, weight1: float,
                      op: str = "binary") -> int:
        """Append a node with two operand/weight pairs."""
        self._check_owner()
        index = len(self._nodes)
        self._check_dep(dep0, index)
        self._check_dep(dep1, index)
        self._nodes.append(Node(weights=(float(weight0), float(weight1)), deps=(dep0, dep1), op=op))
        return index

    def _check_owner(self):
        if threading.get_ident() != self._owner:
            raise TapeOwnershipError(
                f"tape {id(self):#x} is owned by thread {self._owner}, "
                f"refusing append from thread {threading.get_ident()}"
            )

    @staticmethod
    def _check_dep(dep: int, index: int):
        if not 0 <= dep < index:
            raise IndexError(f"dependency {dep} is not a recorded node (tape length {index})")
