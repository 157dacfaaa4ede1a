# wengert/config.py
"""
Recording options for a Tape.

    from wengert import Tape, TapeConfig

    t = Tape(config=TapeConfig.signed())   # d(x - y)/dy == -1
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class TapeConfig:
    """
    Attributes
    ----------
    subtrahend_weight : float
        Local weight recorded for the second operand of ``x - y``.
        The default (+1.0) records subtraction exactly like addition, which
        is the historical behaviour the reference results were produced
        with. Use ``TapeConfig.signed()`` (-1.0) for the textbook
        derivative.
    """
    subtrahend_weight: float = 1.0

    def __post_init__(self):
        if self.subtrahend_weight not in (1.0, -1.0):
            raise ValueError(
                f"subtrahend_weight must be +1.0 or -1.0, got {self.subtrahend_weight!r}"
            )

    @classmethod
    def signed(cls) -> "TapeConfig":
        """Configuration that records d(x - y)/dy = -1."""
        return cls(subtrahend_weight=-1.0)

    @property
    def is_signed(self) -> bool:
        return self.subtrahend_weight < 0


DEFAULT_CONFIG = TapeConfig()
