"""
Outcome types returned by board actions.

Rejected actions are reported through these values instead of being
raised, so a single bad click never escapes the engine.
"""
from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional, Tuple


Position = Tuple[int, int]


class InvalidDimensionError(ValueError):
    """Raised when a board is configured with a non-positive size."""


class ActionError(Enum):
    """Reasons a reveal or flag action was rejected."""

    OUT_OF_BOUNDS = auto()
    ILLEGAL_ACTION = auto()


class OutcomeKind(Enum):
    """What a reveal did to the game."""

    CONTINUE = auto()
    WON = auto()
    LOST = auto()
    REJECTED = auto()


@dataclass(frozen=True)
class RevealOutcome:
    """
    Result of a reveal action.

    Attributes:
        kind: Outcome category.
        revealed: Newly revealed positions, in reveal order.
        position: The mine that was hit, for LOST.
        error: Why the action was refused, for REJECTED.
        flags_cleared: Flags removed because the cascade reached them.
    """

    kind: OutcomeKind
    revealed: Tuple[Position, ...] = ()
    position: Optional[Position] = None
    error: Optional[ActionError] = None
    flags_cleared: int = 0

    @classmethod
    def lost(cls, x: int, y: int) -> "RevealOutcome":
        return cls(OutcomeKind.LOST, position=(x, y))

    @classmethod
    def rejected(cls, error: ActionError) -> "RevealOutcome":
        return cls(OutcomeKind.REJECTED, error=error)

    @property
    def is_won(self) -> bool:
        return self.kind == OutcomeKind.WON

    @property
    def is_lost(self) -> bool:
        return self.kind == OutcomeKind.LOST

    @property
    def is_rejected(self) -> bool:
        return self.kind == OutcomeKind.REJECTED
