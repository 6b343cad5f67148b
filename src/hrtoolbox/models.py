"""Data models describing participants, groups and the lottery state."""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from enum import Enum
from typing import Tuple

from .exceptions import ValidationError


def new_participant_id() -> str:
    return uuid.uuid4().hex[:12]


@dataclass(slots=True, frozen=True)
class Participant:
    """Represents a single person on the roster.

    Identity is ``id``; two participants may share a ``name``.
    """

    name: str
    id: str = field(default_factory=new_participant_id)

    def __post_init__(self) -> None:
        name = self.name.strip()
        if not name:
            raise ValidationError("Participant name must not be empty.")
        if not self.id:
            raise ValidationError("Participant id must not be empty.")
        object.__setattr__(self, "name", name)


@dataclass(slots=True, frozen=True)
class Group:
    """A named team produced by one grouping run."""

    id: str
    name: str
    members: Tuple[Participant, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "members", tuple(self.members))

    def __len__(self) -> int:
        return len(self.members)


class GroupingMode(str, Enum):
    BY_SIZE = "size"
    BY_COUNT = "count"


@dataclass(slots=True, frozen=True)
class LotteryState:
    """Immutable snapshot of the prize draw.

    Attributes
    ----------
    allow_repeat:
        When true the whole roster stays eligible for every draw.
    available:
        Participants not drawn yet. Only consulted when repeats are off.
    current_winner:
        Winner of the latest completed draw, ``None`` while rolling or after reset.
    history:
        Winners, most recent first.
    is_rolling:
        True between draw start and draw completion.
    display_names:
        Names currently shown by the reveal animation.
    """

    allow_repeat: bool = False
    available: Tuple[Participant, ...] = ()
    current_winner: Participant | None = None
    history: Tuple[Participant, ...] = ()
    is_rolling: bool = False
    display_names: Tuple[str, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "available", tuple(self.available))
        object.__setattr__(self, "history", tuple(self.history))
        object.__setattr__(self, "display_names", tuple(self.display_names))
