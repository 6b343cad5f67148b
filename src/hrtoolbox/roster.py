"""Roster ownership: ingestion, edits, duplicate detection and persistence."""

from __future__ import annotations

import re
from collections import Counter
from typing import Callable, Iterable, List, Sequence, Set, Tuple

from .logging import logger
from .models import Participant
from .storage import RosterRepository

RosterListener = Callable[[Tuple[Participant, ...]], None]

SAMPLE_NAMES = (
    "陳小明", "林美玲", "王大同", "張雅婷", "李家豪", "郭靜宜", "林家佑", "周思潔",
    "黃志豪", "張淑芬", "王小華", "陳雅筑", "蔡志豪", "許淑惠", "陳小明", "王大同",
)

_TEXT_SEPARATORS = re.compile(r"[\n,]+")
_CSV_SEPARATORS = re.compile(r"[\r\n,]+")


def parse_names(text: str) -> List[str]:
    """Split pasted text on newlines and commas."""

    return [part.strip() for part in _TEXT_SEPARATORS.split(text or "") if part.strip()]


def parse_csv_names(text: str) -> List[str]:
    """Split an uploaded CSV body into names, dropping a ``name`` header cell."""

    text = (text or "").lstrip("\ufeff")
    names = [part.strip() for part in _CSV_SEPARATORS.split(text)]
    return [name for name in names if name and name.lower() != "name"]


class RosterStore:
    """Single source of truth for the participant list.

    Every mutation installs a new tuple, persists it when a repository is
    configured and notifies subscribers with the new roster.
    """

    def __init__(self, repository: RosterRepository | None = None) -> None:
        self.repository = repository
        self._participants: Tuple[Participant, ...] = tuple(repository.load()) if repository else ()
        self._listeners: List[RosterListener] = []

    def get(self) -> Tuple[Participant, ...]:
        return self._participants

    def __len__(self) -> int:
        return len(self._participants)

    def subscribe(self, listener: RosterListener) -> Callable[[], None]:
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def add_names(self, names: Iterable[str]) -> List[Participant]:
        added = [Participant(name) for name in names if name and name.strip()]
        if added:
            self._replace(self._participants + tuple(added))
        return added

    def add_from_text(self, text: str) -> List[Participant]:
        return self.add_names(parse_names(text))

    def import_csv(self, text: str) -> List[Participant]:
        return self.add_names(parse_csv_names(text))

    def load_sample(self) -> Tuple[Participant, ...]:
        self._replace(tuple(Participant(name) for name in SAMPLE_NAMES))
        return self._participants

    def remove(self, participant_id: str) -> None:
        remaining = tuple(p for p in self._participants if p.id != participant_id)
        if len(remaining) != len(self._participants):
            self._replace(remaining)

    def replace_all(self, participants: Sequence[Participant]) -> None:
        self._replace(tuple(participants))

    def clear(self, confirm: Callable[[], bool] | None = None) -> None:
        if confirm is not None and not confirm():
            return
        self._replace(())

    def duplicate_names(self) -> Set[str]:
        counts = Counter(p.name for p in self._participants)
        return {name for name, count in counts.items() if count > 1}

    def dedupe_by_name(self) -> int:
        """Keep the first participant per name and return how many were dropped."""

        seen: Set[str] = set()
        unique: List[Participant] = []
        for participant in self._participants:
            if participant.name in seen:
                continue
            seen.add(participant.name)
            unique.append(participant)
        removed = len(self._participants) - len(unique)
        if removed:
            self._replace(tuple(unique))
        return removed

    def _replace(self, participants: Tuple[Participant, ...]) -> None:
        self._participants = participants
        if self.repository is not None:
            self.repository.save(participants)
        logger.bind(event="roster_changed", size=len(participants)).debug("roster_changed")
        for listener in list(self._listeners):
            listener(participants)
