"""Whole-roster persistence behind a small key-value port."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Dict, List, Protocol, Sequence

from pydantic import ValidationError as PydanticValidationError

from .exceptions import ValidationError
from .logging import logger
from .models import Participant
from .schemas import ParticipantRecord, RosterPayload

DEFAULT_ROSTER_KEY = "hr-toolbox-participants"


class KeyValueStorage(Protocol):
    def get(self, key: str) -> str | None:
        """Return the raw value stored under ``key``."""

    def set(self, key: str, value: str) -> None:
        """Store ``value`` under ``key``."""


class MemoryStorage:
    def __init__(self, initial: Dict[str, str] | None = None) -> None:
        self._data: Dict[str, str] = dict(initial or {})

    def get(self, key: str) -> str | None:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = value


class JsonFileStorage:
    """Key-value storage kept as a single JSON object on disk."""

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)

    def _read(self) -> Dict[str, str]:
        if not self.path.exists():
            return {}
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as exc:
            logger.warning("Storage file {} unreadable: {!r}", self.path, exc)
            return {}
        if not isinstance(data, dict):
            return {}
        return {str(k): v for k, v in data.items() if isinstance(v, str)}

    def get(self, key: str) -> str | None:
        return self._read().get(key)

    def set(self, key: str, value: str) -> None:
        data = self._read()
        data[key] = value
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(json.dumps(data, ensure_ascii=False), encoding="utf-8")


class RosterRepository:
    def __init__(self, storage: KeyValueStorage, key: str = DEFAULT_ROSTER_KEY) -> None:
        self.storage = storage
        self.key = key

    def load(self) -> List[Participant]:
        """Read the stored roster; absent or corrupt data yields an empty list."""

        raw = self.storage.get(self.key)
        if not raw:
            return []
        try:
            records = RosterPayload.validate_json(raw)
            return [Participant(name=record.name, id=record.id) for record in records]
        except (PydanticValidationError, ValidationError) as exc:
            logger.bind(event="roster_load_failed", key=self.key).warning(
                "Stored roster is corrupt, starting empty: {}", exc
            )
            return []

    def save(self, roster: Sequence[Participant]) -> None:
        payload = [ParticipantRecord.model_validate(p).model_dump() for p in roster]
        self.storage.set(self.key, json.dumps(payload, ensure_ascii=False))
