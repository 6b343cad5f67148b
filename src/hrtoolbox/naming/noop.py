from __future__ import annotations

from typing import List

from ..config import DEFAULT_NAMING_THEME


class NoopNamingAdapter:
    """Offline adapter: suggests nothing so default group names are kept."""

    def __init__(self, name: str = "none"):
        self.name = name

    async def suggest_names(self, count: int, *, theme: str = DEFAULT_NAMING_THEME) -> List[str]:
        return []
