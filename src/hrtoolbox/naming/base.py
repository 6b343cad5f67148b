from __future__ import annotations

import re
from typing import List, Protocol, Sequence

from ..config import DEFAULT_NAMING_THEME

_SEPARATORS = re.compile(r"[,，、\n]+")


class NamingAdapter(Protocol):
    name: str

    async def suggest_names(self, count: int, *, theme: str = DEFAULT_NAMING_THEME) -> Sequence[str]:
        """Return at least ``count`` display names or raise."""


def build_prompt(count: int, theme: str, language: str = "Traditional Chinese") -> str:
    return (
        f"Generate {count} creative, professional team names for a corporate event in {language}. "
        f"Return ONLY a comma-separated list. Theme: {theme}."
    )


def parse_name_list(text: str | None) -> List[str]:
    """Split a comma-separated model reply into clean names."""

    if not text:
        return []
    return [part.strip() for part in _SEPARATORS.split(text) if part.strip()]
