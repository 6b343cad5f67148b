from __future__ import annotations

from typing import List

import httpx

from ..config import DEFAULT_NAMING_THEME
from ..exceptions import NamingAdapterError
from .base import build_prompt, parse_name_list


class GeminiNamingAdapter:
    def __init__(
        self,
        *,
        api_key: str,
        model: str = "gemini-3-flash-preview",
        language: str = "Traditional Chinese",
        name: str = "gemini",
    ):
        self.api_key = api_key
        self.model = model
        self.language = language
        self.name = name

    async def suggest_names(self, count: int, *, theme: str = DEFAULT_NAMING_THEME) -> List[str]:
        payload = {
            "contents": [{"parts": [{"text": build_prompt(count, theme, self.language)}]}],
        }
        async with httpx.AsyncClient(timeout=60) as client:
            response = await client.post(
                f"https://generativelanguage.googleapis.com/v1beta/models/{self.model}:generateContent",
                headers={"x-goog-api-key": self.api_key, "Content-Type": "application/json"},
                json=payload,
            )
            response.raise_for_status()
            data = response.json()
        try:
            parts = data["candidates"][0]["content"]["parts"]
            text = "".join(part.get("text", "") for part in parts)
        except (KeyError, IndexError, TypeError) as exc:
            raise NamingAdapterError(f"Unexpected Gemini payload: {exc!r}") from exc
        return parse_name_list(text)
