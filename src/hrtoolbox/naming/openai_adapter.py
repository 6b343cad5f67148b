from __future__ import annotations

from typing import List

import httpx

from ..config import DEFAULT_NAMING_THEME
from ..exceptions import NamingAdapterError
from .base import build_prompt, parse_name_list


class OpenAINamingAdapter:
    def __init__(
        self,
        *,
        api_key: str,
        model: str = "gpt-4o-mini",
        language: str = "Traditional Chinese",
        name: str = "openai",
    ):
        self.api_key = api_key
        self.model = model
        self.language = language
        self.name = name

    async def suggest_names(self, count: int, *, theme: str = DEFAULT_NAMING_THEME) -> List[str]:
        payload = {
            "model": self.model,
            "messages": [{"role": "user", "content": build_prompt(count, theme, self.language)}],
        }
        async with httpx.AsyncClient(timeout=60) as client:
            response = await client.post(
                "https://api.openai.com/v1/chat/completions",
                headers={
                    "Authorization": f"Bearer {self.api_key}",
                    "Content-Type": "application/json",
                },
                json=payload,
            )
            response.raise_for_status()
            data = response.json()
        try:
            content = data["choices"][0]["message"].get("content", "")
        except (KeyError, IndexError, TypeError, AttributeError) as exc:
            raise NamingAdapterError(f"Unexpected OpenAI payload: {exc!r}") from exc
        return parse_name_list(content)
