from __future__ import annotations

from .base import NamingAdapter
from .gemini_adapter import GeminiNamingAdapter
from .noop import NoopNamingAdapter
from .openai_adapter import OpenAINamingAdapter


def build_naming_adapter(settings) -> NamingAdapter:
    """Pick the naming adapter configured in ``settings``.

    A provider without an API key falls back to :class:`NoopNamingAdapter`.
    """

    provider = settings.naming_provider
    if provider == "gemini" and settings.gemini_api_key:
        return GeminiNamingAdapter(
            api_key=settings.gemini_api_key,
            model=settings.gemini_model,
            language=settings.naming_language,
        )
    if provider == "openai" and settings.openai_api_key:
        return OpenAINamingAdapter(
            api_key=settings.openai_api_key,
            model=settings.openai_model,
            language=settings.naming_language,
        )
    return NoopNamingAdapter()
