"""Best-effort group naming through external text generation services."""

from .base import NamingAdapter, build_prompt, parse_name_list
from .gemini_adapter import GeminiNamingAdapter
from .noop import NoopNamingAdapter
from .openai_adapter import OpenAINamingAdapter
from .registry import build_naming_adapter

__all__ = [
    "NamingAdapter",
    "GeminiNamingAdapter",
    "OpenAINamingAdapter",
    "NoopNamingAdapter",
    "build_naming_adapter",
    "build_prompt",
    "parse_name_list",
]
