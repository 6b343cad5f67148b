from __future__ import annotations

import os
import random
from dataclasses import dataclass

import pytest

# Ensure deterministic environment for tests
os.environ.setdefault("HR_TOOLBOX_LOG_FILE", "logs/hrtoolbox-test.log")
os.environ.setdefault("HR_TOOLBOX_NAMING_PROVIDER", "none")

from hrtoolbox.clock import ManualClock, ManualFrameScheduler
from hrtoolbox.config import DEFAULT_NAMING_THEME
from hrtoolbox.lottery import LotteryEngine
from hrtoolbox.models import Participant


@dataclass
class DummySettings:
    draw_duration_ms: int = 2500
    frame_interval_ms: int = 16
    display_sample_size: int = 6
    grouping_delay_ms: int = 0
    naming_provider: str = "none"
    naming_timeout_sec: float = 1.0
    naming_theme: str = DEFAULT_NAMING_THEME
    naming_language: str = "Traditional Chinese"
    gemini_api_key: str | None = None
    gemini_model: str = "gemini-3-flash-preview"
    openai_api_key: str | None = None
    openai_model: str = "gpt-4o-mini"
    storage_path: str = "data/test.json"
    storage_key: str = "hr-toolbox-participants"


@pytest.fixture
def settings() -> DummySettings:
    return DummySettings()


@pytest.fixture
def roster() -> list[Participant]:
    names = ["Alice", "Bob", "Chen", "Dana", "Eitan", "Fumi", "Goran", "Hana", "Ivo", "Jun"]
    return [Participant(name, id=f"p{index}") for index, name in enumerate(names)]


@pytest.fixture
def rng() -> random.Random:
    return random.Random(1234)


@pytest.fixture
def clock() -> ManualClock:
    return ManualClock()


@pytest.fixture
def frames() -> ManualFrameScheduler:
    return ManualFrameScheduler()


@pytest.fixture
def engine(roster, settings, clock, frames, rng) -> LotteryEngine:
    return LotteryEngine(roster, settings=settings, clock=clock, frames=frames, rng=rng)


@pytest.fixture
def finish_draw(clock: ManualClock, frames: ManualFrameScheduler, settings: DummySettings):
    """Run one draw through to completion on the manual scheduler."""

    def _finish(engine: LotteryEngine):
        engine.start_draw()
        frames.run_frame()
        clock.advance(settings.draw_duration_ms)
        frames.run_frame()
        return engine.state

    return _finish
