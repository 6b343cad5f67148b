from __future__ import annotations

import random

import pytest

from hrtoolbox import GroupingMode, create_toolbox
from hrtoolbox.config import get_settings
from hrtoolbox.naming import NoopNamingAdapter
from hrtoolbox.storage import MemoryStorage


def test_roster_edits_reset_the_lottery(settings, clock, frames) -> None:
    toolbox = create_toolbox(
        settings, storage=MemoryStorage(), clock=clock, frames=frames, rng=random.Random(1)
    )
    assert isinstance(toolbox.grouping.namer, NoopNamingAdapter)

    toolbox.roster.add_names(["Alice", "Bob", "Chen"])
    assert toolbox.lottery.state.available == toolbox.roster.get()

    toolbox.lottery.start_draw()
    frames.run_frame()
    clock.advance(settings.draw_duration_ms)
    frames.run_frame()
    assert len(toolbox.lottery.state.history) == 1

    toolbox.roster.remove(toolbox.roster.get()[0].id)
    state = toolbox.lottery.state
    assert state.history == ()
    assert state.available == toolbox.roster.get()


@pytest.mark.asyncio
async def test_grouping_reads_current_roster(settings) -> None:
    toolbox = create_toolbox(settings, storage=MemoryStorage(), rng=random.Random(2))
    toolbox.roster.load_sample()

    groups = await toolbox.grouping.generate_groups(toolbox.roster.get(), GroupingMode.BY_COUNT, 3)
    assert [len(g) for g in groups] == [6, 5, 5]


def test_settings_read_environment(monkeypatch) -> None:
    monkeypatch.setenv("HR_TOOLBOX_DRAW_DURATION_MS", "1200")
    monkeypatch.setenv("HR_TOOLBOX_NAMING_PROVIDER", "gemini")
    get_settings.cache_clear()
    try:
        settings = get_settings()
        assert settings.draw_duration_ms == 1200
        assert settings.naming_provider == "gemini"
        assert settings.grouping_delay_ms == 800
        assert settings.storage_key == "hr-toolbox-participants"
    finally:
        get_settings.cache_clear()
