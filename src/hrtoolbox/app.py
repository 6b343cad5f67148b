from __future__ import annotations

import random
from dataclasses import dataclass

from .clock import Clock, FrameScheduler
from .config import get_settings
from .grouping import GroupingEngine
from .lottery import LotteryEngine
from .naming import NamingAdapter, build_naming_adapter
from .roster import RosterStore
from .storage import JsonFileStorage, KeyValueStorage, RosterRepository


@dataclass
class Toolbox:
    roster: RosterStore
    lottery: LotteryEngine
    grouping: GroupingEngine


def create_toolbox(
    settings=None,
    *,
    storage: KeyValueStorage | None = None,
    namer: NamingAdapter | None = None,
    clock: Clock | None = None,
    frames: FrameScheduler | None = None,
    rng: random.Random | None = None,
) -> Toolbox:
    """Wire the roster to both engines.

    The lottery subscribes to roster changes so any edit resets the draw.
    """

    settings = settings or get_settings()
    storage = storage if storage is not None else JsonFileStorage(settings.storage_path)
    roster = RosterStore(RosterRepository(storage, settings.storage_key))
    lottery = LotteryEngine(roster.get(), settings=settings, clock=clock, frames=frames, rng=rng)
    roster.subscribe(lottery.on_roster_changed)
    grouping = GroupingEngine(
        namer if namer is not None else build_naming_adapter(settings),
        settings=settings,
        rng=rng,
    )
    return Toolbox(roster=roster, lottery=lottery, grouping=grouping)
