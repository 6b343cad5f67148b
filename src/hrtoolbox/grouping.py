"""Random team partitioning.

Every run shuffles the whole roster and then cuts it into groups either by a
fixed group size or by a fixed number of groups. Membership is decided
before any naming happens; the naming step can only rename groups.
"""

from __future__ import annotations

import asyncio
import math
import random
from dataclasses import replace
from typing import List, Sequence, Tuple

from .config import get_settings
from .logging import logger
from .models import Group, GroupingMode, Participant
from .naming import NamingAdapter, NoopNamingAdapter


def shuffle(participants: Sequence[Participant], rng: random.Random) -> List[Participant]:
    """Return a uniformly random permutation without touching the input."""

    items = list(participants)
    for i in range(len(items) - 1, 0, -1):
        j = rng.randint(0, i)
        items[i], items[j] = items[j], items[i]
    return items


def clamp_parameter(mode: GroupingMode, parameter: int, n: int) -> int:
    value = max(1, int(parameter))
    if mode == GroupingMode.BY_COUNT:
        value = min(value, max(n, 1))
    return value


def partition_by_size(items: Sequence[Participant], size: int) -> List[List[Participant]]:
    size = max(1, size)
    count = math.ceil(len(items) / size)
    return [list(items[k * size : (k + 1) * size]) for k in range(count)]


def partition_by_count(items: Sequence[Participant], count: int) -> List[List[Participant]]:
    """Deal ``items`` round-robin into ``min(count, len(items))`` groups."""

    count = min(max(1, count), len(items))
    buckets: List[List[Participant]] = [[] for _ in range(count)]
    for index, participant in enumerate(items):
        buckets[index % count].append(participant)
    return buckets


def default_group_name(index: int) -> str:
    return f"Group {index + 1}"


def build_groups(
    roster: Sequence[Participant],
    mode: GroupingMode,
    parameter: int,
    rng: random.Random,
) -> Tuple[Group, ...]:
    """Shuffle ``roster`` and partition it with default group names."""

    if not roster:
        return ()
    mode = GroupingMode(mode)
    value = clamp_parameter(mode, parameter, len(roster))
    shuffled = shuffle(roster, rng)
    if mode == GroupingMode.BY_SIZE:
        buckets = partition_by_size(shuffled, value)
    else:
        buckets = partition_by_count(shuffled, value)
    return tuple(
        Group(id=f"group-{index}", name=default_group_name(index), members=tuple(members))
        for index, members in enumerate(buckets)
    )


class GroupingEngine:
    """Produces a fresh grouping per call and keeps only the latest one."""

    def __init__(
        self,
        namer: NamingAdapter | None = None,
        *,
        settings=None,
        rng: random.Random | None = None,
    ) -> None:
        self.settings = settings or get_settings()
        self.namer = namer or NoopNamingAdapter()
        self._rng = rng or random.Random()
        self._groups: Tuple[Group, ...] = ()
        self._is_generating = False

    @property
    def groups(self) -> Tuple[Group, ...]:
        return self._groups

    @property
    def is_generating(self) -> bool:
        return self._is_generating

    async def generate_groups(
        self,
        roster: Sequence[Participant],
        mode: GroupingMode = GroupingMode.BY_SIZE,
        parameter: int = 4,
    ) -> Tuple[Group, ...]:
        if self._is_generating:
            logger.debug("Grouping already in progress, ignoring request")
            return self._groups

        self._is_generating = True
        try:
            delay = self.settings.grouping_delay_ms
            if delay > 0:
                await asyncio.sleep(delay / 1000.0)
            groups = build_groups(roster, mode, parameter, self._rng)
            groups = await self._apply_names(groups)
            self._groups = groups
        finally:
            self._is_generating = False

        logger.bind(
            event="groups_generated",
            mode=GroupingMode(mode).value,
            parameter=parameter,
            participants=len(roster),
            groups=len(groups),
        ).info("groups_generated")
        return groups

    async def _apply_names(self, groups: Tuple[Group, ...]) -> Tuple[Group, ...]:
        if not groups:
            return groups
        try:
            names = await asyncio.wait_for(
                self.namer.suggest_names(len(groups), theme=self.settings.naming_theme),
                timeout=self.settings.naming_timeout_sec,
            )
        except asyncio.TimeoutError:
            logger.bind(event="group_naming_failed", reason="timeout").warning(
                "Naming adapter {} timed out, using default team names", self.namer.name
            )
            return groups
        except Exception as exc:
            logger.bind(event="group_naming_failed", reason="error").warning(
                "Naming adapter {} failed: {!r}, using default team names", self.namer.name, exc
            )
            return groups

        names = [str(name).strip() for name in names or () if str(name).strip()]
        if len(names) < len(groups):
            if names:
                logger.bind(event="group_naming_failed", reason="short").info(
                    "Naming adapter returned {} names for {} groups", len(names), len(groups)
                )
            return groups
        return tuple(replace(group, name=name) for group, name in zip(groups, names))
