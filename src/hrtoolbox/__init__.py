"""Event helpers for HR coordinators: roster, prize draw and team grouping."""

from .app import Toolbox, create_toolbox
from .exceptions import NamingAdapterError, NoEligibleParticipantsError, ToolboxError, ValidationError
from .grouping import GroupingEngine, build_groups, partition_by_count, partition_by_size, shuffle
from .lottery import LotteryEngine
from .models import Group, GroupingMode, LotteryState, Participant
from .roster import RosterStore, parse_csv_names, parse_names
from .storage import JsonFileStorage, MemoryStorage, RosterRepository

__all__ = [
    "Toolbox",
    "create_toolbox",
    "GroupingEngine",
    "LotteryEngine",
    "RosterStore",
    "RosterRepository",
    "JsonFileStorage",
    "MemoryStorage",
    "Participant",
    "Group",
    "GroupingMode",
    "LotteryState",
    "ToolboxError",
    "ValidationError",
    "NoEligibleParticipantsError",
    "NamingAdapterError",
    "build_groups",
    "partition_by_count",
    "partition_by_size",
    "shuffle",
    "parse_names",
    "parse_csv_names",
]
