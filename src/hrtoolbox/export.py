"""Plain-text and CSV renderings of a grouping result."""

from __future__ import annotations

from datetime import date
from pathlib import Path
from typing import Sequence

from .models import Group

CSV_HEADER = "GroupName,MemberName"
BOM = "\ufeff"


def groups_to_text(groups: Sequence[Group]) -> str:
    blocks = []
    for group in groups:
        lines = [f"[{group.name}]"]
        lines.extend(f" • {member.name}" for member in group.members)
        blocks.append("\n".join(lines))
    return "\n\n".join(blocks)


def _quote(value: str) -> str:
    return '"' + value.replace('"', '""') + '"'


def groups_to_csv(groups: Sequence[Group]) -> str:
    """Render one row per member, prefixed with a BOM so spreadsheets detect UTF-8."""

    rows = [CSV_HEADER]
    for group in groups:
        for member in group.members:
            rows.append(f"{_quote(group.name)},{_quote(member.name)}")
    return BOM + "\n".join(rows) + "\n"


def export_filename(day: date | None = None) -> str:
    day = day or date.today()
    return f"groups_{day.isoformat()}.csv"


def write_csv(groups: Sequence[Group], path: str | Path) -> Path:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(groups_to_csv(groups).encode("utf-8"))
    return path
