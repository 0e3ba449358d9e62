"""Plain-text week summary."""
from __future__ import annotations

from datetime import datetime
from typing import Sequence

from .config import GOAL, GoalRange
from .models import TrackedItem
from .report import progress_bucket
from .time_utils import week_range_label


def format_status(dataset: Sequence[TrackedItem], now: datetime, goal: GoalRange = GOAL) -> str:
    lines = [
        f"Weekly Sets ({week_range_label(now)})",
        f"Goal: {goal.min_goal}-{goal.max_goal} sets per body part",
        "",
    ]
    if not dataset:
        lines.append("No body parts tracked this week.")
        return "\n".join(lines)

    width = max(len(item.name) for item in dataset)
    for item in dataset:
        bucket = progress_bucket(item.sets, goal)
        lines.append(f"[{item.id:>3}] {item.name:<{width}}  {item.sets:>3}  {bucket}")
    return "\n".join(lines)


def run_status(dataset: Sequence[TrackedItem], now: datetime) -> None:
    print(format_status(dataset, now))
