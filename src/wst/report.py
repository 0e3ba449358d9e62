"""HTML report rendering for the weekly sets tracker."""
from __future__ import annotations

from datetime import datetime
from pathlib import Path
from typing import Dict, List, Optional, Sequence

from jinja2 import Environment, FileSystemLoader, select_autoescape

from .config import CLOSE_THRESHOLD, GOAL, GoalRange, load_paths
from .logging_utils import get_logger
from .models import TrackedItem
from .time_utils import week_range_label

LOG = get_logger(__name__)


def progress_bucket(sets: int, goal: GoalRange = GOAL) -> str:
    """Qualitative progress label used for colouring a row."""

    if sets >= goal.min_goal:
        return "goal"
    if sets > CLOSE_THRESHOLD:
        return "close"
    return "starting"


def progress_percent(sets: int, goal: GoalRange = GOAL) -> float:
    if goal.max_goal <= 0:
        return 100.0
    return min(sets / goal.max_goal * 100, 100.0)


def build_rows(dataset: Sequence[TrackedItem], goal: GoalRange = GOAL) -> List[Dict[str, object]]:
    return [
        {
            "id": item.id,
            "name": item.name,
            "sets": item.sets,
            "bucket": progress_bucket(item.sets, goal),
            "percent": progress_percent(item.sets, goal),
        }
        for item in dataset
    ]


def render_report(
    dataset: Sequence[TrackedItem],
    now: datetime,
    templates_dir: Path,
    goal: GoalRange = GOAL,
) -> str:
    env = Environment(
        loader=FileSystemLoader(str(templates_dir)),
        autoescape=select_autoescape(["html", "xml", "j2"]),
        trim_blocks=True,
        lstrip_blocks=True,
    )
    tmpl = env.get_template("index.html.j2")
    return tmpl.render(
        generated_at=now.isoformat(timespec="seconds"),
        week_label=week_range_label(now),
        goal=goal,
        rows=build_rows(dataset, goal),
    )


def run_report(dataset: Sequence[TrackedItem], now: datetime, output_dir: Optional[Path] = None) -> str:
    paths = load_paths()
    docs = output_dir or paths.docs
    docs.mkdir(parents=True, exist_ok=True)

    rendered = render_report(dataset, now, paths.templates)
    output_path = docs / "index.html"
    output_path.write_text(rendered, encoding="utf-8")
    LOG.info("Report written to %s", output_path)
    return str(output_path)
