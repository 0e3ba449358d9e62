"""Project configuration, goal range and seed defaults."""
from dataclasses import dataclass
from pathlib import Path
from typing import List


# Canonical repository paths
REPO_ROOT: Path = Path(__file__).resolve().parents[2]
DATA_DIR: Path = REPO_ROOT / "data"
DB_PATH: Path = DATA_DIR / "weekly_sets.sqlite"
DOCS_PATH: Path = REPO_ROOT / "docs" / "index.html"
TEMPLATES_DIR: Path = REPO_ROOT / "templates"

# Keys in the blob store
DATA_KEY = "strengthTrackerData"
WEEK_KEY = "strengthTrackerWeekStart"

MIN_GOAL = 15
MAX_GOAL = 20

# Sets above this count are "getting close" to the goal.
CLOSE_THRESHOLD = 10


@dataclass
class Paths:
    """Canonical project paths used by the CLI."""

    root: Path = REPO_ROOT
    data: Path = DATA_DIR
    docs: Path = DOCS_PATH.parent
    templates: Path = TEMPLATES_DIR
    db: Path = DB_PATH


def load_paths() -> Paths:
    """Return default project paths.

    Expand this helper once configuration sources (env, files, CLI) are defined.
    """

    return Paths()


@dataclass(frozen=True)
class GoalRange:
    """Weekly sets target per body part."""

    min_goal: int
    max_goal: int

    def __post_init__(self) -> None:
        if self.min_goal < 0:
            raise ValueError("min_goal must be >= 0")
        if self.min_goal > self.max_goal:
            raise ValueError("min_goal must be <= max_goal")


GOAL = GoalRange(MIN_GOAL, MAX_GOAL)

# Body parts every fresh week starts with, in display order.
DEFAULT_SEED_NAMES: List[str] = ["Chest", "Back", "Legs", "Shoulders"]
