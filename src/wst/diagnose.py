"""Read-only inspection of the persisted week state."""
from __future__ import annotations

from datetime import datetime

from .config import DATA_KEY, WEEK_KEY
from .logging_utils import get_logger
from .models import default_seed, parse_dataset, parse_marker
from .store import BlobStore, load_or_reset
from .time_utils import week_start

LOG = get_logger(__name__)


def run_diagnose(blobs: BlobStore, now: datetime) -> int:
    """Report what a load at ``now`` would do, without writing anything.

    Returns 0 if the persisted week would be continued, else 2.
    """
    raw_marker = blobs.get(WEEK_KEY)
    raw_dataset = blobs.get(DATA_KEY)
    current = week_start(now)

    results = []

    marker = parse_marker(raw_marker)
    if not marker.ok:
        results.append(f"[FAIL] {WEEK_KEY}: {marker.error}")
    elif marker.value != current:
        results.append(f"[FAIL] {WEEK_KEY}: {marker.value} is not the current week {current}")
    else:
        results.append(f"[OK] {WEEK_KEY}: {marker.value}")

    dataset = parse_dataset(raw_dataset)
    if dataset.ok:
        results.append(f"[OK] {DATA_KEY}: {len(dataset.value)} items")
    else:
        LOG.error("Persisted dataset unreadable: %s", dataset.error)
        results.append(f"[FAIL] {DATA_KEY}: {dataset.error}")

    decision = load_or_reset(now, raw_marker, raw_dataset, default_seed())

    print("\nDiagnostic Results:")
    for line in results:
        print(line)
    print(f"Load decision: {'reset' if decision.did_reset else 'continue'}")

    return 2 if decision.did_reset else 0
