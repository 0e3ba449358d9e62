"""Week-scoped tracker state: load/reset decision and the mutation path."""
from __future__ import annotations

import enum
from dataclasses import dataclass, replace
from datetime import datetime
from typing import List, Optional, Protocol, Sequence, Tuple

from .config import DATA_KEY, WEEK_KEY
from .logging_utils import get_logger
from .models import (
    Dataset,
    TrackedItem,
    default_seed,
    name_key,
    parse_dataset,
    parse_marker,
    serialize_dataset,
    serialize_marker,
)
from .time_utils import week_start

LOG = get_logger(__name__)


class BlobStore(Protocol):
    def get(self, key: str) -> Optional[str]:
        ...

    def set(self, key: str, value: str) -> None:
        ...


class StoreStateError(RuntimeError):
    """Raised when a store handle is used out of order."""


class Outcome(enum.Enum):
    APPLIED = "applied"
    DUPLICATE = "duplicate"
    EMPTY_NAME = "empty_name"
    NOT_FOUND = "not_found"


@dataclass(frozen=True)
class LoadResult:
    dataset: Dataset
    marker: int
    did_reset: bool
    reason: Optional[str] = None
    corrupt: bool = False


def load_or_reset(
    now: datetime,
    persisted_marker: Optional[str],
    persisted_dataset: Optional[str],
    seed: Sequence[TrackedItem],
) -> LoadResult:
    """Decide whether persisted state belongs to the week containing ``now``.

    Anything short of a matching marker plus a valid dataset yields the seed
    with ``did_reset=True``; decoding problems are reported in ``reason``
    and never raised.
    """

    current = week_start(now)

    marker = parse_marker(persisted_marker)
    if not marker.ok:
        return LoadResult(list(seed), current, True, marker.error, corrupt=persisted_marker is not None)
    if marker.value != current:
        return LoadResult(list(seed), current, True, f"week rollover ({marker.value} -> {current})")

    dataset = parse_dataset(persisted_dataset)
    if not dataset.ok:
        return LoadResult(list(seed), current, True, dataset.error, corrupt=True)

    return LoadResult(dataset.value, current, False)


def next_item_id(dataset: Sequence[TrackedItem]) -> int:
    return max((item.id for item in dataset), default=0) + 1


def add_item(dataset: Sequence[TrackedItem], name: str) -> Tuple[Dataset, Outcome]:
    """Append a new item with zero sets unless the name is blank or taken."""

    trimmed = name.strip()
    if not trimmed:
        return list(dataset), Outcome.EMPTY_NAME
    key = name_key(trimmed)
    if any(name_key(item.name) == key for item in dataset):
        return list(dataset), Outcome.DUPLICATE
    item = TrackedItem(id=next_item_id(dataset), name=trimmed, sets=0)
    return [*dataset, item], Outcome.APPLIED


def adjust_sets(dataset: Sequence[TrackedItem], item_id: int, delta: int) -> Tuple[Dataset, Outcome]:
    """Shift an item's sets by ``delta``, saturating at zero."""

    updated: Dataset = []
    outcome = Outcome.NOT_FOUND
    for item in dataset:
        if item.id == item_id:
            item = replace(item, sets=max(0, item.sets + delta))
            outcome = Outcome.APPLIED
        updated.append(item)
    return updated, outcome


def remove_item(dataset: Sequence[TrackedItem], item_id: int) -> Tuple[Dataset, Outcome]:
    updated = [item for item in dataset if item.id != item_id]
    outcome = Outcome.APPLIED if len(updated) < len(dataset) else Outcome.NOT_FOUND
    return updated, outcome


class WeekEpochStore:
    """Single-owner handle tying the in-memory week to a blob store.

    Call ``load`` exactly once, then mutate; every mutation persists the
    dataset and leaves the marker alone.
    """

    def __init__(self, blobs: BlobStore, seed: Optional[Sequence[TrackedItem]] = None) -> None:
        self.blobs = blobs
        self.seed: List[TrackedItem] = list(seed) if seed is not None else default_seed()
        checked = parse_dataset(serialize_dataset(self.seed))
        if not checked.ok:
            raise ValueError(f"invalid seed: {checked.error}")
        self._dataset: Optional[Dataset] = None
        self._marker: Optional[int] = None

    @property
    def loaded(self) -> bool:
        return self._dataset is not None

    @property
    def dataset(self) -> Dataset:
        return list(self._require_loaded())

    @property
    def marker(self) -> int:
        if self._marker is None:
            raise StoreStateError("store not loaded; call load(now) first")
        return self._marker

    def load(self, now: datetime) -> LoadResult:
        if self.loaded:
            raise StoreStateError("store already loaded; open a new handle to reload")

        result = load_or_reset(
            now,
            self.blobs.get(WEEK_KEY),
            self.blobs.get(DATA_KEY),
            self.seed,
        )
        if result.corrupt:
            LOG.warning("Discarding unreadable week state: %s", result.reason)
        if result.did_reset:
            LOG.info("Starting fresh week %s: %s", result.marker, result.reason)
            # marker last: an interrupted reset leaves a stale marker and resets again
            self.blobs.set(DATA_KEY, serialize_dataset(result.dataset))
            self.blobs.set(WEEK_KEY, serialize_marker(result.marker))
        else:
            LOG.debug("Continuing week %s with %d items", result.marker, len(result.dataset))

        self._dataset, self._marker = list(result.dataset), result.marker
        return result

    def add_item(self, name: str) -> Tuple[Dataset, Outcome]:
        return self._apply(add_item(self._require_loaded(), name), f"add {name!r}")

    def adjust_sets(self, item_id: int, delta: int) -> Tuple[Dataset, Outcome]:
        return self._apply(
            adjust_sets(self._require_loaded(), item_id, delta),
            f"adjust {item_id} by {delta:+d}",
        )

    def remove_item(self, item_id: int) -> Tuple[Dataset, Outcome]:
        return self._apply(remove_item(self._require_loaded(), item_id), f"remove {item_id}")

    def _require_loaded(self) -> Dataset:
        if self._dataset is None:
            raise StoreStateError("store not loaded; call load(now) first")
        return self._dataset

    def _apply(self, result: Tuple[Dataset, Outcome], action: str) -> Tuple[Dataset, Outcome]:
        dataset, outcome = result
        self._dataset = dataset
        self.blobs.set(DATA_KEY, serialize_dataset(dataset))
        LOG.debug("%s -> %s", action, outcome.value)
        return list(dataset), outcome
