"""Tracked items and (de)serialization of the persisted blobs."""
from __future__ import annotations

import json
from dataclasses import asdict, dataclass
from typing import Generic, List, Optional, Sequence, TypeVar

from .config import DEFAULT_SEED_NAMES

T = TypeVar("T")


@dataclass(frozen=True)
class TrackedItem:
    id: int
    name: str
    sets: int = 0


Dataset = List[TrackedItem]


@dataclass(frozen=True)
class ReadResult(Generic[T]):
    """Outcome of decoding one persisted blob: a value or a corruption reason."""

    value: Optional[T] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, value: T) -> "ReadResult[T]":
        return cls(value=value)

    @classmethod
    def corrupt(cls, reason: str) -> "ReadResult[T]":
        return cls(error=reason)


def default_seed() -> Dataset:
    """Return a fresh copy of the week-start dataset."""

    return [TrackedItem(id=idx, name=name, sets=0) for idx, name in enumerate(DEFAULT_SEED_NAMES, start=1)]


def name_key(name: str) -> str:
    return name.strip().casefold()


def _is_int(value: object) -> bool:
    # bool is an int subclass; true/false in JSON is not a valid id or count
    return isinstance(value, int) and not isinstance(value, bool)


def parse_marker(raw: Optional[str]) -> ReadResult[int]:
    """Decode the stringified epoch marker."""

    if raw is None:
        return ReadResult.corrupt("marker missing")
    try:
        return ReadResult.success(int(raw.strip()))
    except (AttributeError, ValueError):
        return ReadResult.corrupt(f"marker is not an integer: {str(raw)[:40]!r}")


def parse_dataset(raw: Optional[str]) -> ReadResult[Dataset]:
    """Decode and validate the JSON dataset blob.

    Every item must carry an int id, a non-empty name and non-negative sets;
    ids and case-insensitive names must be unique.
    """

    if raw is None:
        return ReadResult.corrupt("dataset missing")
    try:
        payload = json.loads(raw)
    except (TypeError, ValueError, RecursionError) as exc:
        return ReadResult.corrupt(f"dataset is not valid JSON: {exc}")

    if not isinstance(payload, list):
        return ReadResult.corrupt(f"dataset must be a JSON array, got {type(payload).__name__}")

    items: Dataset = []
    seen_ids = set()
    seen_names = set()
    for idx, entry in enumerate(payload):
        if not isinstance(entry, dict):
            return ReadResult.corrupt(f"item {idx} is not an object")
        item_id = entry.get("id")
        name = entry.get("name")
        sets = entry.get("sets")
        if not _is_int(item_id):
            return ReadResult.corrupt(f"item {idx} has invalid id {item_id!r}")
        if not isinstance(name, str) or not name.strip():
            return ReadResult.corrupt(f"item {idx} has invalid name {name!r}")
        if not _is_int(sets) or sets < 0:
            return ReadResult.corrupt(f"item {idx} has invalid sets {sets!r}")
        if item_id in seen_ids:
            return ReadResult.corrupt(f"duplicate id {item_id}")
        key = name_key(name)
        if key in seen_names:
            return ReadResult.corrupt(f"duplicate name {name!r}")
        seen_ids.add(item_id)
        seen_names.add(key)
        items.append(TrackedItem(id=item_id, name=name, sets=sets))

    return ReadResult.success(items)


def serialize_dataset(dataset: Sequence[TrackedItem]) -> str:
    return json.dumps([asdict(item) for item in dataset])


def serialize_marker(marker: int) -> str:
    return str(marker)
