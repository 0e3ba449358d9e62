"""Tests for decoding persisted blobs."""

import json

import pytest

from wst.models import (
    TrackedItem,
    default_seed,
    parse_dataset,
    parse_marker,
    serialize_dataset,
)


def test_default_seed_contents():
    seed = default_seed()
    assert [(item.id, item.name, item.sets) for item in seed] == [
        (1, "Chest", 0),
        (2, "Back", 0),
        (3, "Legs", 0),
        (4, "Shoulders", 0),
    ]


def test_default_seed_is_a_fresh_list():
    seed = default_seed()
    seed.pop()
    assert len(default_seed()) == 4


@pytest.mark.parametrize("raw,expected", [("1760227200000", 1760227200000), (" 42 ", 42), ("-5", -5)])
def test_parse_marker_valid(raw, expected):
    result = parse_marker(raw)
    assert result.ok
    assert result.value == expected


@pytest.mark.parametrize("raw", [None, "", "abc", "12.5", "{corrupted"])
def test_parse_marker_invalid(raw):
    result = parse_marker(raw)
    assert not result.ok
    assert result.value is None
    assert result.error


def test_parse_dataset_valid():
    raw = json.dumps([{"id": 1, "name": "Chest", "sets": 7}, {"id": 9, "name": "Arms", "sets": 0}])
    result = parse_dataset(raw)
    assert result.ok
    assert result.value == [TrackedItem(1, "Chest", 7), TrackedItem(9, "Arms", 0)]


def test_parse_dataset_empty_array_is_valid():
    result = parse_dataset("[]")
    assert result.ok
    assert result.value == []


@pytest.mark.parametrize(
    "raw",
    [
        None,
        "{corrupted",
        "null",
        '{"id": 1}',
        '["Chest"]',
        '[{"id": "1", "name": "Chest", "sets": 0}]',
        '[{"id": true, "name": "Chest", "sets": 0}]',
        '[{"id": 1, "name": "", "sets": 0}]',
        '[{"id": 1, "name": "   ", "sets": 0}]',
        '[{"id": 1, "name": 5, "sets": 0}]',
        '[{"id": 1, "name": "Chest", "sets": -1}]',
        '[{"id": 1, "name": "Chest", "sets": 1.5}]',
        '[{"id": 1, "name": "Chest"}]',
        '[{"id": 1, "name": "Chest", "sets": 0}, {"id": 1, "name": "Back", "sets": 0}]',
        '[{"id": 1, "name": "Chest", "sets": 0}, {"id": 2, "name": " chest ", "sets": 0}]',
    ],
)
def test_parse_dataset_rejects_malformed(raw):
    result = parse_dataset(raw)
    assert not result.ok
    assert result.error


def test_serialize_dataset_shape():
    raw = serialize_dataset([TrackedItem(3, "Legs", 2)])
    assert json.loads(raw) == [{"id": 3, "name": "Legs", "sets": 2}]


def test_parse_dataset_deep_nesting_is_corrupt():
    result = parse_dataset("[" * 200000 + "]" * 200000)
    assert not result.ok
    assert "not valid JSON" in result.error
