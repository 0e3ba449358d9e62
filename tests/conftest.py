"""Shared fixtures for the tracker tests."""

from datetime import datetime

import pytest

from wst.db import MemoryBlobStore

# Week of Monday 2026-10-12 .. Sunday 2026-10-18
MONDAY = datetime(2026, 10, 12)
WEDNESDAY = datetime(2026, 10, 14, 18, 45)
SUNDAY = datetime(2026, 10, 18, 23, 59, 59, 999999)
NEXT_MONDAY = datetime(2026, 10, 19)


@pytest.fixture
def blobs() -> MemoryBlobStore:
    return MemoryBlobStore()


@pytest.fixture
def wednesday() -> datetime:
    return WEDNESDAY
