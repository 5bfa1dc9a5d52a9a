"""Shared pytest fixtures for the odiag-split test suite."""

import os
from datetime import datetime, timedelta

import pytest

from odiag_split.models import Entry, Log

FIXTURES_DIR = os.path.join(os.path.dirname(__file__), "fixtures")
SAMPLE_NAME = "appLog-2023-09-16-16-25-12.log"

HEADER = "AppVersion: 2.17.13\nConnect: Bluetooth"


def make_log(count: int, created_at: datetime | None = None) -> Log:
    """Build a Log with *count* entries one second apart."""
    created_at = created_at or datetime(2023, 9, 16, 10, 0, 0).astimezone()
    entries = tuple(
        Entry(
            time=created_at + timedelta(seconds=i, milliseconds=5),
            send=f"Send:\tAT{i}",
            receive=f"Receive: OK {i}\n>",
        )
        for i in range(count)
    )
    return Log(header=HEADER, entries=entries, file_created_at=created_at)


@pytest.fixture()
def sample_path() -> str:
    return os.path.join(FIXTURES_DIR, SAMPLE_NAME)


@pytest.fixture()
def sample_text(sample_path) -> str:
    with open(sample_path, "r", encoding="utf-8", newline="") as f:
        return f.read()


@pytest.fixture()
def created_at() -> datetime:
    return datetime(2023, 9, 16, 16, 25, 12).astimezone()
