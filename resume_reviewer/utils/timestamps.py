"""Timestamp helpers for timestamped artifact names."""

from __future__ import annotations

import re
from datetime import UTC, datetime
from pathlib import Path

_FILENAME_UNSAFE = re.compile(r"[:.]")


def utc_timestamp(now: datetime | None = None) -> str:
    """Return an ISO-8601 UTC timestamp with millisecond precision.

    Example: ``2024-01-01T09:30:00.123Z``. Strings in this format sort
    chronologically under plain string comparison.
    """
    moment = (now or datetime.now(UTC)).astimezone(UTC)
    return moment.strftime("%Y-%m-%dT%H:%M:%S.") + f"{moment.microsecond // 1000:03d}Z"


def filename_timestamp(timestamp: str) -> str:
    """Make a timestamp filename-safe at second precision.

    ``2024-01-01T09:30:00.123Z`` becomes ``2024-01-01T09-30-00``.
    """
    return _FILENAME_UNSAFE.sub("-", timestamp)[:19]


def next_available_path(path: Path) -> Path:
    """Return ``path``, or the first ``<stem>-N<suffix>`` sibling that is free."""
    if not path.exists():
        return path

    counter = 2
    while True:
        candidate = path.with_name(f"{path.stem}-{counter}{path.suffix}")
        if not candidate.exists():
            return candidate
        counter += 1
