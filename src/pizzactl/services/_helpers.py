"""Shared service-layer helper functions."""

from __future__ import annotations

from datetime import datetime


def now_local() -> datetime:
    """Current local wall-clock time, truncated to the minute."""
    return datetime.now().replace(second=0, microsecond=0)
