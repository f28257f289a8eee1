"""Wall-clock projection of a fermentation timeline.

Phase durations are rounded to whole minutes and chained from the
start time, so each phase ends where the next one begins.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, time, timedelta

from pizzactl.domain.timeline import Timeline

START_FORMAT = "%H:%M"


@dataclass(frozen=True)
class PhaseEnd:
    """One projected phase: its duration and wall-clock end."""

    phase: str
    hours: float
    ends_at: datetime

    def to_dict(self) -> dict[str, object]:
        return {
            "phase": self.phase,
            "hours": self.hours,
            "ends_at": self.ends_at.strftime(START_FORMAT),
        }


def parse_start(text: str) -> time:
    """Parse a 24h ``HH:MM`` start time.

    Raises:
        ValueError: If *text* is not a valid ``HH:MM`` time.
    """
    return datetime.strptime(text.strip(), START_FORMAT).time()


def combine_start(start: time, day: date) -> datetime:
    """Anchor a time of day to a calendar date."""
    return datetime.combine(day, start)


def to_minutes(hours: float) -> int:
    return round(hours * 60)


def project_phases(timeline: Timeline, start: datetime) -> list[PhaseEnd]:
    """Chain the timeline's phases from *start*."""
    ends: list[PhaseEnd] = []
    cursor = start
    for phase, hours in timeline.phases():
        cursor = cursor + timedelta(minutes=to_minutes(hours))
        ends.append(PhaseEnd(phase=phase, hours=hours, ends_at=cursor))
    return ends
