"""Interactive lookup session over an indexed track."""

from __future__ import annotations

import logging
import math
from collections.abc import Sequence
from datetime import tzinfo
from typing import TextIO

from .errors import EmptyTrackError, InvalidRequestedTime
from .index import find_most_recent
from .localtime import (
    DATE_FORMAT,
    local_date,
    local_time,
    parse_clock_time,
    requested_instant,
    utc_time,
    zone_label,
)
from .models import QueryResult, TrackSummary, Waypoint

logger = logging.getLogger(__name__)

PROMPT = "> "
USAGE = "Enter a time to print information about the most recent track in 24-hour time (eg 14:32:07)."


class TrackSession:
    """A sorted waypoint index paired with the local offset used to read and show times."""

    def __init__(self, waypoints: Sequence[Waypoint], tz: tzinfo, source: str = "track"):
        if not waypoints:
            raise EmptyTrackError("Document contains no track points")
        self.waypoints = waypoints
        self.tz = tz
        self.source = source

    @property
    def reference(self):
        """Instant whose local date anchors every query."""
        return self.waypoints[0].time

    def summary(self) -> TrackSummary:
        first, last = self.waypoints[0].time, self.waypoints[-1].time
        return TrackSummary(
            points=len(self.waypoints),
            date=local_date(first, self.tz).strftime(DATE_FORMAT),
            start=local_time(first, self.tz),
            end=local_time(last, self.tz),
            timezone=zone_label(self.tz),
        )

    def announce(self) -> list[str]:
        s = self.summary()
        return [
            f"System timezone is {s.timezone}",
            f"Opened {self.source} with {s.points} points on {s.date} from {s.start} to {s.end}",
            USAGE,
        ]

    def query(self, text: str) -> QueryResult:
        """Resolve ``HH:MM[:SS]`` on the reference date and look it up.

        Raises:
            InvalidRequestedTime: ``text`` is not a valid wall-clock time.
        """
        hour, minute, second = parse_clock_time(text)
        requested = requested_instant(self.reference, hour, minute, second, self.tz)
        waypoint = find_most_recent(self.waypoints, requested)
        logger.debug("Lookup at %s matched %s", requested.isoformat(), waypoint and waypoint.time)
        if waypoint is None:
            return QueryResult(requested=requested.isoformat(), found=False)
        return QueryResult(
            requested=requested.isoformat(),
            found=True,
            waypoint=waypoint,
            local_time=local_time(waypoint.time, self.tz),
            utc_time=utc_time(waypoint.time),
        )

    def lookup(self, text: str) -> list[str]:
        """Output lines for one query, including the per-query error message."""
        try:
            result = self.query(text)
        except InvalidRequestedTime as e:
            return [f"Invalid time: {e}"]
        if not result.found:
            return ["No point found."]
        return describe(result)

    def run(self, stdin: TextIO, stdout: TextIO) -> None:
        """Prompt for times until end of input."""
        for line in self.announce():
            print(line, file=stdout)
        while True:
            stdout.write(PROMPT)
            stdout.flush()
            line = stdin.readline()
            if not line:
                stdout.write("\n")
                break
            for out in self.lookup(line):
                print(out, file=stdout)


def describe(result: QueryResult) -> list[str]:
    wp = result.waypoint
    lines = [
        f"Found point: {wp.latitude}, {wp.longitude}",
        f"  Time: {result.local_time} / {result.utc_time}Z",
    ]
    if wp.name is not None:
        lines.append(f"  Name: {wp.name}")
    if wp.elevation is not None:
        lines.append(f"  Elevation: {round_half_away(wp.elevation)} meters")
    if wp.speed is not None:
        lines.append(f"  Speed: {wp.speed} meters/second")
    if wp.description is not None:
        lines.append(f"  Description: {wp.description}")
    if wp.comment is not None:
        lines.append(f"  Comment: {wp.comment}")
    return lines


def round_half_away(value: float) -> int:
    """Round to the nearest whole number, halves away from zero (2.5 -> 3, -2.5 -> -3)."""
    magnitude = abs(value)
    whole = math.floor(magnitude)
    if magnitude - whole >= 0.5:
        whole += 1
    return -whole if value < 0 else whole
