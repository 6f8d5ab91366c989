"""Pydantic data models for decoded GPX tracks and lookup results."""

import re
from datetime import datetime

from pydantic import AwareDatetime, BaseModel, ConfigDict, field_validator

RFC3339_RE = re.compile(
    r"^\d{4}-\d{2}-\d{2}[Tt ]\d{2}:\d{2}:\d{2}(\.\d+)?([Zz]|[+-]\d{2}:\d{2})$"
)


class Waypoint(BaseModel):
    """A single timestamped track point."""

    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    time: AwareDatetime
    latitude: float
    longitude: float
    elevation: float | None = None
    speed: float | None = None
    name: str | None = None
    comment: str | None = None
    description: str | None = None

    @field_validator("time", mode="before")
    @classmethod
    def time_must_be_rfc3339(cls, v):
        if isinstance(v, datetime):
            return v
        if not isinstance(v, str) or not RFC3339_RE.match(v):
            raise ValueError("expected an RFC 3339 timestamp with a UTC offset")
        return v


class TrackSegment(BaseModel):
    """A continuous run of waypoints (``<trkseg>``)."""

    waypoints: list[Waypoint] = []


class Track(BaseModel):
    """A ``<trk>`` element and its segments."""

    name: str | None = None
    segments: list[TrackSegment] = []


class TrackDocument(BaseModel):
    """The decoded contents of a GPX file."""

    creator: str | None = None
    name: str | None = None
    tracks: list[Track] = []


class TrackSummary(BaseModel):
    """Overview of an indexed track, in local time."""

    points: int
    date: str
    start: str
    end: str
    timezone: str


class QueryResult(BaseModel):
    """Outcome of a nearest-preceding lookup."""

    requested: str
    found: bool
    waypoint: Waypoint | None = None
    local_time: str | None = None
    utc_time: str | None = None
