"""Nearest-preceding GPX track point lookup by local wall-clock time."""

from .errors import (
    DocumentError,
    EmptyTrackError,
    InvalidRequestedTime,
    TimezoneError,
    TrackLookupError,
)
from .index import build_index, find_most_recent
from .models import QueryResult, Track, TrackDocument, TrackSegment, TrackSummary, Waypoint
from .normalize import normalize_document
from .reader import parse_gpx, read_gpx
from .session import TrackSession

__all__ = [
    "DocumentError",
    "EmptyTrackError",
    "InvalidRequestedTime",
    "QueryResult",
    "TimezoneError",
    "Track",
    "TrackDocument",
    "TrackLookupError",
    "TrackSegment",
    "TrackSession",
    "TrackSummary",
    "Waypoint",
    "build_index",
    "find_most_recent",
    "normalize_document",
    "parse_gpx",
    "read_gpx",
]
