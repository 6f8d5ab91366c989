from datetime import datetime, timedelta, timezone
from pathlib import Path

import pytest

from track_lookup import Waypoint, build_index, read_gpx

SAMPLEDATA = Path(__file__).parent / "sampledata"

UTC = timezone.utc
PLUS_TWO = timezone(timedelta(hours=2))


@pytest.fixture
def morning_walk_path():
    return SAMPLEDATA / "morning_walk.gpx"


@pytest.fixture
def unordered_path():
    return SAMPLEDATA / "unordered.gpx"


@pytest.fixture
def morning_walk(morning_walk_path):
    return build_index(read_gpx(morning_walk_path))


def gpx(*trkpts: str, version: str = "1.1") -> str:
    """Wrap raw ``<trkpt>`` markup into a one-track, one-segment document."""
    body = "\n".join(trkpts)
    return (
        '<?xml version="1.0" encoding="UTF-8"?>\n'
        f'<gpx version="{version}" creator="test" xmlns="http://www.topografix.com/GPX/1/1">\n'
        f"<trk><trkseg>\n{body}\n</trkseg></trk>\n"
        "</gpx>\n"
    )


def trkpt(time: str, lat: str = "1.0", lon: str = "2.0", extra: str = "") -> str:
    return f'<trkpt lat="{lat}" lon="{lon}"><time>{time}</time>{extra}</trkpt>'


def waypoint(hour: int, minute: int = 0, second: int = 0, **fields) -> Waypoint:
    fields.setdefault("latitude", 1.0)
    fields.setdefault("longitude", 2.0)
    return Waypoint(time=datetime(2024, 5, 1, hour, minute, second, tzinfo=UTC), **fields)
