"""Tests for the interactive lookup session."""

import io

import pytest

from conftest import PLUS_TWO, UTC, waypoint
from track_lookup import EmptyTrackError, TrackSession
from track_lookup.session import PROMPT, USAGE, round_half_away


@pytest.fixture
def session(morning_walk):
    return TrackSession(morning_walk, UTC, source="morning_walk.gpx")


def _run(session: TrackSession, text: str) -> list[str]:
    stdout = io.StringIO()
    session.run(io.StringIO(text), stdout)
    return stdout.getvalue().split("\n")


class TestAnnounce:
    def test_summary(self, session):
        summary = session.summary()
        assert summary.points == 3
        assert summary.date == "2024-05-01"
        assert summary.start == "08:00:00"
        assert summary.end == "08:10:00"
        assert summary.timezone == "UTC (+00:00)"

    def test_announce_lines(self, morning_walk):
        lines = TrackSession(morning_walk, PLUS_TWO, source="walk.gpx").announce()
        assert lines == [
            "System timezone is +02:00",
            "Opened walk.gpx with 3 points on 2024-05-01 from 10:00:00 to 10:10:00",
            USAGE,
        ]

    def test_empty_session_refused(self):
        with pytest.raises(EmptyTrackError):
            TrackSession((), UTC)


class TestLookup:
    def test_between_points(self, session):
        # Scenario A
        assert session.lookup("08:07:00") == [
            "Found point: 53.4101, -2.9932",
            "  Time: 08:05:00 / 08:05:00Z",
            "  Elevation: 14 meters",
            "  Description: Along the dock road",
        ]

    def test_before_first(self, session):
        # Scenario B
        assert session.lookup("07:00:00") == ["No point found."]

    def test_after_last(self, session):
        # Scenario C
        lines = session.lookup("23:59:59")
        assert lines[0] == "Found point: 53.412, -2.995"
        assert lines[1] == "  Time: 08:10:00 / 08:10:00Z"
        assert lines[2] == "  Elevation: -4 meters"

    def test_malformed_input(self, session):
        # Scenario D
        waypoints, tz = session.waypoints, session.tz
        assert session.lookup("abc") == ["Invalid time: Hour is invalid: 'abc'"]
        assert session.waypoints is waypoints
        assert session.tz is tz

    def test_exact_first_point_lists_every_field(self, session):
        assert session.lookup("08:00") == [
            "Found point: 53.4084, -2.9916",
            "  Time: 08:00:00 / 08:00:00Z",
            "  Name: Start",
            "  Elevation: 13 meters",
            "  Comment: Pier head",
        ]

    def test_local_offset_applied_to_input_and_display(self, morning_walk):
        session = TrackSession(morning_walk, PLUS_TWO)
        assert session.lookup("10:07")[1] == "  Time: 10:05:00 / 08:05:00Z"
        assert session.lookup("08:07") == ["No point found."]

    def test_speed_line(self):
        session = TrackSession((waypoint(8, speed=1.5),), UTC)
        assert session.lookup("09:00") == [
            "Found point: 1.0, 2.0",
            "  Time: 08:00:00 / 08:00:00Z",
            "  Speed: 1.5 meters/second",
        ]

    def test_query_result(self, session):
        result = session.query("08:07")
        assert result.found
        assert result.local_time == "08:05:00"
        assert result.utc_time == "08:05:00"
        assert result.requested == "2024-05-01T08:07:00+00:00"


class TestRun:
    def test_loop_until_end_of_input(self, session):
        lines = _run(session, "08:07:00\nabc\n07:00\n")
        assert lines[0] == "System timezone is UTC (+00:00)"
        assert lines[1] == "Opened morning_walk.gpx with 3 points on 2024-05-01 from 08:00:00 to 08:10:00"
        out = "\n".join(lines)
        assert out.count(PROMPT) == 4
        assert "Found point: 53.4101, -2.9932" in out
        assert "Invalid time: Hour is invalid: 'abc'" in out
        assert "No point found." in out

    def test_recovers_after_error(self, session):
        out = "\n".join(_run(session, "25:00\n08:07\n"))
        assert out.index("Invalid time: Hour 25 is out of range 0-23") < out.index("Found point")

    def test_empty_input(self, session):
        lines = _run(session, "")
        assert lines[3] == PROMPT


class TestRounding:
    @pytest.mark.parametrize(
        "value, expected",
        [(12.5, 13), (14.2, 14), (-3.5, -4), (-0.2, 0), (2.49, 2), (0.0, 0)],
    )
    def test_round_half_away(self, value, expected):
        assert round_half_away(value) == expected

    def test_just_below_half_rounds_down(self):
        assert round_half_away(0.49999999999999994) == 0
        assert round_half_away(-0.49999999999999994) == 0
        assert round_half_away(4503599627370497.0) == 4503599627370497
