"""Time-ordered waypoint index and the nearest-preceding lookup over it."""

from __future__ import annotations

import logging
from bisect import bisect_right
from collections.abc import Sequence
from datetime import datetime
from itertools import chain

from .errors import EmptyTrackError
from .models import TrackDocument, Waypoint

logger = logging.getLogger(__name__)


def build_index(document: TrackDocument) -> tuple[Waypoint, ...]:
    """Flatten every track and segment into one sequence sorted by time.

    The sort is stable, so waypoints sharing a timestamp keep their document order.
    """
    waypoints = chain.from_iterable(
        segment.waypoints for track in document.tracks for segment in track.segments
    )
    index = tuple(sorted(waypoints, key=lambda w: w.time))
    if not index:
        raise EmptyTrackError("Document contains no track points")
    logger.debug("Indexed %d waypoints from %s to %s", len(index), index[0].time, index[-1].time)
    return index


def find_most_recent(waypoints: Sequence[Waypoint], requested: datetime) -> Waypoint | None:
    """Return the latest waypoint recorded at or before ``requested``.

    ``waypoints`` must be sorted by time (see ``build_index``). Among waypoints
    sharing the matching timestamp the last one wins. Returns None when
    ``requested`` is earlier than every waypoint or the sequence is empty.
    """
    position = bisect_right(waypoints, requested, key=lambda w: w.time)
    if position == 0:
        return None
    return waypoints[position - 1]
