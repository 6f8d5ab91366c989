"""GPX reader — decodes ``<trk>/<trkseg>/<trkpt>`` elements into a TrackDocument.

Both GPX 1.0 and 1.1 are accepted; element names are matched without their
namespace. Numeric and timestamp fields are validated here, once, so a bad
value fails the whole document instead of surfacing later during a lookup.
"""

from __future__ import annotations

import logging
import xml.etree.ElementTree as ET
from pathlib import Path
from typing import BinaryIO

from pydantic import ValidationError

from .errors import DocumentError
from .models import Track, TrackDocument, TrackSegment, Waypoint
from .normalize import normalize_document

logger = logging.getLogger(__name__)

# GPX child element -> Waypoint field
WAYPOINT_FIELDS = {
    "time": "time",
    "ele": "elevation",
    "speed": "speed",
    "name": "name",
    "cmt": "comment",
    "desc": "description",
}


def read_gpx(file: str | Path | bytes | BinaryIO) -> TrackDocument:
    """Read a GPX file, repair known producer defects, and decode it.

    Args:
        file: Path to a .gpx file, the raw bytes, or a file-like object.

    Raises:
        OSError: the file cannot be read.
        DocumentError: the content is not a decodable GPX track document.
    """
    data = _read_bytes(file)
    try:
        text = data.decode("utf-8-sig")
    except UnicodeDecodeError as e:
        raise DocumentError(f"Document is not valid UTF-8: {e}") from e
    return parse_gpx(normalize_document(text))


def parse_gpx(text: str) -> TrackDocument:
    """Decode normalized GPX text into tracks, segments and waypoints."""
    try:
        root = ET.fromstring(text)
    except ET.ParseError as e:
        raise DocumentError(f"Document is not well-formed XML: {e}") from e

    if _local_name(root.tag) != "gpx":
        raise DocumentError(f"Expected a <gpx> root element, found <{_local_name(root.tag)}>")

    tracks: list[Track] = []
    for track_no, trk in enumerate(_children(root, "trk"), start=1):
        segments: list[TrackSegment] = []
        for segment_no, trkseg in enumerate(_children(trk, "trkseg"), start=1):
            waypoints = [
                _parse_waypoint(trkpt, (track_no, segment_no, point_no))
                for point_no, trkpt in enumerate(_children(trkseg, "trkpt"), start=1)
            ]
            segments.append(TrackSegment(waypoints=waypoints))
        tracks.append(Track(name=_child_text(trk, "name"), segments=segments))

    metadata = next(_children(root, "metadata"), None)
    name = _child_text(metadata, "name") if metadata is not None else _child_text(root, "name")
    document = TrackDocument(creator=root.get("creator"), name=name, tracks=tracks)
    logger.debug(
        "Decoded %d track(s), %d segment(s)",
        len(tracks),
        sum(len(t.segments) for t in tracks),
    )
    return document


def _read_bytes(file: str | Path | bytes | BinaryIO) -> bytes:
    if isinstance(file, bytes):
        return file
    if isinstance(file, (str, Path)):
        with open(file, "rb") as f:
            return f.read()
    return file.read()


def _local_name(tag: str) -> str:
    """Drop the ``{namespace}`` prefix ElementTree puts on qualified tags."""
    return tag.rsplit("}", 1)[-1]


def _children(elem: ET.Element, name: str):
    return (child for child in elem if _local_name(child.tag) == name)


def _child_text(elem: ET.Element, name: str) -> str | None:
    child = next(_children(elem, name), None)
    if child is None or not child.text:
        return None
    return child.text


def _parse_waypoint(trkpt: ET.Element, position: tuple[int, int, int]) -> Waypoint:
    where = "track {}, segment {}, point {}".format(*position)

    fields: dict[str, str] = {}
    for attr, field in (("lat", "latitude"), ("lon", "longitude")):
        value = trkpt.get(attr)
        if value is None:
            raise DocumentError(f"Waypoint at {where} is missing its '{attr}' attribute")
        fields[field] = value.strip()

    for tag, field in WAYPOINT_FIELDS.items():
        value = _child_text(trkpt, tag)
        if value is None:
            continue
        # Free text passes through as written; numbers and timestamps are trimmed.
        fields[field] = value if field in ("name", "comment", "description") else value.strip()

    if "time" not in fields:
        raise DocumentError(f"Waypoint at {where} is missing its <time>")

    try:
        return Waypoint.model_validate(fields)
    except ValidationError as e:
        err = e.errors()[0]
        field = err["loc"][0] if err["loc"] else "waypoint"
        raise DocumentError(
            f"Waypoint at {where} has an invalid {field} {err.get('input')!r}: {err['msg']}"
        ) from e
