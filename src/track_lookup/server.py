"""FastAPI server for GPX time lookups."""

from __future__ import annotations

import argparse
from datetime import tzinfo

import uvicorn
from fastapi import FastAPI, HTTPException, Query, UploadFile

from .errors import InvalidRequestedTime, TrackLookupError
from .index import build_index
from .localtime import parse_offset, resolve_local_offset
from .models import QueryResult, TrackSummary
from .reader import read_gpx
from .session import TrackSession

app = FastAPI(title="Track Lookup", version="0.1.0")

OFFSET_PATTERN = r"^[+-]\d{2}:\d{2}$"
TIME_PATTERN = r"^\d{1,2}:\d{1,2}(:\d{1,2})?$"


@app.post("/summary")
async def summarize_track(
    file: UploadFile,
    utc_offset: str | None = Query(None, pattern=OFFSET_PATTERN),
) -> TrackSummary:
    """Report the point count, local date and local time range of an uploaded GPX file."""
    session = await _open_session(file, utc_offset)
    return session.summary()


@app.post("/find")
async def find_point(
    file: UploadFile,
    time: str = Query(..., pattern=TIME_PATTERN),
    utc_offset: str | None = Query(None, pattern=OFFSET_PATTERN),
) -> QueryResult:
    """Return the most recent track point at or before ``time`` (local ``HH:MM[:SS]``).

    The time is read on the local date of the first track point. A time before
    the first point yields ``found: false``.
    """
    session = await _open_session(file, utc_offset)
    try:
        return session.query(time)
    except InvalidRequestedTime as e:
        raise HTTPException(status_code=400, detail=str(e))


async def _open_session(upload: UploadFile, utc_offset: str | None) -> TrackSession:
    """Decode and index one uploaded GPX file."""
    content = await upload.read()
    try:
        tz = _resolve_offset(utc_offset)
        waypoints = build_index(read_gpx(content))
    except TrackLookupError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return TrackSession(waypoints, tz, source=upload.filename or "upload")


def _resolve_offset(utc_offset: str | None) -> tzinfo:
    return parse_offset(utc_offset) if utc_offset else resolve_local_offset()


def serve(argv: list[str] | None = None) -> None:
    """Run the server with uvicorn; ``--reload`` is for development only."""
    parser = argparse.ArgumentParser(prog="track-lookup-server", description="Serve GPX time lookups over HTTP.")
    parser.add_argument("--host", default="127.0.0.1")
    parser.add_argument("--port", type=int, default=8000)
    parser.add_argument("--reload", action="store_true", help="Restart on source changes")
    args = parser.parse_args(argv)
    uvicorn.run("track_lookup.server:app", host=args.host, port=args.port, reload=args.reload)
