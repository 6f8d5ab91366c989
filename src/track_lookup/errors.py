"""Exceptions raised by the track lookup pipeline."""


class TrackLookupError(Exception):
    """Base class for all track lookup failures."""


class DocumentError(TrackLookupError, ValueError):
    """The GPX document cannot be decoded into tracks of timestamped waypoints."""


class EmptyTrackError(TrackLookupError, ValueError):
    """The document decoded fine but holds no waypoints."""


class TimezoneError(TrackLookupError, ValueError):
    """The local UTC offset could not be determined or parsed."""


class InvalidRequestedTime(TrackLookupError, ValueError):
    """A query time is not a valid ``HH:MM[:SS]`` wall-clock time.

    Recoverable: the session reports it and keeps going.
    """
