"""Launch the track lookup FastAPI server (see ``--help`` for host/port options)."""

from track_lookup.server import serve

if __name__ == "__main__":
    serve()
