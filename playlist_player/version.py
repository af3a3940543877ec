"""Application version."""

__version__ = "1.0.0"

APP_NAME = "Playlist Player"
