"""YAML-authored media playlist: document model, playback session, renderer."""

from playlist_player.binding import PlayerHost, RenderDirective, Renderer
from playlist_player.document import (
    MediaItem,
    PlaylistDocument,
    validate_document,
)
from playlist_player.session import PlaybackSession
from playlist_player.timeparse import parse_time
from playlist_player.visibility import VisibilityCoordinator

__all__ = [
    'MediaItem',
    'PlaybackSession',
    'PlayerHost',
    'PlaylistDocument',
    'RenderDirective',
    'Renderer',
    'VisibilityCoordinator',
    'parse_time',
    'validate_document',
]
