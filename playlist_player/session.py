"""Playback cursor and transitions over a playlist document (no UI).

The session decides *what* is current; whoever renders listens through the
callback attributes. All public operations are no-ops until a document with
at least one media item is loaded.
"""

import logging
from typing import Callable

from playlist_player.document import MediaItem, PlaylistDocument

log = logging.getLogger(__name__)


class PlaybackSession:
    """Cursor (index + per-item loop counter) and playlist-level loop budget."""

    def __init__(self, document: PlaylistDocument | None = None) -> None:
        self.document: PlaylistDocument | None = None
        self.index = 0
        self.loop_count = 0
        self.playlist_loop = -1
        self.ended = False

        # on_render(index, resume): show item at index; resume False means stay stopped.
        self.on_render: Callable[[int, bool], None] | None = None
        # on_repeat(item): restart the current item in place.
        self.on_repeat: Callable[[MediaItem], None] | None = None
        # on_stop(go_back): the playlist terminated.
        self.on_stop: Callable[[bool], None] | None = None

        if document is not None:
            self.load(document)

    def load(self, document: PlaylistDocument | None) -> None:
        """Replace the document wholesale and rewind the cursor."""
        self.document = document
        self.index = 0
        self.loop_count = 0
        self.playlist_loop = document.loop if document is not None else -1
        self.ended = False

    def _media(self) -> list[MediaItem]:
        if self.document is None:
            return []
        return self.document.media or []

    def has_media(self) -> bool:
        return bool(self._media())

    def current_item(self) -> MediaItem | None:
        media = self._media()
        if 0 <= self.index < len(media):
            return media[self.index]
        return None

    def position(self) -> tuple[int, int]:
        """(1-based position, total)."""
        return self.index + 1, len(self._media())

    def start(self) -> None:
        """Render the current item (initial show, or after a reload)."""
        if not self.has_media():
            return
        self._render(resume=True)

    def media_ended(self) -> None:
        """End-of-item decision: repeat the current item or advance."""
        item = self.current_item()
        if item is None:
            return
        media_loop = item.loop or 0
        if media_loop == -1 or self.loop_count < media_loop:
            if media_loop != -1:
                self.loop_count += 1
            log.debug("Repeat item %d (%d/%s)", self.index, self.loop_count, media_loop)
            if self.on_repeat:
                self.on_repeat(item)
            return
        self.loop_count = 0
        self.next()

    def next(self) -> None:
        media = self._media()
        if not media:
            return
        self.index += 1
        self.loop_count = 0
        self.ended = False
        if self.index < len(media):
            self._render(resume=True)
            return

        if self.playlist_loop == -1 or self.playlist_loop > 1:
            self.index = 0
            if self.playlist_loop > 1:
                self.playlist_loop -= 1
            log.debug("Playlist restart (loop=%d)", self.playlist_loop)
            self._render(resume=True)
            return

        self.index = len(media) - 1
        self.ended = True
        go_back = bool(self.document.on_stop.go_back)
        log.info("Playlist ended at item %d (go_back=%s)", self.index, go_back)
        self._render(resume=False)
        if self.on_stop:
            self.on_stop(go_back)

    def previous(self) -> None:
        media = self._media()
        if not media:
            return
        self.index -= 1
        self.loop_count = 0
        self.ended = False
        if self.index < 0:
            self.index = len(media) - 1
        self._render(resume=True)

    def _render(self, resume: bool) -> None:
        log.debug("Render item %d/%d (resume=%s)", self.index + 1, len(self._media()), resume)
        if self.on_render:
            self.on_render(self.index, resume)
