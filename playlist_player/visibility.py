"""Pause the active element while the player window is hidden, resume when shown."""

import logging

from playlist_player.binding import Renderer

log = logging.getLogger(__name__)

HIDDEN = 'hidden'
VISIBLE = 'visible'


class VisibilityCoordinator:
    """Side observer: touches only the active element, never the playback cursor.

    It does not remember why an element was paused, so coming back to the
    window resumes playback even if the user had paused before hiding it.
    """

    def __init__(self, renderer: Renderer):
        self.renderer = renderer

    def visibility_changed(self, state: str) -> None:
        element = self.renderer.active_element
        if element is None:
            return
        if state == HIDDEN and not element.paused:
            log.debug("Window hidden; pausing %s", element.src)
            element.pause()
        elif state == VISIBLE and element.paused:
            log.debug("Window visible; resuming %s", element.src)
            element.play()
