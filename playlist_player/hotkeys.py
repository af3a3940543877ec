"""Global media keys (next / previous / play-pause) using pynput."""

import logging
from typing import Callable

try:
    from pynput.keyboard import Listener
    KEYBOARD_AVAILABLE = True
except ImportError:
    Listener = None
    KEYBOARD_AVAILABLE = False

log = logging.getLogger(__name__)

# pynput Key member name -> Renderer method name
KEY_ACTIONS = {
    'media_next': 'next',
    'media_previous': 'previous',
    'media_play_pause': 'toggle',
}


class MediaKeys:
    """Route media keys to a renderer.

    pynput calls back on its own thread; dispatch(fn) must run fn on the UI thread
    (the app passes lambda fn: root.after(0, fn)).
    """

    def __init__(self, renderer, dispatch: Callable[[Callable[[], None]], None]):
        self.renderer = renderer
        self._dispatch = dispatch
        self._listener = None

    def action_for(self, key) -> str | None:
        return KEY_ACTIONS.get(getattr(key, 'name', None))

    def _on_press(self, key) -> None:
        action = self.action_for(key)
        if action is None:
            return
        log.debug("Media key %s -> %s", key, action)
        self._dispatch(getattr(self.renderer, action))

    def start(self) -> bool:
        """Start listening. Returns False when pynput is unavailable."""
        if not KEYBOARD_AVAILABLE:
            log.info("pynput not available; media keys disabled")
            return False
        if self._listener is not None:
            return True
        self._listener = Listener(on_press=self._on_press)
        self._listener.daemon = True
        self._listener.start()
        return True

    def stop(self) -> None:
        if self._listener is not None:
            self._listener.stop()
            self._listener = None
