"""Playable element primitives: listener registry, play/pause/seek, clock-driven playback."""

from typing import Any, Callable

# How often a playing ClockMediaElement reports progress.
PROGRESS_INTERVAL_SEC = 0.25

# ready: source loaded, position may be set. progress: position moved.
# ended: natural end of media. click: primary click on the element.
EVENTS = ('ready', 'progress', 'ended', 'click')

Listener = Callable[[], None]


class ImageElement:
    """Displayed image. Never plays; only a timer can move past it."""

    kind = 'image'

    def __init__(self, src: str = ''):
        self.src = src


class MediaElement:
    """Video or audio element as the player sees it. Position and state only; no decoding."""

    def __init__(self, kind: str, src: str = ''):
        self.kind = kind
        self.src = src
        self.current_time = 0.0
        self.playback_rate = 1.0
        self.controls = False
        self.autoplay = False
        self.poster: str | None = None
        self.paused = True
        self._listeners: dict[str, list[Listener]] = {}

    def add_listener(self, event: str, callback: Listener) -> None:
        self._listeners.setdefault(event, []).append(callback)

    def remove_listener(self, event: str, callback: Listener) -> None:
        callbacks = self._listeners.get(event)
        if callbacks and callback in callbacks:
            callbacks.remove(callback)

    def listener_count(self, event: str | None = None) -> int:
        if event is not None:
            return len(self._listeners.get(event, ()))
        return sum(len(v) for v in self._listeners.values())

    def emit(self, event: str) -> None:
        # Copy: a listener may detach the whole set while we iterate.
        for callback in list(self._listeners.get(event, ())):
            callback()

    def load(self) -> None:
        """Source is ready: fire 'ready', then start if autoplay is set."""
        self.emit('ready')
        if self.autoplay:
            self.play()

    def play(self) -> None:
        self.paused = False

    def pause(self) -> None:
        self.paused = True

    def seek(self, seconds: float) -> None:
        self.current_time = max(0.0, float(seconds))

    def click(self) -> None:
        self.emit('click')


class ClockMediaElement(MediaElement):
    """MediaElement whose position advances on a scheduler while playing.

    scheduler must provide schedule(delay_sec, callback) -> handle and cancel(handle).
    When duration is known, reaching it pauses the element and fires 'ended'.
    """

    def __init__(self, kind: str, scheduler: Any, src: str = '', duration: float | None = None):
        super().__init__(kind, src)
        self._scheduler = scheduler
        self.duration = duration
        self._tick_handle: Any = None

    def play(self) -> None:
        if not self.paused:
            return
        super().play()
        self._schedule_tick()

    def pause(self) -> None:
        super().pause()
        if self._tick_handle is not None:
            self._scheduler.cancel(self._tick_handle)
            self._tick_handle = None

    def _schedule_tick(self) -> None:
        self._tick_handle = self._scheduler.schedule(PROGRESS_INTERVAL_SEC, self._tick)

    def _tick(self) -> None:
        self._tick_handle = None
        if self.paused:
            return
        self.current_time += PROGRESS_INTERVAL_SEC * self.playback_rate
        if self.duration and self.current_time >= self.duration:
            self.current_time = float(self.duration)
            self.pause()
            self.emit('ended')
            return
        self.emit('progress')
        if not self.paused and self._tick_handle is None:
            self._schedule_tick()
