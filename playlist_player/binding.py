"""Turn the session's current item into a live element and wire its events back.

Exactly one element is active at a time. Every render releases the previous
one (listeners detached, pending image timer cancelled) before the next one is
attached, so no event from an outgoing element can reach the session.
"""

import logging
from dataclasses import dataclass
from typing import Any, Callable

from playlist_player.document import MediaItem
from playlist_player.media import ImageElement, Listener, MediaElement
from playlist_player.session import PlaybackSession
from playlist_player.timeparse import parse_time

log = logging.getLogger(__name__)


@dataclass
class RenderDirective:
    """Everything a host needs to present one item."""

    heading: str | None
    title: str
    kind: str
    src: str
    start: float
    end: float | None
    speed: float
    controls: bool
    autoplay: bool
    poster: str | None
    banner: str | None
    duration: float | None
    position: int
    total: int
    ended: bool = False

    @property
    def label(self) -> str:
        return f'Media {self.position} of {self.total}'


class PlayerHost:
    """Platform primitives the renderer needs. Subclasses provide timers and presentation."""

    def create_element(self, item: MediaItem) -> MediaElement | ImageElement:
        if item.is_image:
            return ImageElement(item.url)
        return MediaElement(item.type, item.url)

    def schedule(self, delay_sec: float, callback: Callable[[], None]) -> Any:
        raise NotImplementedError

    def cancel(self, handle: Any) -> None:
        raise NotImplementedError

    def present(self, directive: RenderDirective, element: MediaElement | ImageElement) -> None:
        pass

    def show_ended(self) -> None:
        pass

    def go_back(self) -> None:
        pass


class ActiveMedia:
    """The one live element plus the listeners and timer tied to it."""

    def __init__(self, element: MediaElement | ImageElement):
        self.element = element
        self.listeners: list[tuple[str, Listener]] = []
        self.attached = False
        self.timer: Any = None

    @property
    def playable(self) -> bool:
        return isinstance(self.element, MediaElement)

    def attach(self) -> None:
        if self.attached or not self.playable:
            return
        for event, callback in self.listeners:
            self.element.add_listener(event, callback)
        self.attached = True

    def detach(self) -> None:
        if not self.attached:
            return
        for event, callback in self.listeners:
            self.element.remove_listener(event, callback)
        self.attached = False

    def cancel_timer(self, host: PlayerHost) -> None:
        if self.timer is not None:
            host.cancel(self.timer)
            self.timer = None

    def release(self, host: PlayerHost) -> None:
        self.detach()
        self.cancel_timer(host)
        if self.playable:
            self.element.pause()


class Renderer:
    """Binds a PlaybackSession to a PlayerHost."""

    def __init__(self, session: PlaybackSession, host: PlayerHost):
        self.session = session
        self.host = host
        self.directive: RenderDirective | None = None
        self._active: ActiveMedia | None = None
        session.on_render = self.render
        session.on_repeat = self._repeat
        session.on_stop = self._stopped

    @property
    def active_element(self) -> MediaElement | None:
        """The live video/audio element, if the current item has one."""
        if self._active is not None and self._active.playable:
            return self._active.element
        return None

    def start(self) -> None:
        self.session.start()

    def next(self) -> None:
        self.session.next()

    def previous(self) -> None:
        self.session.previous()

    def toggle(self) -> None:
        """Play if paused, pause if playing."""
        element = self.active_element
        if element is None:
            return
        if element.paused:
            element.play()
        else:
            element.pause()

    def clear(self) -> None:
        if self._active is not None:
            self._active.release(self.host)
            self._active = None
        self.directive = None

    def directive_for(self, index: int, resume: bool = True) -> RenderDirective | None:
        doc = self.session.document
        if doc is None or not doc.media or not 0 <= index < len(doc.media):
            return None
        item = doc.media[index]
        speed = item.speed if item.speed is not None else doc.speed
        controls = item.controls if item.controls is not None else doc.controls
        return RenderDirective(
            heading=doc.title,
            title=item.title,
            kind=item.type,
            src=item.url,
            start=parse_time(item.start),
            end=parse_time(item.end) if item.end else None,
            speed=speed if speed is not None else 1,
            controls=bool(controls),
            autoplay=bool(doc.autoplay) and resume and not item.is_image,
            poster=item.poster,
            banner=item.banner,
            duration=item.duration,
            position=index + 1,
            total=len(doc.media),
            ended=not resume,
        )

    def render(self, index: int, resume: bool = True) -> None:
        directive = self.directive_for(index, resume)
        if directive is None:
            return
        item = self.session.document.media[index]

        self.clear()
        element = self.host.create_element(item)
        active = ActiveMedia(element)
        if isinstance(element, MediaElement):
            element.src = directive.src
            element.playback_rate = directive.speed
            element.controls = directive.controls
            element.autoplay = directive.autoplay
            element.poster = directive.poster
            active.listeners = self._listeners(active, directive)
            active.attach()
        elif directive.duration:
            active.timer = self.host.schedule(directive.duration, lambda: self._image_elapsed(active))

        self._active = active
        self.directive = directive
        self.host.present(directive, element)
        if isinstance(element, MediaElement):
            element.load()

    def _listeners(self, active: ActiveMedia, directive: RenderDirective) -> list[tuple[str, Listener]]:
        element = active.element

        def on_ready():
            element.seek(directive.start)

        def on_progress():
            if directive.end is not None and element.current_time >= directive.end:
                # Detach first so the natural 'ended' of this element cannot advance again.
                active.detach()
                element.pause()
                self.session.media_ended()

        def on_ended():
            self.session.media_ended()

        def on_click():
            if directive.controls:
                return
            self.toggle()

        return [
            ('ready', on_ready),
            ('progress', on_progress),
            ('ended', on_ended),
            ('click', on_click),
        ]

    def _image_elapsed(self, active: ActiveMedia) -> None:
        active.timer = None
        if active is not self._active:
            return
        self.session.media_ended()

    def _repeat(self, item: MediaItem) -> None:
        active = self._active
        if active is None or self.directive is None:
            return
        if not active.playable:
            active.cancel_timer(self.host)
            if self.directive.duration:
                active.timer = self.host.schedule(self.directive.duration, lambda: self._image_elapsed(active))
            return
        active.attach()
        active.element.seek(self.directive.start)
        active.element.play()

    def _stopped(self, go_back: bool) -> None:
        element = self.active_element
        if element is not None:
            element.pause()
        if go_back:
            self.host.go_back()
        self.host.show_ended()
