"""Shared fixtures: a fake host with a manual clock."""

import pytest

from playlist_player.binding import PlayerHost
from playlist_player.document import PlaylistDocument
from playlist_player.media import ClockMediaElement


class FakeHost(PlayerHost):
    """Records presentation calls; timers fire only when advance() is called."""

    def __init__(self, clock_elements: bool = False):
        self.clock_elements = clock_elements
        self.now = 0.0
        self._timers: dict[int, tuple[float, object]] = {}
        self._next_handle = 0
        self.presented = []
        self.ended_shown = 0
        self.went_back = 0

    def create_element(self, item):
        if self.clock_elements and not item.is_image:
            return ClockMediaElement(item.type, self, item.url, duration=item.duration)
        return super().create_element(item)

    def schedule(self, delay_sec, callback):
        self._next_handle += 1
        self._timers[self._next_handle] = (self.now + delay_sec, callback)
        return self._next_handle

    def cancel(self, handle):
        self._timers.pop(handle, None)

    def pending(self) -> int:
        return len(self._timers)

    def advance(self, seconds: float) -> None:
        """Move the clock forward, firing due timers in order."""
        target = self.now + seconds
        while True:
            due = [(when, h) for h, (when, _) in self._timers.items() if when <= target + 1e-9]
            if not due:
                break
            when, handle = min(due)
            _, callback = self._timers.pop(handle)
            self.now = when
            callback()
        self.now = target

    def present(self, directive, element):
        self.presented.append((directive, element))

    def show_ended(self):
        self.ended_shown += 1

    def go_back(self):
        self.went_back += 1


def make_doc(media, **options) -> PlaylistDocument:
    return PlaylistDocument.model_validate({'media': media, **options})


def item(title='A', **fields):
    return {'type': 'video', 'url': f'https://example.com/{title}.mp4', 'title': title, **fields}


@pytest.fixture
def host():
    return FakeHost()


@pytest.fixture
def clock_host():
    return FakeHost(clock_elements=True)
