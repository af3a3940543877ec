"""Tests for playlist_player.hotkeys.MediaKeys routing (no real listener)."""

from types import SimpleNamespace

from playlist_player import hotkeys
from playlist_player.hotkeys import MediaKeys


def key(name):
    return SimpleNamespace(name=name)


class TestMediaKeys:

    def setup_method(self):
        self.renderer = SimpleNamespace(
            next=lambda: None, previous=lambda: None, toggle=lambda: None
        )
        self.dispatched = []
        self.keys = MediaKeys(self.renderer, self.dispatched.append)

    def test_action_for_media_keys(self):
        assert self.keys.action_for(key('media_next')) == 'next'
        assert self.keys.action_for(key('media_previous')) == 'previous'
        assert self.keys.action_for(key('media_play_pause')) == 'toggle'

    def test_character_keys_ignored(self):
        self.keys._on_press(SimpleNamespace(char='a'))
        assert self.dispatched == []

    def test_press_dispatches_renderer_method(self):
        self.keys._on_press(key('media_next'))
        self.keys._on_press(key('media_play_pause'))
        assert self.dispatched == [self.renderer.next, self.renderer.toggle]

    def test_start_without_pynput(self, monkeypatch):
        monkeypatch.setattr(hotkeys, 'KEYBOARD_AVAILABLE', False)
        assert self.keys.start() is False
        self.keys.stop()
