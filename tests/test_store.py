"""Tests for playlist_player.store.PlaylistStore."""

from playlist_player.store import DEFAULT_KEY, PlaylistStore


class TestPlaylistStore:

    def test_missing_key_loads_none(self, tmp_path):
        store = PlaylistStore(str(tmp_path))
        assert store.load(DEFAULT_KEY) is None
        assert not store.has(DEFAULT_KEY)

    def test_save_persists_across_instances(self, tmp_path):
        PlaylistStore(str(tmp_path)).save('party', {'media': []})
        store = PlaylistStore(str(tmp_path))
        assert store.load('party') == {'media': []}
        assert store.keys() == ['party']

    def test_delete(self, tmp_path):
        store = PlaylistStore(str(tmp_path))
        store.save('a', {'media': []})
        store.save('b', {'media': []})
        store.delete('a')
        assert store.keys() == ['b']
        assert PlaylistStore(str(tmp_path)).keys() == ['b']

    def test_delete_missing_key_does_not_raise(self, tmp_path):
        PlaylistStore(str(tmp_path)).delete('nope')

    def test_corrupt_file_gives_empty_store(self, tmp_path):
        (tmp_path / 'playlists.json').write_text('{not json', encoding='utf-8')
        store = PlaylistStore(str(tmp_path))
        assert store.keys() == []

    def test_non_dict_file_gives_empty_store(self, tmp_path):
        (tmp_path / 'playlists.json').write_text('[1, 2]', encoding='utf-8')
        assert PlaylistStore(str(tmp_path)).keys() == []
