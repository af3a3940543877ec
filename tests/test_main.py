import pytest

import main
from playlist_player import cli
from playlist_player.cli import build_parser, is_editor_mode


def test_root_entry_point_is_cli_main():
    assert main.main is cli.main


def test_parser_defaults():
    args = build_parser().parse_args([])
    assert args.key is None
    assert args.edit is False
    assert args.settings_dir == ''


def test_parser_options(tmp_path):
    args = build_parser().parse_args(['--id', 'party', '--edit', '--settings-dir', str(tmp_path)])
    assert args.key == 'party'
    assert args.edit is True
    assert args.settings_dir == str(tmp_path)


def test_editor_mode():
    assert is_editor_mode(None, False)
    assert is_editor_mode('party', True)
    assert not is_editor_mode('party', False)


def test_version_flag(capsys):
    with pytest.raises(SystemExit):
        build_parser().parse_args(['--version'])
    assert 'playlist-player' in capsys.readouterr().out
