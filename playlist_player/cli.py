"""Entry point: parse options, set up logging, then run the GUI."""

import argparse
import logging
import sys

from playlist_player.log_config import setup_logging
from playlist_player.store import DEFAULT_KEY, PlaylistStore
from playlist_player.version import __version__


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='playlist-player',
        description='Author a YAML media playlist and play it.',
    )
    parser.add_argument('--id', dest='key', default=None, help=f'playlist key (default: {DEFAULT_KEY})')
    parser.add_argument('--edit', action='store_true', help='show the editor even when --id is given')
    parser.add_argument('--settings-dir', default='', help='where playlists.json lives (default: ~/.playlist_player)')
    parser.add_argument('--version', action='version', version=f'%(prog)s {__version__}')
    return parser


def is_editor_mode(key: str | None, edit: bool) -> bool:
    """Editor is shown when no playlist id was given, or when explicitly asked for."""
    return not key or edit


def main(argv: list[str] | None = None):
    import tkinter as tk
    from tkinter import messagebox

    from playlist_player.app import App

    args = build_parser().parse_args(argv)
    setup_logging()
    log = logging.getLogger("playlist_player.main")
    store = PlaylistStore(args.settings_dir)
    key = args.key or DEFAULT_KEY
    log.info("Opening playlist %r from %s", key, store.path)
    root = tk.Tk()
    try:
        App(root, store, key, edit_mode=is_editor_mode(args.key, args.edit))
        root.mainloop()
    except Exception as e:
        log.exception("Startup error")
        root.destroy()
        messagebox.showerror('Startup error', str(e))
        sys.exit(1)
