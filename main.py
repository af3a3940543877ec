"""Entry point: run the playlist player GUI."""

from playlist_player.cli import main


if __name__ == '__main__':
    main()
