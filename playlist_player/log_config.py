"""Configure application logging to a file and stderr."""

import logging
import os
import sys

LOG_DIR_NAME = "PlaylistPlayer"
# Overrides the stderr level, e.g. PLAYLIST_PLAYER_LOG_LEVEL=DEBUG to watch transitions.
LEVEL_ENV = "PLAYLIST_PLAYER_LOG_LEVEL"

# Set by setup_logging().
LOG_FILE_PATH: str | None = None


def _console_level() -> int:
    name = os.environ.get(LEVEL_ENV, "").strip().upper()
    level = logging.getLevelName(name) if name else logging.INFO
    return level if isinstance(level, int) else logging.INFO


def setup_logging(log_dir: str = "") -> str | None:
    """Configure the playlist_player logger: DEBUG file under the temp dir, stderr at INFO.

    Returns the log file path, or None when no file could be opened.
    """
    logger = logging.getLogger("playlist_player")
    logger.setLevel(logging.DEBUG)
    logger.handlers.clear()

    fmt = logging.Formatter(
        "%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    global LOG_FILE_PATH
    log_path = None
    try:
        log_dir = log_dir or os.path.join(os.environ.get("TEMP", os.path.expanduser("~")), LOG_DIR_NAME)
        os.makedirs(log_dir, exist_ok=True)
        log_path = os.path.join(log_dir, "app.log")
        fh = logging.FileHandler(log_path, encoding="utf-8")
        fh.setLevel(logging.DEBUG)
        fh.setFormatter(fmt)
        logger.addHandler(fh)
    except OSError:
        log_path = None
    LOG_FILE_PATH = log_path

    eh = logging.StreamHandler(sys.stderr)
    eh.setLevel(_console_level())
    eh.setFormatter(fmt)
    logger.addHandler(eh)

    logger.info("Logging started; file: %s", log_path or "(none)")
    return log_path
