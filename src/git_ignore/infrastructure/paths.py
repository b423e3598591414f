"""Ignore file location resolution"""

import logging
import os
from pathlib import Path

logger = logging.getLogger(__name__)

LOCAL_IGNORE_FILE = ".gitignore"
GLOBAL_IGNORE_PARTS = (".config", "git", "ignore")


def user_home_dir() -> str:
    """Resolve the base directory for the global ignore file

    Checks XDG_CONFIG_HOME, then HOME, then the platform lookup. Returns an
    empty string when all of them fail.
    """
    home = os.environ.get("XDG_CONFIG_HOME")
    if home:
        return home
    home = os.environ.get("HOME")
    if home:
        return home
    try:
        return str(Path.home())
    except (RuntimeError, KeyError) as e:
        logger.warning(f"Unable to read home directory: {e}")
        return ""


def ignore_file_path(global_: bool = False) -> Path:
    """Build the path to the ignore file

    Args:
        global_: Use the user-level ignore file instead of ./.gitignore

    Returns:
        Path to the ignore file (relative when local or when no home was found)
    """
    if not global_:
        return Path(LOCAL_IGNORE_FILE)
    return Path(user_home_dir(), *GLOBAL_IGNORE_PARTS)
