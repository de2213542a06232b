"""Get dotinstall home directory path or path under it."""

import os
from pathlib import Path

from ...constants import DOTINSTALL_HOME_EXT


def get_home_dir(*parts: str) -> Path:
    """Get dotinstall home directory path or path under it.

    Checks the DOTINSTALL_HOME environment variable first, then HOME,
    and falls back to ~/.dotinstall.

    Args:
        *parts: Optional path components to join (e.g., "config.json")

    Returns:
        Absolute path to the home directory or a subpath under it

    Examples:
        >>> get_home_dir()
        Path("/home/user/.dotinstall")
        >>> get_home_dir("config.json")
        Path("/home/user/.dotinstall/config.json")
    """
    home_override = os.environ.get("DOTINSTALL_HOME")
    if home_override:
        home = Path(home_override).expanduser().resolve()
    else:
        # Check HOME environment variable (for test isolation)
        home_env = os.environ.get("HOME")
        if home_env:
            home = Path(home_env) / DOTINSTALL_HOME_EXT
        else:
            home = Path.home() / DOTINSTALL_HOME_EXT

    return home / Path(*parts) if parts else home
