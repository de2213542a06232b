"""Install API module - symlink and append primitives."""

from .InstallDotfiles import InstallDotfiles
from .LinkAction import LinkAction
from .LinkState import LinkState

__all__ = ["InstallDotfiles", "LinkAction", "LinkState"]
