"""Inspect the destination of a symlink."""

import os
from pathlib import Path

from .LinkState import LinkState


def link_state(existing: Path, new: Path) -> LinkState:
    """Classify the entry at ``new`` relative to the link target ``existing``.

    Real paths are compared so that chains of links and relative targets
    resolve to the same canonical location. The state is derived fresh on
    every call.
    """
    if new.is_symlink():
        if os.path.realpath(new) == os.path.realpath(existing):
            return LinkState.SAME_LINK
        return LinkState.OTHER_LINK
    if new.exists():
        return LinkState.ENTRY
    return LinkState.ABSENT
