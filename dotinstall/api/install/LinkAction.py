"""Outcome of a symlink operation."""

from enum import Enum


class LinkAction(Enum):
    """What symlink() did to the destination path."""

    UNCHANGED = "unchanged"
    LINKED = "linked"
    RELINKED = "relinked"
    DECLINED = "declined"
