"""State of the entry at a symlink's destination path."""

from enum import Enum


class LinkState(Enum):
    """What currently sits at the path where a symlink should be created."""

    ABSENT = "absent"
    ENTRY = "entry"  # regular file or directory
    SAME_LINK = "same_link"
    OTHER_LINK = "other_link"  # includes broken links
