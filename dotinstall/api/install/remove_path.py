"""Force-remove a filesystem entry."""

import shutil
from pathlib import Path


def remove_path(path: Path) -> None:
    """Remove ``path`` recursively, ignoring absence.

    Symlinks are unlinked rather than followed, so a link to a directory
    never takes the directory's contents with it.
    """
    if path.is_dir() and not path.is_symlink():
        shutil.rmtree(path)
    else:
        path.unlink(missing_ok=True)
