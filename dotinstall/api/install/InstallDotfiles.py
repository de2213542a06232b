"""Symlink and append primitives for installing dotfiles."""

import logging
import re
import sys
from collections.abc import Callable
from pathlib import Path
from typing import TextIO

from ...constants import OVERWRITE_ANSWER_PATTERN
from ..config.normalize_path import normalize_path
from .is_yes import is_yes
from .link_state import link_state
from .LinkAction import LinkAction
from .LinkState import LinkState
from .prompt import prompt
from .remove_path import remove_path

logger = logging.getLogger(__name__)


class InstallDotfiles:
    """Install dotfiles by linking them into place and appending snippets.

    The input and output streams used for the overwrite confirmation are
    injected so scripted answers can replace a terminal. When omitted they
    are looked up on ``sys`` at call time.
    """

    def __init__(self, stdin: TextIO | None = None, stdout: TextIO | None = None):
        self._stdin = stdin
        self._stdout = stdout

    @property
    def stdin(self) -> TextIO:
        return self._stdin if self._stdin is not None else sys.stdin

    @property
    def stdout(self) -> TextIO:
        return self._stdout if self._stdout is not None else sys.stdout

    def symlink(self, existing: str | Path, new: str | Path) -> LinkAction:
        """Make ``new`` a symbolic link to ``existing``.

        A link that already resolves to ``existing`` is left alone. Any other
        entry at ``new`` (file, directory, or link elsewhere) is replaced only
        after the user confirms; declining leaves it untouched. Missing parent
        directories are created when ``new`` does not exist yet.

        Raises:
            OSError: On any filesystem failure. Nothing is restored if the old
                entry was removed and linking then fails.
            EOFError: If input closes before the overwrite question is answered.
        """
        existing_path = normalize_path(existing)
        new_path = normalize_path(new)
        state = link_state(existing_path, new_path)

        if state is LinkState.SAME_LINK:
            logger.info("Link %s -> %s already in place", new_path, existing_path)
            return LinkAction.UNCHANGED

        if state in (LinkState.OTHER_LINK, LinkState.ENTRY):
            should_overwrite = self.prompt(f'Overwrite "{new_path}"? [y/n] ', OVERWRITE_ANSWER_PATTERN, is_yes)
            if not should_overwrite:
                logger.info("Kept existing %s", new_path)
                return LinkAction.DECLINED
            remove_path(new_path)
            new_path.symlink_to(existing_path)
            logger.info("Replaced %s with link to %s", new_path, existing_path)
            return LinkAction.RELINKED

        new_path.parent.mkdir(parents=True, exist_ok=True)
        new_path.symlink_to(existing_path)
        logger.info("Linked %s -> %s", new_path, existing_path)
        return LinkAction.LINKED

    def append(self, file_name: str | Path, content: str) -> bool:
        """Append ``content`` to ``file_name`` unless it is already there.

        Presence is a plain substring check against the whole file, so a
        snippet embedded in a longer line counts as present. The file and its
        parent directories are created when missing; an existing file is never
        truncated.

        Returns:
            True if the content was written, False if it was already present

        Raises:
            OSError: If the file cannot be created, read or written
        """
        path = normalize_path(file_name)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.touch(exist_ok=True)

        if content in path.read_text(encoding="utf-8"):
            logger.debug("Content already present in %s", path)
            return False

        with path.open("a", encoding="utf-8") as fh:
            fh.write(content if content.endswith("\n") else f"{content}\n")
        logger.info("Appended %d character(s) to %s", len(content), path)
        return True

    def prompt(
        self,
        message: str,
        valid_pattern: str | re.Pattern[str],
        interpret: Callable[[str], bool] = is_yes,
    ) -> bool:
        """Ask a question on this installer's streams; see ``prompt.prompt``."""
        return prompt(message, valid_pattern, self.stdin, self.stdout, interpret)
