"""Symlink API function.

Link a file from the dotfiles repository into place.
Matches CLI: dotinstall symlink <existing> <new>
"""

import logging
from collections.abc import Iterator
from typing import TextIO

from .._output_schemas.install import InstallSymlinkOutput
from ..config.normalize_path import normalize_path
from ..StageResult import StageResult
from .InstallDotfiles import InstallDotfiles
from .LinkAction import LinkAction

logger = logging.getLogger(__name__)

_RESULT_MESSAGES = {
    LinkAction.UNCHANGED: "Link already in place: {new}",
    LinkAction.LINKED: "Linked {new} -> {existing}",
    LinkAction.RELINKED: "Replaced {new} with link to {existing}",
    LinkAction.DECLINED: "Kept existing {new}",
}


def cmd_symlink(
    existing: str,
    new: str,
    stdin: TextIO | None = None,
    stdout: TextIO | None = None,
) -> StageResult:
    """Make ``new`` a symbolic link to ``existing``.

    Args:
        existing: Path inside the dotfiles repository (may start with ~)
        new: Path where the link should live (may start with ~)
        stdin: Source of the overwrite answer (default: sys.stdin)
        stdout: Destination of the overwrite question (default: sys.stdout)

    Returns:
        StageResult with the action taken; filesystem and end-of-input
        errors are reported in output["errors"]
    """
    existing_str = str(normalize_path(existing))
    new_str = str(normalize_path(new))

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        installer = InstallDotfiles(stdin=stdin, stdout=stdout)

        yield (0.5, "Linking...")
        try:
            action = installer.symlink(existing, new)
        except (OSError, EOFError) as e:
            logger.error("Failed to link %s -> %s: %s", new_str, existing_str, e)
            yield (1.0, "Complete")
            result_obj.result = f"Failed to link {new_str}: {e}"
            result_obj.output = InstallSymlinkOutput(
                errors=[str(e)], existing=existing_str, new=new_str, action=""
            ).model_dump(mode="python")
            result_obj.success = False
            return

        warnings = [f"Declined to overwrite {new_str}"] if action is LinkAction.DECLINED else []
        yield (1.0, "Complete")
        result_obj.result = _RESULT_MESSAGES[action].format(new=new_str, existing=existing_str)
        result_obj.output = InstallSymlinkOutput(
            warnings=warnings, existing=existing_str, new=new_str, action=action.value
        ).model_dump(mode="python")
        result_obj.success = True

    return StageResult(announce=f"Linking {new_str} -> {existing_str}...", progress_callback=do_work)
