"""Append API function.

Append a snippet to a file unless the file already contains it.
Matches CLI: dotinstall append <file> <content>
"""

import logging
from collections.abc import Iterator

from .._output_schemas.install import InstallAppendOutput
from ..config.normalize_path import normalize_path
from ..StageResult import StageResult
from .InstallDotfiles import InstallDotfiles

logger = logging.getLogger(__name__)


def cmd_append(file_name: str, content: str) -> StageResult:
    """Append ``content`` to ``file_name`` if not already present.

    Returns:
        StageResult reporting whether anything was written
    """
    file_str = str(normalize_path(file_name))

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.5, "Checking file content...")
        try:
            appended = InstallDotfiles().append(file_name, content)
        except OSError as e:
            logger.error("Failed to append to %s: %s", file_str, e)
            yield (1.0, "Complete")
            result_obj.result = f"Failed to append to {file_str}: {e}"
            result_obj.output = InstallAppendOutput(errors=[str(e)], file=file_str, appended=False).model_dump(
                mode="python"
            )
            result_obj.success = False
            return

        yield (1.0, "Complete")
        result_obj.result = f"Appended to {file_str}" if appended else f"Content already present in {file_str}"
        result_obj.output = InstallAppendOutput(file=file_str, appended=appended).model_dump(mode="python")
        result_obj.success = True

    return StageResult(announce=f"Appending to {file_str}...", progress_callback=do_work)
