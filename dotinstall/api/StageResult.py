"""Result object shared by every dotinstall command."""

from collections.abc import Callable, Iterator
from dataclasses import dataclass, field


@dataclass
class StageResult:
    """What a ``cmd_*`` function hands to the CLI runner.

    ``announce`` is shown before any filesystem work. Draining
    ``progress_callback`` performs the work (including any overwrite
    question) and fills in ``result``, ``output`` and ``success``.
    """

    announce: str
    progress_callback: Callable[["StageResult"], Iterator[tuple[float, str]]]
    result: str = ""
    output: dict = field(default_factory=dict)
    success: bool = False
