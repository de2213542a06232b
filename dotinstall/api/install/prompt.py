"""Blocking yes/no prompt over injected text streams."""

import re
from collections.abc import Callable
from typing import TextIO

from .is_yes import is_yes


def prompt(
    message: str,
    valid_pattern: str | re.Pattern[str],
    stdin: TextIO,
    stdout: TextIO,
    interpret: Callable[[str], bool] = is_yes,
) -> bool:
    """Ask ``message`` once and read lines until one matches ``valid_pattern``.

    The message is written without a trailing newline and is not repeated
    when an answer is rejected; only the read is retried. String patterns
    are compiled case-insensitively.

    Args:
        message: Question written to ``stdout``
        valid_pattern: Regex an answer must match (at its start)
        stdin: Source of answer lines
        stdout: Destination of the question
        interpret: Maps the accepted line to a decision

    Returns:
        The decision produced by ``interpret``

    Raises:
        EOFError: If ``stdin`` is exhausted before a valid answer arrives
    """
    pattern = re.compile(valid_pattern, re.IGNORECASE) if isinstance(valid_pattern, str) else valid_pattern

    stdout.write(message)
    stdout.flush()
    while True:
        line = stdin.readline()
        if line == "":
            raise EOFError("Input closed before a valid answer was given")
        if pattern.match(line):
            return interpret(line)
