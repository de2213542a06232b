"""Abstract display interface."""

from abc import ABC, abstractmethod
from typing import Any


class Display(ABC):
    """Output surface used by the 4-stage command runner."""

    @abstractmethod
    def status(self, message: str, **kwargs) -> None:
        """Announce work that is about to start."""

    @abstractmethod
    def success(self, message: str, **kwargs) -> None:
        """Report a successful result."""

    @abstractmethod
    def error(self, message: str, **kwargs) -> None:
        """Report a failed result."""

    @abstractmethod
    def warning(self, message: str, **kwargs) -> None:
        """Report a warning."""

    @abstractmethod
    def info(self, message: str, **kwargs) -> None:
        """Report progress or other informational text."""

    @abstractmethod
    def json_output(self, data: Any, **kwargs) -> None:
        """Write structured output (yaml or json)."""
