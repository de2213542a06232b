"""Output schemas for API commands.

Importing this package registers every command's schema.
"""

from . import config, install  # noqa: F401
from ._registry import get_output_schema

__all__ = ["get_output_schema"]
