"""Check a command's output dict before it is displayed."""

from collections.abc import Callable
from typing import Any

from ._output_schemas import get_output_schema


def validate_output(func: Callable, output: dict[str, Any]) -> dict[str, Any]:
    """Coerce ``output`` through the schema registered for ``func``.

    ``dotinstall.api.install.cmd_symlink`` looks up ("install", "symlink").
    Functions outside ``dotinstall.api`` or without a ``cmd_`` prefix, and
    commands with no registered schema, pass through unchanged.

    Raises:
        ValueError: If the output does not fit the schema
    """
    domain, _, module_name = func.__module__.removeprefix("dotinstall.api.").partition(".")
    if not func.__module__.startswith("dotinstall.api.") or not module_name:
        return output
    if not func.__name__.startswith("cmd_"):
        return output

    command = func.__name__.removeprefix("cmd_")
    schema_class = get_output_schema(domain, command)
    if schema_class is None:
        return output

    try:
        return schema_class(**output).model_dump(mode="python")
    except Exception as e:
        raise ValueError(f"Output of {domain}.{command} does not match {schema_class.__name__}: {e}") from e
