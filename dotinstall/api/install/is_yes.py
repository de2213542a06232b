"""Interpret an accepted prompt answer."""


def is_yes(response: str) -> bool:
    """Return True when the answer begins with ``y`` (any case)."""
    return response.lower().startswith("y")
