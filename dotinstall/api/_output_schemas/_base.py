"""Fields every command output carries."""

from pydantic import BaseModel, Field


class BaseOutputSchema(BaseModel):
    """Common part of the symlink, append and config outputs.

    Filesystem and end-of-input failures land in ``errors``; a declined
    overwrite lands in ``warnings``.
    """

    errors: list[str] = Field(default_factory=list, description="Failures reported by the command")
    warnings: list[str] = Field(default_factory=list, description="Non-fatal notes, e.g. a declined overwrite")
