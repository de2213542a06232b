"""Output schemas for install commands."""

from pydantic import Field

from ._base import BaseOutputSchema
from ._registry import register_output_schema


class InstallSymlinkOutput(BaseOutputSchema):
    """Output schema for the symlink command."""

    existing: str = Field(..., description="Expanded path the link points to")
    new: str = Field(..., description="Expanded path of the link")
    action: str = Field(..., description="unchanged, linked, relinked, declined, or empty string on error")


class InstallAppendOutput(BaseOutputSchema):
    """Output schema for the append command."""

    file: str = Field(..., description="Expanded path of the target file")
    appended: bool = Field(..., description="True if the content was written")


register_output_schema("install", "symlink", InstallSymlinkOutput)
register_output_schema("install", "append", InstallAppendOutput)
