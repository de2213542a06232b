"""Display configuration."""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


class DisplayConfig(BaseModel):
    """Display configuration."""

    model_config = ConfigDict(extra="forbid")

    format: Literal["yaml", "json"] = Field("yaml", description="Default structured output format")
