"""Top-level dotinstall configuration."""

import json
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from ...constants import CONFIG_FILE_NAME
from .DisplayConfig import DisplayConfig
from .get_home_dir import get_home_dir
from .LogConfig import LogConfig


class DotinstallConfig(BaseModel):
    """Top-level configuration for dotinstall."""

    model_config = ConfigDict(extra="forbid")

    log: LogConfig = Field(default_factory=LogConfig)
    display: DisplayConfig = Field(default_factory=DisplayConfig)

    @classmethod
    def get_config_path(cls) -> Path:
        """Get path to config file based on DOTINSTALL_HOME or default to ~/.dotinstall."""
        return get_home_dir(CONFIG_FILE_NAME)

    @classmethod
    def load(cls) -> "DotinstallConfig":
        """Load and validate config from file.

        Every section is optional; a missing file yields the defaults.

        Raises:
            ValueError: If the file holds invalid JSON or fails validation
        """
        path = cls.get_config_path()

        if not path.exists():
            return cls()

        try:
            with path.open(encoding="utf-8") as fh:
                raw = json.load(fh)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON in config file {path}: {e}") from e

        if not isinstance(raw, dict):
            raise ValueError(f"Config file {path} must contain a JSON object")

        try:
            return cls(**raw)
        except ValidationError as e:
            error_list = e.errors() or [{"msg": str(e), "loc": ()}]
            first = error_list[0]
            error_msg = first.get("msg", str(e))
            loc = first.get("loc", ())
            field = ".".join(str(x) for x in loc) if isinstance(loc, (list, tuple)) else ""
            detail = f"{field}: {error_msg}" if field else error_msg
            raise ValueError(f"Configuration validation error: {detail}") from e

    def to_dict(self) -> dict[str, Any]:
        """Convert to a dictionary for serialization."""
        return {
            "log": self.log.model_dump(),
            "display": self.display.model_dump(),
        }
