"""Shared constants for the dotinstall home directory and artefact locations."""

DOTINSTALL_HOME_EXT = ".dotinstall"  # user-level state/config directory suffix

CONFIG_FILE_NAME = "config.json"

# Answer pattern accepted by the overwrite prompt
OVERWRITE_ANSWER_PATTERN = r"^(y|n)"
