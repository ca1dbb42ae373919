"""Default paths, environment variable names, and constants."""

from __future__ import annotations

import platformdirs

APP_NAME = "aml-models"

CONFIG_DIR = platformdirs.user_config_path(APP_NAME)
CONFIG_FILE = CONFIG_DIR / "config.toml"

# Environment variable names
ENV_CONFIG_PATH = "AML_MODELS_CONFIG"
ENV_OUTPUT_FORMAT = "AML_MODELS_FORMAT"

# Output defaults
OUTPUT_FORMATS = ("table", "json", "yaml")
DEFAULT_FORMAT = "table"
DEFAULT_JSON_INDENT = 2
