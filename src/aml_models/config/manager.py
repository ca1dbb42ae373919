"""Configuration manager: read/write TOML config, resolve output settings."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

import tomli_w
from pydantic import ValidationError

from aml_models.config.constants import CONFIG_FILE, ENV_CONFIG_PATH, ENV_OUTPUT_FORMAT
from aml_models.config.models import CLIConfig, check_format
from aml_models.core.errors import ConfigurationError

try:
    import tomllib
except ModuleNotFoundError:
    import tomli as tomllib


def default_config_path() -> Path:
    env_path = os.environ.get(ENV_CONFIG_PATH)
    return Path(env_path).expanduser() if env_path else CONFIG_FILE


def _validation_message(exc: ValidationError) -> str:
    return "; ".join(
        f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}" for err in exc.errors(include_url=False)
    )


class ConfigManager:
    """Manages CLI configuration on disk."""

    def __init__(self, config_path: Path | None = None) -> None:
        self.config_path = config_path or default_config_path()
        self._config: CLIConfig | None = None

    @property
    def config(self) -> CLIConfig:
        if self._config is None:
            self._config = self._load()
        return self._config

    def _load(self) -> CLIConfig:
        if not self.config_path.exists():
            return CLIConfig()
        raw = self.config_path.read_bytes()
        try:
            data = tomllib.loads(raw.decode())
        except tomllib.TOMLDecodeError as exc:
            raise ConfigurationError(f"Invalid TOML in {self.config_path}: {exc}") from exc
        unknown = sorted(set(data) - set(CLIConfig.model_fields))
        if unknown:
            raise ConfigurationError(f"Unknown setting(s) in {self.config_path}: {', '.join(unknown)}")
        try:
            return CLIConfig(**data)
        except ValidationError as exc:
            raise ConfigurationError(f"Invalid config {self.config_path}: {_validation_message(exc)}") from exc

    def save(self) -> None:
        self.config_path.parent.mkdir(parents=True, exist_ok=True)
        # Only settings that differ from the defaults are written
        data: dict[str, Any] = self.config.model_dump(exclude_defaults=True)
        # Atomic write: write to temp file, then rename
        temp = self.config_path.with_suffix(".tmp")
        fd = os.open(str(temp), os.O_WRONLY | os.O_CREAT | os.O_TRUNC, 0o644)
        try:
            os.write(fd, tomli_w.dumps(data).encode())
        finally:
            os.close(fd)
        temp.replace(self.config_path)

    def set_value(self, key: str, value: str) -> CLIConfig:
        """Set one setting from its command-line text form and persist it."""
        if key not in CLIConfig.model_fields:
            raise ConfigurationError(
                f"Unknown setting '{key}'. Choose from: {', '.join(CLIConfig.model_fields)}"
            )
        data = self.config.model_dump()
        data[key] = value
        try:
            self._config = CLIConfig.model_validate(data)
        except ValidationError as exc:
            raise ConfigurationError(f"Invalid value for '{key}': {_validation_message(exc)}") from exc
        self.save()
        return self._config

    def reset(self) -> bool:
        """Restore every default; returns whether a config file was removed."""
        self._config = CLIConfig()
        if self.config_path.exists():
            self.config_path.unlink()
            return True
        return False

    def resolve_format(self, flag: str | None = None) -> str:
        """Resolve the output format.

        Precedence: CLI flag > env var > config file > default.
        """
        env_format = os.environ.get(ENV_OUTPUT_FORMAT)
        chosen = flag or env_format or self.config.default_format
        try:
            return check_format(chosen)
        except ValueError as exc:
            raise ConfigurationError(str(exc)) from exc
