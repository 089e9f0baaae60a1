from __future__ import annotations

from pathlib import Path
from typing import Any, ClassVar, Literal

import yaml
from pydantic import ValidationError, field_validator
from pydantic.fields import FieldInfo
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
)

from yake.exceptions import ConfigError
from yake.logging import get_logger

__all__ = [
    "YakeConfig",
    "load_config",
    "get_user_config_path",
]

logger = get_logger(__name__)

DEFAULT_YAKEFILE = "Yakefile"


class YamlConfigSource(PydanticBaseSettingsSource):
    """Custom settings source that loads from YAML files."""

    def __init__(
        self,
        settings_cls: type[BaseSettings],
        yaml_file: Path | None = None,
    ):
        super().__init__(settings_cls)
        self.yaml_file = yaml_file
        self._config_data: dict[str, Any] = {}
        if yaml_file and yaml_file.exists():
            try:
                with open(yaml_file) as f:
                    loaded = yaml.safe_load(f)
                    if loaded is None:
                        logger.warning(
                            f"Config file {yaml_file} is empty, using defaults."
                        )
                    elif not isinstance(loaded, dict):
                        raise ConfigError(
                            message=f"Config file {yaml_file} must be a mapping",
                            value=type(loaded).__name__,
                        )
                    else:
                        self._config_data = loaded
            except yaml.YAMLError as e:
                raise ConfigError(
                    message=f"Invalid YAML in {yaml_file}: {e}",
                    field=None,
                    value=None,
                ) from e

    def get_field_value(
        self, field: FieldInfo, field_name: str
    ) -> tuple[Any, str, bool]:
        """Get value for a specific field from the YAML config."""
        if field_name in self._config_data:
            return self._config_data[field_name], field_name, False
        return None, field_name, False

    def __call__(self) -> dict[str, Any]:
        """Return the complete config data."""
        return self._config_data


class YakeConfig(BaseSettings):
    """Runtime settings for the yake CLI.

    These are settings of the tool itself, not of a Yakefile.

    Attributes:
        yakefile: File name of the root and subordinate documents.
        shell: Shell binary used to run each command line via ``-c``.
        stop_on_failure: Abort the run when a command exits non-zero.
        include_recursively: Overrides the document's
            ``meta.include_recursively`` flag when set.
        verbosity: Default log level when no -v/-q flag is given.
    """

    model_config = SettingsConfigDict(
        env_prefix="YAKE_",
        extra="ignore",
    )

    yakefile: str = DEFAULT_YAKEFILE
    shell: str = "bash"
    stop_on_failure: bool = False
    include_recursively: bool | None = None
    verbosity: Literal["error", "warning", "info", "debug"] = "warning"

    # Explicit --config file; bound per call by load_config(), not a field.
    project_config_path: ClassVar[Path | None] = None

    @field_validator("yakefile", "shell")
    @classmethod
    def check_not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("must not be empty")
        return v

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Customize the order of settings sources.

        Priority (highest to lowest):
        1. Init arguments
        2. Environment variables (YAKE_*)
        3. Explicit config file (--config)
        4. User YAML config (~/.config/yake/config.yaml)
        5. Field defaults
        """
        return (
            init_settings,
            env_settings,
            YamlConfigSource(settings_cls, cls.project_config_path),
            YamlConfigSource(settings_cls, get_user_config_path()),
        )


def _settings_class(config_path: Path | None) -> type[YakeConfig]:
    """Return a YakeConfig subclass that reads config_path as its file source."""
    if config_path is None:
        return YakeConfig

    class ExplicitFileConfig(YakeConfig):
        project_config_path: ClassVar[Path | None] = config_path

    return ExplicitFileConfig


def get_user_config_path() -> Path:
    """Get the path to the user configuration file.

    Returns:
        Path to ~/.config/yake/config.yaml
    """
    return Path.home() / ".config" / "yake" / "config.yaml"


def load_config(config_path: Path | None = None) -> YakeConfig:
    """Load settings with hierarchy: defaults -> user -> explicit file -> env.

    Args:
        config_path: Optional explicit config file. It must exist when given.

    Returns:
        YakeConfig instance with merged settings.

    Raises:
        ConfigError: If the settings are invalid or config_path is missing.
    """
    if config_path is not None and not config_path.exists():
        raise ConfigError(
            message=f"Config file not found: {config_path}",
            field="config",
            value=str(config_path),
        )

    try:
        return _settings_class(config_path)()
    except ValidationError as e:
        # Extract first error for ConfigError
        first_error = e.errors()[0]
        field = ".".join(str(loc) for loc in first_error["loc"])
        raise ConfigError(
            message=f"Invalid configuration: {first_error['msg']}",
            field=field,
            value=first_error.get("input"),
        ) from e