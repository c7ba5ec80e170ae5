"""Settings loading and validation."""

import logging
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, Field, ValidationError
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
    TomlConfigSettingsSource,
)

from .consts import (
    BACKEND_BRANCH_DEFAULT,
    BACKEND_NAME_DEFAULT,
    ENV_DEVELOPMENT,
    ENV_PRODUCTION,
    LOCALE_DEFAULT,
    MEDIA_FOLDER_DEFAULT,
    PUBLIC_FOLDER_DEFAULT,
)
from .errors import ConfigException

logger = logging.getLogger(__name__)

ENV_PREFIX = "CMSCONFIG_"


class BackendConfig(BaseModel):
    """Git backend the CMS admin talks to."""

    name: str = Field(default=BACKEND_NAME_DEFAULT)
    branch: str = Field(default=BACKEND_BRANCH_DEFAULT)


class WebConfig(BaseModel):
    """Web service configuration."""

    host: str = Field(default="127.0.0.1")
    port: int = Field(default=3000, ge=1, le=65535)


class Settings(BaseSettings):
    """Application settings.

    Read from ``CMSCONFIG_*`` environment variables first, then from an
    optional TOML file.
    """

    environment: str = Field(default=ENV_PRODUCTION)
    locale: str = Field(default=LOCALE_DEFAULT)
    media_folder: str = Field(default=MEDIA_FOLDER_DEFAULT)
    public_folder: str = Field(default=PUBLIC_FOLDER_DEFAULT)

    backend: BackendConfig = Field(default_factory=BackendConfig)
    web: WebConfig = Field(default_factory=WebConfig)

    model_config = SettingsConfigDict(
        env_prefix=ENV_PREFIX,
        env_nested_delimiter="__",
    )

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        return (
            init_settings,
            env_settings,
            TomlConfigSettingsSource(settings_cls),
        )

    @property
    def local_backend(self) -> bool:
        """Whether the CMS should use its local proxy instead of the git backend."""
        return self.environment == ENV_DEVELOPMENT

    @classmethod
    def load(cls, config_path: Optional[str] = None) -> "Settings":
        """Load settings from the environment and, if given, a TOML file."""
        if config_path is None:
            return _validated(cls)

        path = Path(config_path)
        if not path.exists():
            raise ConfigException(f"Configuration file not found: {config_path}")

        logger.debug(f"Loading settings from {path}")

        class _Settings(cls):
            model_config = SettingsConfigDict(
                toml_file=str(path),
                env_prefix=ENV_PREFIX,
                env_nested_delimiter="__",
            )

        return _validated(_Settings)


def _validated(settings_cls: type[Settings]) -> Settings:
    try:
        return settings_cls()
    except ValidationError as e:
        error_lines = ["Configuration validation failed:"]
        for error in e.errors():
            loc = " -> ".join(str(item) for item in error["loc"])
            error_lines.append(f"  - {loc}: {error['msg']}")
        raise ConfigException("\n".join(error_lines)) from e
    except ValueError as e:
        # TOML syntax errors surface as ValueError subclasses
        raise ConfigException(f"Invalid configuration: {e}") from e
