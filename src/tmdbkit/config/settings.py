"""tmdbkit Settings Configuration Model.

Client configuration is supplied once, at construction, and read-only
afterwards. Values come from keyword arguments, ``TMDB_*`` environment
variables, or a TOML file, in that order of precedence.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from contextvars import ContextVar
from pathlib import Path
from types import MappingProxyType
from typing import Any

import toml
from pydantic import Field, field_validator
from pydantic.fields import FieldInfo
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource, SettingsConfigDict

from tmdbkit.shared.constants import TMDB
from tmdbkit.shared.errors import ErrorCode, create_config_error
from tmdbkit.shared.locales import LocaleProvider, fixed_locale, language_code, system_locale

logger = logging.getLogger(__name__)

# Section of the TOML file being loaded by TMDbSettings.from_toml_file.
_toml_section: ContextVar[Mapping[str, Any]] = ContextVar(
    "tmdb_toml_section", default=MappingProxyType({})
)


class TomlSectionSettingsSource(PydanticBaseSettingsSource):
    """Settings source serving the values of one TOML table."""

    def __init__(self, settings_cls: type[BaseSettings], section: Mapping[str, Any]) -> None:
        super().__init__(settings_cls)
        self._section = section

    def get_field_value(self, field: FieldInfo, field_name: str) -> tuple[Any, str, bool]:
        return self._section.get(field_name), field_name, False

    def __call__(self) -> dict[str, Any]:
        return {
            name: value
            for name, value in self._section.items()
            if name in self.settings_cls.model_fields
        }


class TMDbSettings(BaseSettings):
    """TMDb API client configuration.

    Security: api_key and access_token are hidden from repr so settings can
    be logged safely.
    """

    model_config = SettingsConfigDict(
        env_prefix=TMDB.ENV_PREFIX,
        env_ignore_empty=True,
        extra="ignore",
        frozen=True,
    )

    api_key: str = Field(
        default="",
        repr=False,
        description="TMDb v3 API key, sent as the api_key query parameter",
    )
    access_token: str = Field(
        default="",
        repr=False,
        description="TMDb read access token, sent as a bearer token",
    )
    base_url: str = Field(
        default=TMDB.API_BASE_URL,
        description="API base URL without trailing slash",
    )
    timeout: float = Field(
        default=TMDB.DEFAULT_TIMEOUT,
        gt=0,
        description="Total request timeout in seconds",
    )
    language: str = Field(
        default=TMDB.DEFAULT_LANGUAGE,
        description="Default locale identifier for localized requests",
    )
    log_level: str = Field(
        default="INFO",
        description="Level used by setup_structured_logger",
    )
    follow_system_locale: bool = Field(
        default=False,
        description="Use the process locale, read per call, instead of language",
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
        # Keyword arguments, then environment, then the TOML file.
        return (
            init_settings,
            env_settings,
            dotenv_settings,
            file_secret_settings,
            TomlSectionSettingsSource(settings_cls, _toml_section.get()),
        )

    @field_validator("base_url")
    @classmethod
    def _strip_trailing_slash(cls, value: str) -> str:
        return value.rstrip("/")

    @field_validator("language")
    @classmethod
    def _validate_language(cls, value: str) -> str:
        if language_code(value) is None:
            msg = f"Not a locale identifier: {value!r}"
            raise ValueError(msg)
        return value

    @property
    def has_credentials(self) -> bool:
        return bool(self.api_key or self.access_token)

    def validate_credentials(self) -> None:
        """Ensure at least one credential is configured.

        Raises:
            ConfigurationError: If neither api_key nor access_token is set
        """
        if not self.has_credentials:
            raise create_config_error(
                "Either TMDB_API_KEY or TMDB_ACCESS_TOKEN must be set",
                config_key="api_key",
                code=ErrorCode.MISSING_CREDENTIALS,
            )

    def locale_provider(self) -> LocaleProvider:
        """Return a provider yielding the default locale.

        With ``follow_system_locale`` the provider is ``system_locale``, so a
        locale change in the process shows up on the next request.
        """
        if self.follow_system_locale:
            return system_locale
        return fixed_locale(self.language)

    @classmethod
    def from_toml_file(cls, file_path: str | Path, **overrides: Any) -> TMDbSettings:
        """Load settings from the ``[tmdb]`` table of a TOML file.

        Precedence, highest first: keyword overrides, ``TMDB_*`` environment
        variables, the file, field defaults.

        Raises:
            ConfigurationError: If the file is missing or is not valid TOML
        """
        file_path = Path(file_path)
        if not file_path.exists():
            raise create_config_error(
                f"Configuration file not found: {file_path}",
                config_key="file_path",
            )

        try:
            raw_config = toml.load(file_path)
        except toml.TomlDecodeError as e:
            raise create_config_error(
                f"Invalid TOML in {file_path}: {e}",
                config_key="file_path",
                original_error=e,
            ) from e

        section = raw_config.get("tmdb", raw_config)
        logger.debug("Loaded tmdb settings from %s", file_path)
        token = _toml_section.set(MappingProxyType(dict(section)))
        try:
            return cls(**overrides)
        finally:
            _toml_section.reset(token)

    def __repr__(self) -> str:
        masked_key = "****" if self.api_key else "[empty]"
        masked_token = "****" if self.access_token else "[empty]"
        return (
            f"TMDbSettings("
            f"api_key={masked_key}, "
            f"access_token={masked_token}, "
            f"base_url={self.base_url!r}, "
            f"timeout={self.timeout}, "
            f"language={self.language!r})"
        )


def get_settings(**overrides: Any) -> TMDbSettings:
    """Build settings from the environment, applying keyword overrides."""
    return TMDbSettings(**overrides)


__all__ = ["TMDbSettings", "get_settings"]
