"""Vault configuration (cahlter.yml) and process settings."""

from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from ..utils.exceptions import ConfigError


CONFIG_FILE = "cahlter.yml"


class Link(BaseModel):
    """Link displayed in the page header."""

    name: str = Field(..., description="Label, shown when there is no icon")
    url: str
    icon: str | None = Field(default=None, description="Optional icon shown instead of the name")


class Language(BaseModel):
    """A translation of the vault."""

    name: str = Field(..., description="Language name (e.g. English, pt-br)")
    path: str = Field(..., description="Directory holding the translated markdown files")


class General(BaseModel):
    """General configuration options for the vault."""

    model_config = ConfigDict(validate_assignment=True)

    title: str = ""
    authors: list[str] = Field(default_factory=lambda: [""])
    desc: str = ""
    enumerate: bool = Field(default=False, description="Prefix sidebar titles with chapter numbers")
    ignore: list[str] = Field(
        default_factory=list, description="File or directory names skipped while summarizing"
    )
    multiple_language: bool = False
    use_default: bool = Field(default=True, description="Bundle the default CSS and JS")
    build_dir: Path = Path("build")
    src_dir: Path = Path("src")


class Appearance(BaseModel):
    """Appearance options for the generated site."""

    model_config = ConfigDict(validate_assignment=True)

    custom: list[str] = Field(
        default_factory=list, description="Custom stylesheets, relative to the vault root"
    )
    default_theme: str = "gruvbox"
    themes: list[str] = Field(default_factory=lambda: ["gruvbox", "catppuccin"])


class Config(BaseModel):
    """All configuration options of a vault.

    Example cahlter.yml:

        general:
          title: My notes
          enumerate: true
          src_dir: src
          build_dir: build
        appearance:
          default_theme: gruvbox
          custom: [./css/custom.css]
        links:
          - name: GitHub
            url: https://github.com
    """

    model_config = ConfigDict(validate_assignment=True)

    general: General = Field(default_factory=General)
    appearance: Appearance = Field(default_factory=Appearance)
    links: list[Link] = Field(default_factory=list)
    languages: list[Language] = Field(default_factory=list)

    @classmethod
    def from_disk(cls, path: Path | str) -> "Config":
        """Read and validate a config file."""
        path = Path(path)
        try:
            raw = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise ConfigError(f"Failed to read the config file {path}: {e}") from e

        try:
            data: Any = yaml.safe_load(raw) or {}
            return cls.model_validate(data)
        except (yaml.YAMLError, ValidationError) as e:
            raise ConfigError(f"Failed to parse the config file {path}: {e}") from e

    def save(self, path: Path | str) -> None:
        """Write the config as YAML to ``path``."""
        path = Path(path)
        serialized = yaml.safe_dump(
            self.model_dump(mode="json"), sort_keys=False, allow_unicode=True
        )
        try:
            path.write_text(serialized, encoding="utf-8")
        except OSError as e:
            raise ConfigError(f"Failed to write the config file {path}: {e}") from e

    def update(self, other: "Config") -> None:
        """Replace every section with the values from ``other``."""
        self.general = other.general
        self.appearance = other.appearance
        self.links = other.links
        self.languages = other.languages


class CahlterSettings(BaseSettings):
    """Process-level settings with environment variable support.

    Example:
        export CAHLTER_LOG_LEVEL=DEBUG
        export CAHLTER_PORT=3000
    """

    model_config = SettingsConfigDict(
        env_prefix="CAHLTER_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    log_level: str = Field(
        default="INFO", description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)"
    )
    host: str = Field(default="127.0.0.1", description="Interface the dev server binds to")
    port: int = Field(default=8080, ge=1, le=65535, description="Port the dev server listens on")
