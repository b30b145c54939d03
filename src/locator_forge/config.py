"""Configuration management for Locator Forge."""

from pathlib import Path
from typing import Literal

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource, SettingsConfigDict

# Load .env file at import time
load_dotenv()

SEMANTIC_ATTRIBUTES = [
    "name",
    "data-testid",
    "data-id",
    "data-automation",
    "data-cy",
    "data-test",
    "role",
    "aria-label",
    "aria-labelledby",
    "aria-describedby",
]

CONTAINS_ATTRIBUTES = ["class", "id", "name", "data-testid", "role", "title", "placeholder"]

FORBIDDEN_TAGS = [
    "script",
    "iframe",
    "object",
    "embed",
    "applet",
    "frame",
    "frameset",
    "base",
    "noscript",
]


class GenerationConfig(BaseModel):
    """Locator generation behavior."""

    default_locale: Literal["en", "pt"] = "en"
    target_marker: str | None = "data-locator-target"
    max_ancestor_depth: int = Field(default=8, ge=0)
    semantic_attributes: list[str] = Field(default_factory=lambda: list(SEMANTIC_ATTRIBUTES))
    contains_attributes: list[str] = Field(default_factory=lambda: list(CONTAINS_ATTRIBUTES))


class ValidationConfig(BaseModel):
    """Candidate validation behavior."""

    mode: Literal["any", "unique"] = "any"
    reuse_tree: bool = False


class SanitizerConfig(BaseModel):
    """Markup sanitization rules."""

    forbidden_tags: list[str] = Field(default_factory=lambda: list(FORBIDDEN_TAGS))
    strip_comments: bool = True


class LocatorForgeConfig(BaseSettings):
    """Main configuration for Locator Forge."""

    model_config = SettingsConfigDict(
        env_prefix="LOCATOR_FORGE_",
        env_nested_delimiter="__",
    )

    generation: GenerationConfig = Field(default_factory=GenerationConfig)
    validation: ValidationConfig = Field(default_factory=ValidationConfig)
    sanitizer: SanitizerConfig = Field(default_factory=SanitizerConfig)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        # Environment variables win over values passed in from the YAML file
        return env_settings, init_settings, dotenv_settings, file_secret_settings


def load_config(config_path: Path | None = None) -> LocatorForgeConfig:
    """Load configuration from YAML file and environment variables."""
    config_data: dict = {}

    # Try to find config file
    if config_path is None:
        for name in ["locator_forge.yaml", "locator_forge.yml", ".locator_forge.yaml"]:
            if Path(name).exists():
                config_path = Path(name)
                break

    # Load from YAML if exists
    if config_path and config_path.exists():
        with open(config_path) as f:
            raw = yaml.safe_load(f)
            if raw and "locator_forge" in raw:
                config_data = raw["locator_forge"]
            elif raw:
                config_data = raw

    # LOCATOR_FORGE_* environment variables override anything set here
    return LocatorForgeConfig(**config_data)
