"""Application configuration: settings schema and config.yaml loader"""

import os
import re
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, Field, field_validator


CONFIG_FILE = "config.yaml"

GITHUB_ASSET_PREFIX = "https://user-images.githubusercontent.com/"
GITHUB_ASSET_PATTERN = r"https://user-images\.githubusercontent\.com/.+\.[a-zA-Z]+"


class Settings(BaseModel):
    model_config = ConfigDict(frozen=True)

    app_name:       str = "mdnotion"
    embed_prefixes: tuple[str, ...] = Field(default=(GITHUB_ASSET_PREFIX,), description="URL prefixes recognized as embedded media")
    embed_patterns: tuple[str, ...] = Field(default=(GITHUB_ASSET_PATTERN,), description="Regexes extracting the full embed URL, tried in order")
    output_dir:     str = Field(default="dist", description="Directory for token JSON files")
    json_indent:    int = Field(default=2, ge=0, description="Indent for written JSON; 0 = compact")

    @field_validator("embed_prefixes", mode="before")
    @classmethod
    def _split_prefixes(cls, value: Any) -> Any:
        """Accept a comma-separated string (as read from the environment)."""
        if isinstance(value, str):
            return tuple(p.strip() for p in value.split(",") if p.strip())
        return value

    @field_validator("embed_patterns", mode="before")
    @classmethod
    def _wrap_pattern(cls, value: Any) -> Any:
        if isinstance(value, str):
            return (value,)
        return value

    @field_validator("embed_prefixes")
    @classmethod
    def _check_prefixes(cls, value: tuple[str, ...]) -> tuple[str, ...]:
        if any(not p for p in value):
            raise ValueError("embed prefixes must be non-empty strings")
        return value

    @field_validator("embed_patterns")
    @classmethod
    def _check_patterns(cls, value: tuple[str, ...]) -> tuple[str, ...]:
        for pattern in value:
            try:
                re.compile(pattern)
            except re.error as e:
                raise ValueError(f"Invalid embed pattern {pattern!r}: {e}") from e
        return value


def load_config(overrides: dict[str, Any] = None) -> Settings:
    """Load Settings from config.yaml, then MDNOTION_<FIELD> env vars, then non-None CLI overrides."""
    data: dict[str, Any] = {}
    if Path(CONFIG_FILE).exists():
        try:
            data = yaml.safe_load(Path(CONFIG_FILE).read_text()) or {}
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid {CONFIG_FILE}: {e}") from e

    for name in Settings.model_fields:
        if val := os.getenv(f"MDNOTION_{name.upper()}"):
            data[name] = val

    if overrides:
        data.update({k: v for k, v in overrides.items() if v is not None})
    return Settings(**data)
