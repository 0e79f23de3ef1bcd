"""Serialization settings using Pydantic Settings.

Usage:
    from projectdescription.config import SerializationSettings

    # Load from environment variables (PROJECTDESCRIPTION_*)
    settings = SerializationSettings()

    # Or override with explicit values
    settings = SerializationSettings(unknown_keys="error", json_indent=2)
"""

from __future__ import annotations

from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class SerializationSettings(BaseSettings):  # type: ignore[misc]
    """Configuration for encoding and decoding project description values.

    Attributes:
        emit_null_subpath: Write an absent subpath as null instead of omitting it.
        unknown_keys: What to do with keys the decoder does not know
            (ignore, warn, error).
        json_indent: Indentation for JSON output (None for compact).

    Environment Variables:
        PROJECTDESCRIPTION_EMIT_NULL_SUBPATH
        PROJECTDESCRIPTION_UNKNOWN_KEYS
        PROJECTDESCRIPTION_JSON_INDENT
    """

    model_config = SettingsConfigDict(
        env_prefix="PROJECTDESCRIPTION_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    emit_null_subpath: bool = False
    unknown_keys: Literal["ignore", "warn", "error"] = "ignore"
    json_indent: int | None = None
