"""Configuration module using Pydantic Settings.

Usage:
    from projectdescription.config import SerializationSettings

    settings = SerializationSettings(emit_null_subpath=True)
"""

from projectdescription.config.settings import SerializationSettings

__all__ = [
    "SerializationSettings",
]
