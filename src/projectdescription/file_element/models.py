"""File element models.

A file element points at project files to be used by a build phase. The copy
files model only stores and compares elements; resolving a glob into concrete
paths is left to the generator.

Usage:
    icons = FileElement.glob("Resources/Icons/*.png")
    bundle = FileElement.folder_reference("Resources/Templates")
    same = FileElement.coerce("Resources/Icons/*.png")  # == icons
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any

from projectdescription.errors import DecodingError


class FileElementKind(str, Enum):
    """How the element's path is interpreted. Values are the wire tokens."""

    GLOB = "glob"
    """Path is a glob pattern expanded to individual files."""

    FOLDER_REFERENCE = "folderReference"
    """Path is a directory added as a single folder reference."""


# Key holding the path in each kind's serialized form
_PATH_KEYS = {
    FileElementKind.GLOB: "pattern",
    FileElementKind.FOLDER_REFERENCE: "path",
}


@dataclass(frozen=True, slots=True)
class FileElement:
    """Reference to a project file, glob pattern or folder."""

    kind: FileElementKind
    path: str

    def __post_init__(self) -> None:
        object.__setattr__(self, "kind", FileElementKind(self.kind))

    @classmethod
    def glob(cls, pattern: str) -> FileElement:
        return cls(FileElementKind.GLOB, pattern)

    @classmethod
    def folder_reference(cls, path: str) -> FileElement:
        return cls(FileElementKind.FOLDER_REFERENCE, path)

    @classmethod
    def coerce(cls, value: FileElement | str) -> FileElement:
        """Return value as a FileElement, treating plain strings as glob patterns.

        Raises:
            TypeError: If value is neither a FileElement nor a string.
        """
        if isinstance(value, FileElement):
            return value
        if isinstance(value, str):
            return cls.glob(value)
        raise TypeError(f"Expected FileElement or str, got {type(value).__name__}")

    def to_dict(self) -> dict[str, Any]:
        """Convert to JSON-serializable dictionary."""
        return {"type": self.kind.value, _PATH_KEYS[self.kind]: self.path}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> FileElement:
        """Create from dictionary (for deserialization).

        Raises:
            DecodingError: If the type is missing or unknown, or its path key is missing.
        """
        if not isinstance(data, Mapping):
            raise DecodingError(f"Expected a file element object, got {type(data).__name__}")
        if "type" not in data:
            raise DecodingError("File element is missing 'type'", key="type")
        try:
            kind = FileElementKind(data["type"])
        except ValueError:
            raise DecodingError(
                f"Unknown file element type {data['type']!r}", key="type"
            ) from None
        path_key = _PATH_KEYS[kind]
        if path_key not in data:
            raise DecodingError(
                f"File element of type {kind.value!r} is missing {path_key!r}", key=path_key
            )
        if not isinstance(data[path_key], str):
            raise DecodingError(f"{path_key!r} must be a string", key=path_key)
        return cls(kind, data[path_key])
