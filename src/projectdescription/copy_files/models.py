"""Copy files build phase models.

A copy files action associates project files and products of other targets
with a target and copies them to a destination, typically a subfolder within
the product. A target may carry any number of these actions; each one becomes
a copy files build phase named after the action when the project is generated.

Usage:
    embed = CopyFilesAction.products_directory("Embed App Extensions", extension)
    extras = CopyFilesAction.resources(
        "Copy Resources", subpath="Extras", files=["Extras/a.txt", "Extras/b.txt"]
    )
    plain = CopyFilesAction("Install", Destination.ABSOLUTE_PATH, "/usr/local/lib")
"""

from __future__ import annotations

import json
import warnings
from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any

from projectdescription.config import SerializationSettings
from projectdescription.errors import DecodingError
from projectdescription.file_element import FileElement

FileLike = FileElement | str
"""Anything accepted where a file element is expected. Strings are glob patterns."""


class Destination(str, Enum):
    """Location a copy files action copies into.

    Values are the serialized tokens and must stay identical to the variant names.
    """

    ABSOLUTE_PATH = "absolutePath"
    PRODUCTS_DIRECTORY = "productsDirectory"
    WRAPPER = "wrapper"
    EXECUTABLES = "executables"
    RESOURCES = "resources"
    JAVA_RESOURCES = "javaResources"
    FRAMEWORKS = "frameworks"
    SHARED_FRAMEWORKS = "sharedFrameworks"
    SHARED_SUPPORT = "sharedSupport"
    PLUGINS = "plugins"
    OTHER = "other"


_KNOWN_KEYS = frozenset({"name", "destination", "subpath", "files"})


@dataclass(frozen=True, slots=True)
class CopyFilesAction:
    """A build phase action used to copy files.

    Values are immutable and compared structurally; the order of ``files`` is
    the copy order and is significant for equality. Nothing is validated
    beyond types: empty names and arbitrary subpaths are kept as given.

    Attributes:
        name: Name of the build phase when the project gets generated.
        destination: Destination to copy files to.
        subpath: Path to a folder inside the destination.
        files: Files to be copied, in copy order.
    """

    name: str
    destination: Destination
    subpath: str | None = None
    files: tuple[FileElement, ...] = field(default=())

    def __post_init__(self) -> None:
        # Accept wire tokens for destination and any iterable for files
        object.__setattr__(self, "destination", Destination(self.destination))
        files = self.files
        if isinstance(files, (str, FileElement)):
            # A lone pattern is one file, not a sequence of characters
            files = (files,)
        object.__setattr__(self, "files", tuple(FileElement.coerce(f) for f in files))

    @classmethod
    def of(
        cls,
        name: str,
        destination: Destination | str,
        *files: FileLike,
        subpath: str | None = None,
    ) -> CopyFilesAction:
        """Build an action from files given as individual arguments, in call order."""
        return cls(name, destination, subpath, files)  # type: ignore[arg-type]

    @classmethod
    def _for_destination(
        cls,
        destination: Destination,
        name: str,
        elements: tuple[FileLike, ...],
        subpath: str | None,
        files: Iterable[FileLike] | None,
    ) -> CopyFilesAction:
        if elements and files is not None:
            raise TypeError("Pass files either as positional arguments or as files=, not both")
        chosen = elements if files is None else files
        return cls(name, destination, subpath, chosen)  # type: ignore[arg-type]

    # --- Destination factories ---
    # Each accepts files positionally or as a sequence via files=.
    # ABSOLUTE_PATH has no factory; use the constructor.

    @classmethod
    def products_directory(
        cls,
        name: str,
        *elements: FileLike,
        subpath: str | None = None,
        files: Iterable[FileLike] | None = None,
    ) -> CopyFilesAction:
        """A copy files action for the products directory.

        Args:
            name: Name of the build phase when the project gets generated.
            *elements: Files to be copied, as individual arguments.
            subpath: Path to a folder inside the destination.
            files: Files to be copied, as a sequence.

        Returns:
            Copy files action.
        """
        return cls._for_destination(
            Destination.PRODUCTS_DIRECTORY, name, elements, subpath, files
        )

    @classmethod
    def wrapper(
        cls,
        name: str,
        *elements: FileLike,
        subpath: str | None = None,
        files: Iterable[FileLike] | None = None,
    ) -> CopyFilesAction:
        """A copy files action for the wrapper directory."""
        return cls._for_destination(Destination.WRAPPER, name, elements, subpath, files)

    @classmethod
    def executables(
        cls,
        name: str,
        *elements: FileLike,
        subpath: str | None = None,
        files: Iterable[FileLike] | None = None,
    ) -> CopyFilesAction:
        """A copy files action for the executables directory."""
        return cls._for_destination(Destination.EXECUTABLES, name, elements, subpath, files)

    @classmethod
    def resources(
        cls,
        name: str,
        *elements: FileLike,
        subpath: str | None = None,
        files: Iterable[FileLike] | None = None,
    ) -> CopyFilesAction:
        """A copy files action for the resources directory."""
        return cls._for_destination(Destination.RESOURCES, name, elements, subpath, files)

    @classmethod
    def java_resources(
        cls,
        name: str,
        *elements: FileLike,
        subpath: str | None = None,
        files: Iterable[FileLike] | None = None,
    ) -> CopyFilesAction:
        """A copy files action for the Java resources directory."""
        return cls._for_destination(Destination.JAVA_RESOURCES, name, elements, subpath, files)

    @classmethod
    def frameworks(
        cls,
        name: str,
        *elements: FileLike,
        subpath: str | None = None,
        files: Iterable[FileLike] | None = None,
    ) -> CopyFilesAction:
        """A copy files action for the frameworks directory."""
        return cls._for_destination(Destination.FRAMEWORKS, name, elements, subpath, files)

    @classmethod
    def shared_frameworks(
        cls,
        name: str,
        *elements: FileLike,
        subpath: str | None = None,
        files: Iterable[FileLike] | None = None,
    ) -> CopyFilesAction:
        """A copy files action for the shared frameworks directory."""
        return cls._for_destination(
            Destination.SHARED_FRAMEWORKS, name, elements, subpath, files
        )

    @classmethod
    def shared_support(
        cls,
        name: str,
        *elements: FileLike,
        subpath: str | None = None,
        files: Iterable[FileLike] | None = None,
    ) -> CopyFilesAction:
        """A copy files action for the shared support directory."""
        return cls._for_destination(Destination.SHARED_SUPPORT, name, elements, subpath, files)

    @classmethod
    def plugins(
        cls,
        name: str,
        *elements: FileLike,
        subpath: str | None = None,
        files: Iterable[FileLike] | None = None,
    ) -> CopyFilesAction:
        """A copy files action for the plugins directory."""
        return cls._for_destination(Destination.PLUGINS, name, elements, subpath, files)

    @classmethod
    def other(
        cls,
        name: str,
        *elements: FileLike,
        subpath: str | None = None,
        files: Iterable[FileLike] | None = None,
    ) -> CopyFilesAction:
        """A copy files action for any other destination."""
        return cls._for_destination(Destination.OTHER, name, elements, subpath, files)

    # --- Serialization ---

    def to_dict(self, settings: SerializationSettings | None = None) -> dict[str, Any]:
        """Convert to JSON-serializable dictionary.

        An absent subpath is omitted unless settings.emit_null_subpath is set.
        """
        if settings is None:
            settings = SerializationSettings()
        result: dict[str, Any] = {
            "name": self.name,
            "destination": self.destination.value,
        }
        if self.subpath is not None or settings.emit_null_subpath:
            result["subpath"] = self.subpath
        result["files"] = [f.to_dict() for f in self.files]
        return result

    @classmethod
    def from_dict(
        cls, data: Mapping[str, Any], settings: SerializationSettings | None = None
    ) -> CopyFilesAction:
        """Create from dictionary (for deserialization).

        A missing subpath and a null subpath decode to the same value.

        Raises:
            DecodingError: If a required key is missing or has the wrong type,
                the destination is unknown, or an unknown key is found while
                settings.unknown_keys is "error".
        """
        if settings is None:
            settings = SerializationSettings()
        if not isinstance(data, Mapping):
            raise DecodingError(f"Expected an object, got {type(data).__name__}")

        unknown = sorted(set(data) - _KNOWN_KEYS)
        if unknown and settings.unknown_keys == "error":
            raise DecodingError(f"Unknown copy files action keys: {unknown}", key=unknown[0])
        if unknown and settings.unknown_keys == "warn":
            warnings.warn(
                f"Ignoring unknown copy files action keys: {unknown}",
                stacklevel=2,
            )

        for key in ("name", "destination", "files"):
            if key not in data:
                raise DecodingError(f"Copy files action is missing {key!r}", key=key)

        name = data["name"]
        if not isinstance(name, str):
            raise DecodingError("'name' must be a string", key="name")
        try:
            destination = Destination(data["destination"])
        except ValueError:
            raise DecodingError(
                f"Unknown destination {data['destination']!r}", key="destination"
            ) from None
        subpath = data.get("subpath")
        if subpath is not None and not isinstance(subpath, str):
            raise DecodingError("'subpath' must be a string or null", key="subpath")
        files = data["files"]
        if not isinstance(files, list):
            raise DecodingError("'files' must be a list", key="files")

        return cls(
            name=name,
            destination=destination,
            subpath=subpath,
            files=tuple(FileElement.from_dict(f) for f in files),
        )

    def to_json(self, settings: SerializationSettings | None = None) -> str:
        if settings is None:
            settings = SerializationSettings()
        return json.dumps(self.to_dict(settings), indent=settings.json_indent)

    @classmethod
    def from_json(
        cls, text: str | bytes, settings: SerializationSettings | None = None
    ) -> CopyFilesAction:
        try:
            data = json.loads(text)
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise DecodingError(f"Invalid JSON: {e}") from e
        return cls.from_dict(data, settings)


FactoryFunction = Callable[..., CopyFilesAction]
"""Signature: (name, *elements, subpath=None, files=None) -> CopyFilesAction"""

FACTORIES: Mapping[Destination, FactoryFunction] = MappingProxyType(
    {
        Destination.PRODUCTS_DIRECTORY: CopyFilesAction.products_directory,
        Destination.WRAPPER: CopyFilesAction.wrapper,
        Destination.EXECUTABLES: CopyFilesAction.executables,
        Destination.RESOURCES: CopyFilesAction.resources,
        Destination.JAVA_RESOURCES: CopyFilesAction.java_resources,
        Destination.FRAMEWORKS: CopyFilesAction.frameworks,
        Destination.SHARED_FRAMEWORKS: CopyFilesAction.shared_frameworks,
        Destination.SHARED_SUPPORT: CopyFilesAction.shared_support,
        Destination.PLUGINS: CopyFilesAction.plugins,
        Destination.OTHER: CopyFilesAction.other,
    }
)
"""Destination factory for each destination. ABSOLUTE_PATH has none."""
