"""projectdescription: declarative build configuration values for project generation.

Usage:
    from projectdescription import CopyFilesAction, FileElement

    action = CopyFilesAction.resources(
        "Copy Resources",
        FileElement.glob("Extras/*.json"),
        FileElement.folder_reference("Extras/Templates"),
        subpath="Extras",
    )
    data = action.to_dict()
    assert CopyFilesAction.from_dict(data) == action
"""

__version__ = "0.1.0"

# Copy files build phase
from projectdescription.copy_files import (
    FACTORIES,
    CopyFilesAction,
    Destination,
)

# Errors
from projectdescription.errors import DecodingError

# File elements
from projectdescription.file_element import (
    FileElement,
    FileElementKind,
)

__all__ = [
    # Version
    "__version__",
    # Copy files
    "CopyFilesAction",
    "Destination",
    "FACTORIES",
    # File elements
    "FileElement",
    "FileElementKind",
    # Errors
    "DecodingError",
]
