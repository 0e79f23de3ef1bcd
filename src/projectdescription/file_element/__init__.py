"""File elements: references to files, globs and folders used by build phases."""

from projectdescription.file_element.models import FileElement, FileElementKind

__all__ = [
    "FileElement",
    "FileElementKind",
]
