"""Copy files build phase: destinations, the action value and its factories.

Usage:
    from projectdescription.copy_files import CopyFilesAction, Destination

    action = CopyFilesAction.frameworks("Embed Frameworks", "Frameworks/*.framework")
    assert action.destination is Destination.FRAMEWORKS
"""

from projectdescription.copy_files.models import (
    FACTORIES,
    CopyFilesAction,
    Destination,
    FactoryFunction,
    FileLike,
)

__all__ = [
    "CopyFilesAction",
    "Destination",
    "FACTORIES",
    "FactoryFunction",
    "FileLike",
]
