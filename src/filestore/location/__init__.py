"""Location descriptors and path resolution."""

from .directories import BaseDirectories
from .models import BaseDirectory, DirectoryCreationFailed, LocationDescriptor
from .resolver import PathResolver

__all__ = [
    "BaseDirectories",
    "BaseDirectory",
    "DirectoryCreationFailed",
    "LocationDescriptor",
    "PathResolver",
]
