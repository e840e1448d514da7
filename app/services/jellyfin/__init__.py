from .client import JellyfinClient
from .library import JellyfinLibraryService

__all__ = ["JellyfinClient", "JellyfinLibraryService"]
