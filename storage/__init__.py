"""Storage driver abstraction for archivesort.

Provides a uniform interface for the input folder and the categorized
output folder:
- LocalDriver: Local filesystem

Usage:
    from storage import create_storage
    
    driver = create_storage("local:/path/to/folder")
    driver = create_storage("/path/to/folder")
"""

from .base import StorageDriver, StorageError, FileInfo, FolderInfo
from .local import LocalDriver


def create_storage(uri: str, create: bool = False) -> StorageDriver:
    """Create a storage driver from a URI or plain path.
    
    Args:
        uri: 'local:/path/to/folder' or a plain filesystem path
        create: Create the folder if it doesn't exist
        
    Returns:
        StorageDriver instance for the specified backend
        
    Raises:
        ValueError: If the URI names an unsupported backend
        StorageError: If the folder doesn't exist
    """
    if uri.startswith("local:"):
        return LocalDriver(uri[6:], create=create)
    scheme = uri.split(":", 1)[0]
    if ":" in uri and len(scheme) > 1 and scheme.isalpha():
        raise ValueError(
            f"Invalid storage URI: {uri}. "
            "Must start with 'local:' or be a plain path"
        )
    return LocalDriver(uri, create=create)


__all__ = [
    'StorageDriver',
    'StorageError',
    'FileInfo',
    'FolderInfo',
    'LocalDriver',
    'create_storage',
]
