"""Base classes for storage drivers.

This module defines the abstract interface that storage backends implement.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import List, Optional


class StorageError(Exception):
    """Base exception for storage operations."""
    pass


@dataclass
class FileInfo:
    """Information about a file in storage.
    
    Attributes:
        path: Relative path within the storage root
        name: Filename only (no directory)
        size: File size in bytes (optional)
    """
    path: str
    name: str
    size: Optional[int] = None


@dataclass
class FolderInfo:
    """Information about a folder in storage.
    
    Attributes:
        path: Relative path within the storage root
        name: Folder name only (no parent path)
    """
    path: str
    name: str


class StorageDriver(ABC):
    """Abstract base class for storage backends.
    
    The input side of a sort run only reads; the output side also writes
    bucket folders and copies files in.
    """
    
    @property
    @abstractmethod
    def display_name(self) -> str:
        """Human-readable name for this storage."""
        pass
    
    # =========================================================================
    # Read Operations
    # =========================================================================
    
    @abstractmethod
    def list_files(self, path: str = "", recursive: bool = False,
                   max_depth: Optional[int] = None) -> List[FileInfo]:
        """List files at the given path.
        
        Args:
            path: Relative path within storage (empty string for root)
            recursive: If True, include files in subdirectories
            max_depth: With recursive, how many directory levels below
                       `path` to descend (None = unlimited)
            
        Returns:
            List of FileInfo objects, sorted by path
            
        Raises:
            StorageError: If path doesn't exist or can't be accessed
        """
        pass
    
    @abstractmethod
    def list_folders(self, path: str = "") -> List[FolderInfo]:
        """List immediate subfolders at the given path.
        
        Raises:
            StorageError: If path doesn't exist or can't be accessed
        """
        pass
    
    @abstractmethod
    def file_exists(self, path: str) -> bool:
        """Check if a file exists at the given path."""
        pass
    
    @abstractmethod
    def read_text(self, path: str, max_chars: Optional[int] = None) -> str:
        """Read a text file and return its contents.
        
        Bytes that aren't valid UTF-8 are replaced with U+FFFD.
        
        Args:
            path: Relative path to the text file
            max_chars: Read at most this many characters
        
        Raises:
            StorageError: If file doesn't exist or can't be read
        """
        pass
    
    @abstractmethod
    def local_path(self, path: str) -> str:
        """Return a local filesystem path for the file.
        
        Raises:
            StorageError: If file doesn't exist
        """
        pass
    
    # =========================================================================
    # Write Operations
    # =========================================================================
    
    @abstractmethod
    def upload(self, local_path: str, dest_path: str) -> None:
        """Copy a local file into storage, creating parent folders.
        
        Raises:
            StorageError: If the copy fails
        """
        pass
    
    @abstractmethod
    def create_folder(self, path: str) -> None:
        """Create a folder (and parents) if it doesn't exist.
        
        Raises:
            StorageError: If the folder can't be created
        """
        pass
    
    # =========================================================================
    # Filename Handling
    # =========================================================================
    
    @abstractmethod
    def sanitize_filename(self, name: str) -> str:
        """Sanitize a file or folder name for this storage backend."""
        pass
