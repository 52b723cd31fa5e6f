"""Local filesystem storage driver."""

import os
import re
import shutil
from typing import List, Optional

from .base import StorageDriver, StorageError, FileInfo, FolderInfo


class LocalDriver(StorageDriver):
    """Storage driver for local filesystem.
    
    All paths are relative to the root_path provided at construction.
    """
    
    def __init__(self, root_path: str, create: bool = False) -> None:
        """Initialize local storage driver.
        
        Args:
            root_path: Path to the root directory
            create: Create the root directory if it doesn't exist
            
        Raises:
            StorageError: If root_path doesn't exist (and create is False)
        """
        self.root_path = os.path.abspath(root_path)
        if create:
            try:
                os.makedirs(self.root_path, exist_ok=True)
            except OSError as e:
                raise StorageError(f"Failed to create directory {self.root_path}: {e}")
        if not os.path.exists(self.root_path):
            raise StorageError(f"Directory does not exist: {self.root_path}")
        if not os.path.isdir(self.root_path):
            raise StorageError(f"Not a directory: {self.root_path}")
    
    @property
    def display_name(self) -> str:
        return f"{self.root_path} (local)"
    
    def _full_path(self, path: str) -> str:
        """Convert relative path to absolute path."""
        if not path:
            return self.root_path
        return os.path.join(self.root_path, path)
    
    def _file_info(self, abs_path: str) -> FileInfo:
        try:
            size = os.path.getsize(abs_path)
        except OSError:
            size = None
        return FileInfo(
            path=os.path.relpath(abs_path, self.root_path),
            name=os.path.basename(abs_path),
            size=size
        )
    
    def list_files(self, path: str = "", recursive: bool = False,
                   max_depth: Optional[int] = None) -> List[FileInfo]:
        """List files at the given path."""
        full_path = self._full_path(path)
        
        if not os.path.exists(full_path):
            raise StorageError(f"Path does not exist: {path}")
        if not os.path.isdir(full_path):
            raise StorageError(f"Not a directory: {path}")
        
        results = []
        
        if recursive:
            base_depth = full_path.rstrip(os.sep).count(os.sep)
            for root, dirs, files in os.walk(full_path):
                dirs.sort()
                depth = root.rstrip(os.sep).count(os.sep) - base_depth
                if max_depth is not None and depth >= max_depth:
                    # Files at this level are listed, nothing below it
                    dirs[:] = []
                for filename in sorted(files):
                    results.append(self._file_info(os.path.join(root, filename)))
        else:
            for filename in sorted(os.listdir(full_path)):
                abs_path = os.path.join(full_path, filename)
                if os.path.isfile(abs_path):
                    results.append(self._file_info(abs_path))
        
        return results
    
    def list_folders(self, path: str = "") -> List[FolderInfo]:
        """List immediate subfolders at the given path."""
        full_path = self._full_path(path)
        
        if not os.path.exists(full_path):
            raise StorageError(f"Path does not exist: {path}")
        if not os.path.isdir(full_path):
            raise StorageError(f"Not a directory: {path}")
        
        results = []
        for name in sorted(os.listdir(full_path)):
            abs_path = os.path.join(full_path, name)
            if os.path.isdir(abs_path):
                rel_path = os.path.relpath(abs_path, self.root_path)
                results.append(FolderInfo(path=rel_path, name=name))
        
        return results
    
    def file_exists(self, path: str) -> bool:
        """Check if a file exists at the given path."""
        return os.path.isfile(self._full_path(path))
    
    def read_text(self, path: str, max_chars: Optional[int] = None) -> str:
        """Read a text file and return its contents."""
        full_path = self._full_path(path)
        
        if not os.path.isfile(full_path):
            raise StorageError(f"File does not exist: {path}")
        
        try:
            with open(full_path, 'r', encoding='utf-8', errors='replace') as f:
                return f.read() if max_chars is None else f.read(max_chars)
        except OSError as e:
            raise StorageError(f"Failed to read file {path}: {e}")
    
    def local_path(self, path: str) -> str:
        """Return the absolute path; local files need no temp copy."""
        full_path = self._full_path(path)
        
        if not os.path.isfile(full_path):
            raise StorageError(f"File does not exist: {path}")
        
        return full_path
    
    def upload(self, local_path: str, dest_path: str) -> None:
        """Copy a local file to the storage location."""
        full_dest = self._full_path(dest_path)
        
        try:
            dest_dir = os.path.dirname(full_dest)
            if dest_dir:
                os.makedirs(dest_dir, exist_ok=True)
            shutil.copy2(local_path, full_dest)
        except OSError as e:
            raise StorageError(f"Failed to copy file to {dest_path}: {e}")
    
    def create_folder(self, path: str) -> None:
        """Create a folder (and parents) under the root."""
        try:
            os.makedirs(self._full_path(path), exist_ok=True)
        except OSError as e:
            raise StorageError(f"Failed to create folder {path}: {e}")
    
    def sanitize_filename(self, name: str) -> str:
        """Sanitize a file or folder name for local filesystem.
        
        Removes characters that are invalid on most filesystems:
        / \\ : * ? \" < > |
        """
        name = name.replace('/', '-')
        name = name.replace('\\', '-')
        name = name.replace(':', '-')
        name = name.replace('*', '')
        name = name.replace('?', '')
        name = name.replace('"', "'")
        name = name.replace('<', '')
        name = name.replace('>', '')
        name = name.replace('|', '-')
        
        # Remove leading/trailing whitespace and dots
        name = name.strip().strip('.')
        
        name = re.sub(r'\s+', ' ', name)
        name = re.sub(r'-+', '-', name)
        
        if len(name) > 100:
            name = name[:100].strip()
        
        return name
