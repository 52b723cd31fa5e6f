"""Copy categorized files into one folder per bucket."""

import hashlib
import os
from dataclasses import dataclass
from typing import Dict, List, Mapping, Sequence, Tuple, TYPE_CHECKING

from archivesort import ArchiveSort
from storage import StorageError

if TYPE_CHECKING:
    from storage import StorageDriver


def compute_sha256(file_path: str) -> str:
    """Compute SHA256 hash of a file."""
    sha256_hash = hashlib.sha256()
    with open(file_path, "rb") as f:
        for chunk in iter(lambda: f.read(8192), b""):
            sha256_hash.update(chunk)
    return sha256_hash.hexdigest()


@dataclass
class MaterializeResult:
    """Counts for one materialization pass."""
    copied: int = 0
    skipped: int = 0
    failed: int = 0


def bucket_folder_name(bucket: str, driver: "StorageDriver") -> str:
    """Folder name for a bucket; empty names fall back to 'Uncategorized'."""
    return driver.sanitize_filename(bucket) or "Uncategorized"


def generate_dest_filename(filename: str, sha256: str) -> Tuple[str, str]:
    """Generate base and collision-safe destination filenames.
    
    Returns:
        Tuple of (base_name, hash_name) where:
        - base_name: "notes.txt"
        - hash_name: "notes [a1b2c3d4].txt"
    """
    base, ext = os.path.splitext(filename)
    return (filename, f"{base} [{sha256[:8]}]{ext}")


def _copy_file(local_path: str, folder: str, output_driver: "StorageDriver") -> bool:
    """Copy one file into a bucket folder.
    
    Returns:
        True if copied, False if an identical file is already there
    """
    file_hash = compute_sha256(local_path)
    base_name, hash_name = generate_dest_filename(os.path.basename(local_path), file_hash)
    base_dest = f"{folder}/{base_name}"
    hash_dest = f"{folder}/{hash_name}"
    
    if not output_driver.file_exists(base_dest):
        output_driver.upload(local_path, base_dest)
        return True
    
    existing = output_driver.local_path(base_dest)
    if compute_sha256(existing) == file_hash:
        return False
    if output_driver.file_exists(hash_dest):
        return False
    
    # Name collision with different content
    output_driver.upload(local_path, hash_dest)
    return True


def organize_files_by_category(
    buckets: Mapping[str, Sequence[str]],
    input_driver: "StorageDriver",
    output_driver: "StorageDriver"
) -> MaterializeResult:
    """Create one folder per bucket and copy its files in.
    
    A failed copy is logged and counted; the remaining files are still
    copied.
    
    Args:
        buckets: Consolidated {bucket name: paths relative to input root}
        input_driver: Driver for the folder the files come from
        output_driver: Driver for the session output folder
    """
    result = MaterializeResult()
    
    for bucket, paths in buckets.items():
        folder = bucket_folder_name(bucket, output_driver)
        output_driver.create_folder(folder)
        
        for path in paths:
            try:
                local_path = input_driver.local_path(path)
                if _copy_file(local_path, folder, output_driver):
                    result.copied += 1
                else:
                    result.skipped += 1
                    ArchiveSort.print_right(f"Already in {folder}: {os.path.basename(path)}")
            except (StorageError, OSError) as e:
                result.failed += 1
                ArchiveSort.print_right(f"[red]✗ Failed to copy {path}: {e}[/red]")
    
    return result


def list_results(output_driver: "StorageDriver") -> Dict[str, List[str]]:
    """Return {bucket folder: file names} for a finished session."""
    return {
        folder.name: [f.name for f in output_driver.list_files(folder.path)]
        for folder in output_driver.list_folders()
    }
