"""Sort workflow: classify, consolidate and materialize one input folder."""

import os
import uuid
from dataclasses import dataclass, field
from datetime import datetime
from typing import Dict, List, Optional, TYPE_CHECKING

from archivesort import ArchiveSort
from consolidation import consolidate, member_bucket, ConsolidationReport
from storage import LocalDriver, StorageError, create_storage
from .classification import collect_files, classify_files
from .materialize import MaterializeResult, organize_files_by_category, list_results

if TYPE_CHECKING:
    from models import LLM


@dataclass
class SortResult:
    """Outcome of one sort run.
    
    Attributes:
        session_id: Identifier of the run's output folder
        output_path: Absolute path of the session output folder (None on dry run)
        raw_categories: Labels as produced by classification
        categories: Consolidated {bucket: paths}
        materialized: Copy counts (None on dry run)
    """
    session_id: str
    output_path: Optional[str]
    raw_categories: Dict[str, List[str]] = field(default_factory=dict)
    categories: Dict[str, List[str]] = field(default_factory=dict)
    materialized: Optional[MaterializeResult] = None


def new_session_id() -> str:
    return str(uuid.uuid4())


def _check_session_id(session_id: str) -> None:
    try:
        uuid.UUID(session_id)
    except ValueError:
        raise StorageError(f"Invalid session id: {session_id}")


def session_path(session_id: str, output_root: Optional[str] = None) -> str:
    """Return the output folder for a session.
    
    Raises:
        StorageError: If session_id is not a valid session identifier
    """
    _check_session_id(session_id)
    return os.path.join(output_root or ArchiveSort.output_root, session_id)


def _create_llm() -> Optional["LLM"]:
    """Create the configured LLM, or None to use file-type labels only."""
    from models import create_llm
    
    try:
        return create_llm(ArchiveSort.llm_provider_name)
    except KeyError as e:
        ArchiveSort.print_right(
            f"[yellow]No API key for {ArchiveSort.llm_provider_name} ({e}), "
            "using file types only[/yellow]"
        )
        return None


def _log_consolidation(report: ConsolidationReport) -> None:
    """Log label renames (debug panel) and bucket contents (category panel)."""
    ArchiveSort.print_right(
        f"Consolidated {len(report.entries)} labels into "
        f"{len(report.categories)} categories"
    )
    for label, bucket in report.renames():
        ArchiveSort.print_right(f"  '{label}' -> '{bucket}'")
    
    sources: Dict[str, List[str]] = {}
    for cluster in report.clusters:
        for index in cluster.members:
            entry = report.entries[index]
            sources.setdefault(member_bucket(cluster, entry), []).append(entry.label)
    
    timestamp = datetime.now().strftime("%H:%M")
    for category in report.categories:
        count = len(category.paths)
        ArchiveSort.print_left(
            f"{timestamp} [bold]{category.name}[/bold] ({count} file{'s' if count != 1 else ''})",
            f"  from: {', '.join(sources.get(category.name, []))}"
        )


def sort_folder(input_path: str, output_root: Optional[str] = None,
                llm: Optional["LLM"] = None,
                session_id: Optional[str] = None) -> SortResult:
    """Sort every file under input_path into consolidated category folders.
    
    Only one run executes per process at a time.
    
    Args:
        input_path: Folder holding the extracted files (path or 'local:' URI)
        output_root: Parent of the session folder (default ArchiveSort.output_root)
        llm: LLM to classify with; created from configuration when None and
             ArchiveSort.use_llm is set
        session_id: Reuse a session id instead of generating one
        
    Raises:
        BusyError: If another run is in progress
        StorageError: If session_id is invalid, the input folder can't be read
                      or output can't be created
    """
    session_id = session_id or new_session_id()
    _check_session_id(session_id)
    
    with ArchiveSort.exclusive_run():
        input_driver = create_storage(input_path)
        
        files = collect_files(input_driver, ArchiveSort.max_depth)
        if not files:
            ArchiveSort.print_right("No files found in input folder")
            return SortResult(session_id=session_id, output_path=None)
        ArchiveSort.print_right(f"Found {len(files)} files in {input_driver.display_name}")
        
        if llm is None and ArchiveSort.use_llm:
            llm = _create_llm()
        
        raw = classify_files(input_driver, files, llm)
        report = consolidate(raw)
        _log_consolidation(report)
        
        result = SortResult(
            session_id=session_id,
            output_path=None,
            raw_categories=raw,
            categories=report.as_dict(),
        )
        if ArchiveSort.dry_run:
            ArchiveSort.print_right("Dry run: no files copied")
            return result
        
        output_driver = LocalDriver(session_path(session_id, output_root), create=True)
        result.output_path = output_driver.root_path
        result.materialized = organize_files_by_category(
            result.categories, input_driver, output_driver
        )
        ArchiveSort.print_right(
            f"Copied {result.materialized.copied} files to {output_driver.display_name}"
            f" ({result.materialized.skipped} skipped, {result.materialized.failed} failed)"
        )
        return result


def get_results(session_id: str, output_root: Optional[str] = None) -> Dict[str, List[str]]:
    """Return {category folder: file names} for a finished session.
    
    Raises:
        StorageError: If the session doesn't exist
    """
    path = session_path(session_id, output_root)
    if not os.path.isdir(path):
        raise StorageError(f"Session not found: {session_id}")
    return list_results(LocalDriver(path))
