"""Workflow layer for archivesort.

Contains the stages of a sort run:
- Classification: Walk the input folder and label each file
- Materialization: Copy files into one folder per category
- Sorting: Run classification, consolidation and materialization together
"""

from .classification import (
    MAX_CONTENT_CHARS,
    UNCATEGORIZED,
    ERROR_PROCESSING,
    fallback_category,
    needs_content_analysis,
    collect_files,
    categorize_file,
    classify_files,
)
from .materialize import (
    MaterializeResult,
    compute_sha256,
    bucket_folder_name,
    generate_dest_filename,
    organize_files_by_category,
    list_results,
)
from .sorting import (
    SortResult,
    new_session_id,
    session_path,
    sort_folder,
    get_results,
)


__all__ = [
    # Classification
    'MAX_CONTENT_CHARS',
    'UNCATEGORIZED',
    'ERROR_PROCESSING',
    'fallback_category',
    'needs_content_analysis',
    'collect_files',
    'categorize_file',
    'classify_files',
    
    # Materialization
    'MaterializeResult',
    'compute_sha256',
    'bucket_folder_name',
    'generate_dest_filename',
    'organize_files_by_category',
    'list_results',
    
    # Sorting workflow
    'SortResult',
    'new_session_id',
    'session_path',
    'sort_folder',
    'get_results',
]
