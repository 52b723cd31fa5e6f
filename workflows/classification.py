"""Classification stage: walk the input folder and label every file.

Text-like files and PDFs are labeled by their content through the LLM layer
when one is available; everything else gets a label from its file type.
The result is the raw {label: [paths]} mapping that consolidation consumes.
"""

import os
from typing import Dict, List, Optional, TYPE_CHECKING

from archivesort import ArchiveSort
from models import LLMError
from storage import StorageError

if TYPE_CHECKING:
    from models import LLM
    from storage import FileInfo, StorageDriver


# At most this much text is sent to the model per file
MAX_CONTENT_CHARS = 4000

UNCATEGORIZED = "Uncategorized"
ERROR_PROCESSING = "Error_Processing"

TEXT_EXTENSIONS = {'.txt', '.md', '.json', '.csv', '.log', '.xml', '.yaml', '.yml'}
CODE_EXTENSIONS = {
    '.js', '.py', '.html', '.css', '.ts', '.java', '.c', '.cpp', '.go',
    '.rb', '.sh',
}
IMAGE_EXTENSIONS = {
    '.jpg', '.jpeg', '.png', '.gif', '.bmp', '.tiff', '.tif', '.webp',
    '.svg', '.heic',
}
SPREADSHEET_EXTENSIONS = {'.xls', '.xlsx', '.ods'}
PRESENTATION_EXTENSIONS = {'.ppt', '.pptx', '.odp'}
WORD_EXTENSIONS = {'.doc', '.docx', '.odt', '.rtf'}


def fallback_category(filename: str) -> str:
    """Return a category label based on the file type alone."""
    ext = os.path.splitext(filename)[1].lower()
    name = filename.lower()
    
    if ext in SPREADSHEET_EXTENSIONS:
        return "Spreadsheet"
    if ext in PRESENTATION_EXTENSIONS:
        return "Presentation"
    if ext in WORD_EXTENSIONS:
        return "Word Document"
    if ext in IMAGE_EXTENSIONS:
        if 'screenshot' in name or 'screen shot' in name:
            return "Screenshot"
        if any(word in name for word in ('receipt', 'invoice', 'bill')):
            return "Receipt/Invoice Image"
        return "Image"
    if ext in CODE_EXTENSIONS:
        return "Code"
    if ext in TEXT_EXTENSIONS:
        return "Text"
    if ext == '.pdf':
        return "Documents"
    return "Other"


def needs_content_analysis(filename: str) -> bool:
    """Check if a file should be labeled by its content."""
    ext = os.path.splitext(filename)[1].lower()
    return ext in TEXT_EXTENSIONS or ext == '.pdf'


def collect_files(driver: "StorageDriver",
                  max_depth: Optional[int] = None) -> List["FileInfo"]:
    """List all files under the driver root, at most max_depth folders deep."""
    return driver.list_files(recursive=True, max_depth=max_depth)


def categorize_file(driver: "StorageDriver", file_info: "FileInfo",
                    llm: Optional["LLM"] = None) -> str:
    """Return the raw category label for one file.
    
    Classifier failures become the "Uncategorized" label and unreadable
    files become "Error_Processing"; neither aborts the run.
    """
    if llm is None or not needs_content_analysis(file_info.name):
        return fallback_category(file_info.name)
    
    try:
        if file_info.name.lower().endswith('.pdf'):
            return llm.categorize_document(driver.local_path(file_info.path))
        content = driver.read_text(file_info.path, max_chars=MAX_CONTENT_CHARS)
        return llm.categorize_text(content, filename=file_info.name)
    except StorageError as e:
        ArchiveSort.print_right(f"[red]Could not read {file_info.path}: {e}[/red]")
        return ERROR_PROCESSING
    except ValueError as e:
        ArchiveSort.print_right(f"{file_info.name}: {e}. Using file type.")
        return fallback_category(file_info.name)
    except LLMError as e:
        ArchiveSort.print_right(f"[red]Classifier error for {file_info.path}: {e}[/red]")
        return UNCATEGORIZED


def classify_files(driver: "StorageDriver", files: List["FileInfo"],
                   llm: Optional["LLM"] = None) -> Dict[str, List[str]]:
    """Label every file and group paths by raw label.
    
    Returns:
        Dict mapping raw label -> file paths (relative to the driver root),
        both in the order files were listed
    """
    categories: Dict[str, List[str]] = {}
    ArchiveSort.set_total_files(len(files))
    
    for i, file_info in enumerate(files, 1):
        ArchiveSort.set_progress(i, len(files))
        label = categorize_file(driver, file_info, llm)
        ArchiveSort.print_right(f"{file_info.path} → {label}")
        categories.setdefault(label, []).append(file_info.path)
    
    return categories
