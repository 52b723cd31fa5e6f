"""ArchiveSort - Application state and configuration."""

import os
import re
import threading
from contextlib import contextmanager
from typing import Iterator, Optional, Any, TYPE_CHECKING

if TYPE_CHECKING:
    import argparse

__version__ = "0.1.0"

DEFAULT_OUTPUT_ROOT = "categorized"
DEFAULT_MAX_DEPTH = 5


def _strip_rich_markup(text: str) -> str:
    """Remove Rich markup tags like [red], [/red], [bold], etc."""
    return re.sub(r'\[/?[a-zA-Z_]+\]', '', text)


class BusyError(Exception):
    """Raised when a sort run is requested while another one is in flight."""
    
    def __init__(self, message: str = "Another archive is currently being "
                 "processed. Please try again later.") -> None:
        super().__init__(message)


class ArchiveSort:
    """Central configuration and state for ArchiveSort."""
    
    # CLI config options
    use_llm: bool = True
    dry_run: bool = False
    llm_provider_name: str = "mistral"
    output_root: str = DEFAULT_OUTPUT_ROOT
    max_depth: int = DEFAULT_MAX_DEPTH
    
    # UI app reference (None = CLI mode)
    _app: Optional[Any] = None
    
    # Progress tracking
    _total_files: int = 0
    _current_file: int = 0
    
    # At most one run per process, no queue
    _run_lock = threading.Lock()
    
    @classmethod
    def configure(cls, args: "argparse.Namespace") -> None:
        """Initialize configuration from parsed CLI args and environment."""
        cls.use_llm = not getattr(args, 'no_llm', False)
        cls.dry_run = getattr(args, 'dry_run', False)
        cls.llm_provider_name = os.environ.get('LLM_PROVIDER', 'mistral')
        cls.output_root = (getattr(args, 'output', None)
                           or os.environ.get('OUTPUT', DEFAULT_OUTPUT_ROOT))
        cls.max_depth = int(os.environ.get('ARCHIVESORT_MAX_DEPTH', DEFAULT_MAX_DEPTH))
    
    @classmethod
    @contextmanager
    def exclusive_run(cls) -> Iterator[None]:
        """Hold the process-wide run lock for the duration of a sort run.
        
        Raises:
            BusyError: If another run currently holds the lock
        """
        if not cls._run_lock.acquire(blocking=False):
            raise BusyError()
        try:
            yield
        finally:
            cls._run_lock.release()
    
    @classmethod
    def is_busy(cls) -> bool:
        """Check whether a sort run is in flight."""
        return cls._run_lock.locked()
    
    @classmethod
    def set_app(cls, app: Any) -> None:
        """Set the Textual app reference for UI updates."""
        cls._app = app
    
    @classmethod
    def print_left(cls, line1: str, line2: str) -> None:
        """Add entry to category log (left panel in TUI, stdout in CLI)."""
        if cls._app is not None:
            cls._app.call_from_thread(cls._app.add_filing, line1, line2)
        else:
            print(_strip_rich_markup(line1))
            print(_strip_rich_markup(line2))
    
    @classmethod
    def print_right(cls, message: str) -> None:
        """Add line to debug log (right panel in TUI, stdout in CLI)."""
        if cls._app is not None:
            cls._app.call_from_thread(cls._app.add_debug, message)
        else:
            print(_strip_rich_markup(message))
    
    @classmethod
    def set_progress(cls, current: int, total: int) -> None:
        """Update progress bar and label."""
        cls._current_file = current
        cls._total_files = total
        if cls._app is not None:
            cls._app.call_from_thread(cls._app.set_progress, current, total)
    
    @classmethod
    def set_total_files(cls, total: int) -> None:
        """Set total file count for progress tracking."""
        cls._total_files = total
        cls._current_file = 0
        if cls._app is not None:
            cls._app.call_from_thread(cls._app.set_progress, 0, total)
