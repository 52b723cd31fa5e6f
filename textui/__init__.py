"""TextUI - Textual terminal UI for ArchiveSort.

The sort runs in a worker thread; output reaches the widgets through
ArchiveSort.print_left/print_right, which use call_from_thread.
"""

import threading
from typing import Callable, Optional

from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, Vertical
from textual.widgets import Header, Footer, Static, RichLog, ProgressBar, Label

from archivesort import ArchiveSort, __version__


class RunInfo(Vertical):
    """Top strip: input and output folders, run status and progress."""

    def __init__(self, source: str, destination: str, **kwargs) -> None:
        super().__init__(**kwargs)
        self.source = source
        self.destination = destination

    def compose(self) -> ComposeResult:
        yield Static(f"Input:  {self.source}")
        yield Static(f"Output: {self.destination}")
        with Horizontal(id="run-progress"):
            yield Label("[yellow]Running[/yellow]", id="run-status")
            yield ProgressBar(id="progress-bar", show_eta=False)
            yield Label("0/0 files", id="progress-label")


class ArchiveSortApp(App):
    """Textual app with a category pane and a debug pane."""

    CSS = """
    RunInfo {
        dock: top;
        height: auto;
        padding: 0 1;
        border-bottom: heavy $accent;
    }

    #run-progress {
        height: 1;
    }

    #run-status {
        width: 12;
    }

    #progress-bar {
        width: 1fr;
    }

    #progress-label {
        width: auto;
        min-width: 12;
        text-align: right;
    }

    .pane {
        width: 1fr;
    }

    #categories-pane {
        width: 2fr;
        border-right: heavy $accent;
    }

    .pane-title {
        height: 1;
        background: $accent;
        text-style: bold;
        padding: 0 1;
    }
    """

    BINDINGS = [
        Binding("q", "quit", "Quit"),
    ]

    def __init__(self, source: str = "", destination: str = "",
                 process_func: Optional[Callable[[], None]] = None) -> None:
        super().__init__()
        self.source = source
        self.destination = destination
        self._process_func = process_func

    def compose(self) -> ComposeResult:
        yield Header(show_clock=True)
        yield RunInfo(self.source, self.destination)
        with Horizontal():
            with Vertical(id="categories-pane", classes="pane"):
                yield Static("Categories", classes="pane-title")
                yield RichLog(id="filing-log", markup=True, wrap=True)
            with Vertical(classes="pane"):
                yield Static("Debug log", classes="pane-title")
                yield RichLog(id="debug-log", markup=True, wrap=True)
        yield Footer()

    def on_mount(self) -> None:
        self.title = f"ArchiveSort v{__version__}"
        ArchiveSort.set_app(self)
        if self._process_func:
            threading.Thread(target=self._run_process, daemon=True).start()

    def on_unmount(self) -> None:
        ArchiveSort.set_app(None)

    def _run_process(self) -> None:
        """Worker thread body; reports the outcome in the status label."""
        try:
            self._process_func()
        except Exception as e:
            ArchiveSort.print_right(f"[red]Sort failed: {e}[/red]")
            self.call_from_thread(self.set_status, "[red]Failed[/red]")
        else:
            self.call_from_thread(self.set_status, "[green]Done[/green]")

    def set_status(self, text: str) -> None:
        self.query_one("#run-status", Label).update(text)

    def add_filing(self, line1: str, line2: str) -> None:
        """Add a category entry to the left log."""
        self.query_one("#filing-log", RichLog).write(f"{line1}\n{line2}")

    def add_debug(self, message: str) -> None:
        """Add a debug message to the right log."""
        self.query_one("#debug-log", RichLog).write(message)

    def set_progress(self, current: int, total: int) -> None:
        self.query_one("#progress-bar", ProgressBar).update(total=total, progress=current)
        self.query_one("#progress-label", Label).update(f"{current}/{total} files")
