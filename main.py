#!/usr/bin/env python3
"""ArchiveSort - Sort the files of an extracted archive into category folders."""

import argparse
import os
import sys

from archivesort import ArchiveSort, BusyError
from storage import StorageError
from workflows import new_session_id, session_path, sort_folder, get_results


def run_processing(inbox: str, session_id: str) -> None:
    """Run one sort and report where the results went.
    
    Args:
        inbox: Input folder (path or 'local:' URI)
        session_id: Session id for the output folder
    """
    ArchiveSort.print_right(
        f"Using LLM provider: {ArchiveSort.llm_provider_name}" if ArchiveSort.use_llm
        else "LLM disabled: categorizing by file type"
    )
    if ArchiveSort.dry_run:
        ArchiveSort.print_right("Dry run: enabled (nothing will be copied)")
    
    result = sort_folder(inbox, session_id=session_id)
    
    if result.output_path:
        ArchiveSort.print_right(f"Session: {result.session_id}")
        ArchiveSort.print_right(f"Results in: {result.output_path}")
    ArchiveSort.print_right("\n[green]Processing complete![/green]")


def main(inbox: str = None) -> int:
    """Main entry point for a sort run (CLI mode).
    
    Args:
        inbox: Input folder (overrides INBOX env var if provided)
        
    Returns:
        Process exit code
    """
    inbox_path = inbox or os.environ.get('INBOX')
    if not inbox_path:
        print("Error: INBOX not specified")
        print("Use --inbox or set INBOX environment variable")
        print("Example: --inbox=extracted/upload1")
        return 1
    
    try:
        run_processing(inbox_path, new_session_id())
    except BusyError as e:
        print(f"Error: {e}")
        return 2
    except StorageError as e:
        print(f"Error: {e}")
        return 1
    return 0


def main_tui(inbox: str = None) -> int:
    """Main entry point for a sort run (TUI mode).
    
    Args:
        inbox: Input folder (overrides INBOX env var if provided)
    """
    from textui import ArchiveSortApp
    
    inbox_path = inbox or os.environ.get('INBOX')
    if not inbox_path:
        print("Error: INBOX not specified")
        print("Use --inbox or set INBOX environment variable")
        print("Example: --inbox=extracted/upload1")
        return 1
    
    session_id = new_session_id()
    destination = ("(dry run)" if ArchiveSort.dry_run
                   else os.path.abspath(session_path(session_id)))
    
    def process_func():
        run_processing(inbox_path, session_id)
    
    app = ArchiveSortApp(
        source=os.path.abspath(inbox_path),
        destination=destination,
        process_func=process_func
    )
    app.run()
    return 0


def show_results(session_id: str) -> int:
    """Print the category folders and files of a finished session."""
    try:
        results = get_results(session_id)
    except StorageError as e:
        print(f"Error: {e}")
        return 1
    
    for category, files in results.items():
        print(f"{category}/ ({len(files)} files)")
        for name in files:
            print(f"  {name}")
    return 0


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Archive sorting utility")
    parser.add_argument("--inbox", type=str,
                       help="Folder with the extracted files (or INBOX env var)")
    parser.add_argument("--output", type=str,
                       help="Parent folder for session output (or OUTPUT env var)")
    parser.add_argument("--no-llm", action="store_true",
                       help="Categorize by file type only, without the LLM")
    parser.add_argument("--dry-run", action="store_true",
                       help="Classify and consolidate, but copy nothing")
    parser.add_argument("--results", type=str, metavar="SESSION",
                       help="List the categorized files of a finished session")
    parser.add_argument("--cli", action="store_true",
                       help="Use CLI output instead of TextUI (default is TextUI)")
    args = parser.parse_args()
    
    ArchiveSort.configure(args)
    
    if args.results:
        sys.exit(show_results(args.results))
    elif args.cli:
        sys.exit(main(inbox=args.inbox))
    else:
        sys.exit(main_tui(inbox=args.inbox))
