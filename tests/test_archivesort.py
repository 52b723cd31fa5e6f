"""Tests for ArchiveSort configuration, output routing and the run guard."""

import argparse

import pytest

from archivesort import ArchiveSort, BusyError, DEFAULT_OUTPUT_ROOT


class TestConfigure:
    """Tests for ArchiveSort.configure()."""
    
    def test_defaults(self, monkeypatch):
        for var in ("LLM_PROVIDER", "OUTPUT", "ARCHIVESORT_MAX_DEPTH"):
            monkeypatch.delenv(var, raising=False)
        monkeypatch.setattr(ArchiveSort, "output_root", "elsewhere")
        
        ArchiveSort.configure(argparse.Namespace())
        
        assert ArchiveSort.use_llm is True
        assert ArchiveSort.dry_run is False
        assert ArchiveSort.llm_provider_name == "mistral"
        assert ArchiveSort.output_root == DEFAULT_OUTPUT_ROOT
        assert ArchiveSort.max_depth == 5
    
    def test_args_and_environment(self, monkeypatch):
        monkeypatch.setenv("LLM_PROVIDER", "openai")
        monkeypatch.setenv("OUTPUT", "from-env")
        monkeypatch.setenv("ARCHIVESORT_MAX_DEPTH", "3")
        monkeypatch.setattr(ArchiveSort, "output_root", DEFAULT_OUTPUT_ROOT)
        
        ArchiveSort.configure(argparse.Namespace(no_llm=True, dry_run=True, output="out"))
        
        assert ArchiveSort.use_llm is False
        assert ArchiveSort.dry_run is True
        assert ArchiveSort.llm_provider_name == "openai"
        assert ArchiveSort.output_root == "out"
        assert ArchiveSort.max_depth == 3


class TestExclusiveRun:
    """Tests for the process-wide run guard."""
    
    def test_second_run_rejected(self):
        with ArchiveSort.exclusive_run():
            assert ArchiveSort.is_busy()
            with pytest.raises(BusyError, match="try again later"):
                with ArchiveSort.exclusive_run():
                    pass
        assert not ArchiveSort.is_busy()
    
    def test_released_on_error(self):
        with pytest.raises(RuntimeError):
            with ArchiveSort.exclusive_run():
                raise RuntimeError("boom")
        
        with ArchiveSort.exclusive_run():
            assert ArchiveSort.is_busy()


class TestOutput:
    """Tests for CLI output routing."""
    
    def test_print_right_strips_markup(self, capsys):
        ArchiveSort.print_right("[red]Processing: a.txt[/red]")
        assert capsys.readouterr().out == "Processing: a.txt\n"
    
    def test_print_left_two_lines(self, capsys):
        ArchiveSort.print_left("[bold]Invoice[/bold]", "  from: invoice")
        assert capsys.readouterr().out == "Invoice\n  from: invoice\n"
    
    def test_routes_to_app_when_set(self, monkeypatch):
        calls = []
        
        class App:
            def call_from_thread(self, func, *args):
                calls.append((func.__name__, args))
            
            def add_debug(self, message):
                pass
            
            def set_progress(self, current, total):
                pass
        
        monkeypatch.setattr(ArchiveSort, "_app", App())
        ArchiveSort.print_right("hello")
        ArchiveSort.set_progress(2, 5)
        
        assert calls == [("add_debug", ("hello",)), ("set_progress", (2, 5))]
