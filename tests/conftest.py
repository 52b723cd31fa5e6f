"""Shared fixtures for archivesort tests."""

import os
import shutil
import tempfile

import pytest

from archivesort import ArchiveSort
from models import LLM, LLMError


class FakeLLM(LLM):
    """LLM stand-in that answers from a {filename: label} table.
    
    Filenames mapped to an exception instance raise it instead.
    """
    
    def __init__(self, answers=None, default="Misc"):
        self.answers = answers or {}
        self.default = default
        self.calls = []
    
    @property
    def name(self):
        return "fake"
    
    def _answer(self, filename):
        self.calls.append(filename)
        answer = self.answers.get(filename, self.default)
        if isinstance(answer, Exception):
            raise answer
        return answer
    
    def categorize_text(self, content, filename=""):
        return self._answer(filename)
    
    def categorize_document(self, pdf_path):
        return self._answer(os.path.basename(pdf_path))


@pytest.fixture
def fake_llm_class():
    return FakeLLM


@pytest.fixture
def llm_error():
    return LLMError("model unavailable")


@pytest.fixture
def temp_dir():
    """Create a temporary directory for testing."""
    dir_path = tempfile.mkdtemp(prefix="archivesort_test_")
    yield dir_path
    shutil.rmtree(dir_path, ignore_errors=True)


@pytest.fixture(autouse=True)
def reset_archivesort(monkeypatch):
    """Keep ArchiveSort class state from leaking between tests."""
    monkeypatch.setattr(ArchiveSort, "use_llm", False)
    monkeypatch.setattr(ArchiveSort, "dry_run", False)
    monkeypatch.setattr(ArchiveSort, "llm_provider_name", "mistral")
    monkeypatch.setattr(ArchiveSort, "max_depth", 5)
    monkeypatch.setattr(ArchiveSort, "_app", None)


@pytest.fixture
def make_file():
    """Return a helper that writes a text file under a root, creating folders."""
    def _make_file(root, rel_path, content="content"):
        path = os.path.join(root, rel_path)
        os.makedirs(os.path.dirname(path), exist_ok=True)
        with open(path, "w", encoding="utf-8") as f:
            f.write(content)
        return path
    return _make_file
