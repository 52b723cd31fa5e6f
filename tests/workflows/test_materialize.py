"""Tests for copying consolidated categories into folders."""

import os

import pytest

from storage import LocalDriver
from workflows import (
    bucket_folder_name,
    compute_sha256,
    generate_dest_filename,
    list_results,
    organize_files_by_category,
)


@pytest.fixture
def drivers(temp_dir):
    """Input and output drivers in sibling folders."""
    input_root = os.path.join(temp_dir, "in")
    output_root = os.path.join(temp_dir, "out")
    return LocalDriver(input_root, create=True), LocalDriver(output_root, create=True)


class TestHelpers:
    """Tests for filename helpers."""
    
    def test_generate_dest_filename(self):
        assert generate_dest_filename("notes.txt", "a1b2c3d4e5f6") == (
            "notes.txt", "notes [a1b2c3d4].txt"
        )
    
    def test_bucket_folder_name_sanitized(self, drivers):
        _, output = drivers
        assert bucket_folder_name("Bill/Receipt", output) == "Bill-Receipt"
    
    def test_bucket_folder_name_empty(self, drivers):
        _, output = drivers
        assert bucket_folder_name("...", output) == "Uncategorized"
    
    def test_compute_sha256(self, temp_dir, make_file):
        path = make_file(temp_dir, "x.txt", "abc")
        assert compute_sha256(path) == (
            "ba7816bf8f01cfea414140de5dae2223b00361a396177a9cb410ff61f20015ad"
        )


class TestOrganizeFilesByCategory:
    """Tests for organize_files_by_category()."""
    
    def test_copies_into_bucket_folders(self, drivers, make_file):
        input_driver, output_driver = drivers
        make_file(input_driver.root_path, "a.txt", "A")
        make_file(input_driver.root_path, "sub/b.jpg", "B")
        
        result = organize_files_by_category(
            {"Invoice": ["a.txt"], "Images": [os.path.join("sub", "b.jpg")]},
            input_driver, output_driver
        )
        
        assert result.copied == 2
        assert result.failed == 0
        assert output_driver.read_text("Invoice/a.txt") == "A"
        assert output_driver.file_exists("Images/b.jpg")
    
    def test_name_collision_gets_hash_suffix(self, drivers, make_file):
        input_driver, output_driver = drivers
        make_file(input_driver.root_path, "x/notes.txt", "first")
        make_file(input_driver.root_path, "y/notes.txt", "second")
        
        result = organize_files_by_category(
            {"Notes": [os.path.join("x", "notes.txt"), os.path.join("y", "notes.txt")]},
            input_driver, output_driver
        )
        
        assert result.copied == 2
        files = sorted(f.name for f in output_driver.list_files("Notes"))
        assert len(files) == 2
        assert "notes.txt" in files
        assert any(name.startswith("notes [") for name in files)
    
    def test_collision_hashes_each_file_once(self, drivers, make_file, monkeypatch):
        input_driver, output_driver = drivers
        first = make_file(input_driver.root_path, "x/notes.txt", "first")
        second = make_file(input_driver.root_path, "y/notes.txt", "second")
        hashed = []
        
        def counting_sha256(path):
            hashed.append(path)
            return compute_sha256(path)
        
        monkeypatch.setattr("workflows.materialize.compute_sha256", counting_sha256)
        organize_files_by_category(
            {"Notes": [os.path.join("x", "notes.txt"), os.path.join("y", "notes.txt")]},
            input_driver, output_driver
        )
        
        existing = os.path.join(output_driver.root_path, "Notes", "notes.txt")
        assert hashed == [first, second, existing]
        suffixed = f"notes [{compute_sha256(second)[:8]}].txt"
        assert output_driver.file_exists(f"Notes/{suffixed}")
    
    def test_identical_content_skipped(self, drivers, make_file):
        input_driver, output_driver = drivers
        make_file(input_driver.root_path, "x/same.txt", "same")
        make_file(input_driver.root_path, "y/same.txt", "same")
        
        result = organize_files_by_category(
            {"Notes": [os.path.join("x", "same.txt"), os.path.join("y", "same.txt")]},
            input_driver, output_driver
        )
        
        assert (result.copied, result.skipped) == (1, 1)
    
    def test_copy_failure_does_not_abort(self, drivers, make_file):
        input_driver, output_driver = drivers
        make_file(input_driver.root_path, "ok.txt", "fine")
        
        result = organize_files_by_category(
            {"Text": ["missing.txt", "ok.txt"]},
            input_driver, output_driver
        )
        
        assert result.failed == 1
        assert result.copied == 1
        assert output_driver.file_exists("Text/ok.txt")


class TestListResults:
    """Tests for list_results()."""
    
    def test_lists_folders_and_files(self, drivers, make_file):
        _, output_driver = drivers
        make_file(output_driver.root_path, "Images/b.png")
        make_file(output_driver.root_path, "Invoice/a.pdf")
        
        assert list_results(output_driver) == {
            "Images": ["b.png"],
            "Invoice": ["a.pdf"],
        }
