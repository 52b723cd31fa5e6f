"""Tests for label normalization and significant words."""

import pytest

from consolidation import RawCategoryEntry, normalize_label, significant_words


class TestNormalizeLabel:
    """Tests for normalize_label()."""
    
    def test_lowercases(self):
        assert normalize_label("Invoice") == "invoice"
    
    def test_ampersand_becomes_and(self):
        assert normalize_label("Bills&Receipts") == "bills and receipts"
    
    def test_punctuation_becomes_space(self):
        assert normalize_label("Bill/Receipt") == "bill receipt"
        assert normalize_label("Invoice_2024") == "invoice 2024"
        assert normalize_label("Resume (CV).") == "resume cv"
    
    def test_collapses_and_trims_whitespace(self):
        assert normalize_label("  Meeting \t  Notes \n") == "meeting notes"
    
    def test_punctuation_only_gives_empty(self):
        assert normalize_label("!!! --- ???") == ""
    
    def test_empty(self):
        assert normalize_label("") == ""
    
    def test_unicode_letters_kept(self):
        assert normalize_label("Facture Électricité") == "facture électricité"
    
    @pytest.mark.parametrize("label", [
        "Bills & Receipts_2024!",
        "Document_Screenshot.png_batch",
        "  Résumé / CV  ",
        "Straße & Co.",
        "",
    ])
    def test_idempotent(self, label):
        once = normalize_label(label)
        assert normalize_label(once) == once


class TestSignificantWords:
    """Tests for significant_words()."""
    
    def test_drops_short_tokens(self):
        assert significant_words("q1 report of the year") == {"report", "the", "year"}
    
    def test_set_semantics(self):
        assert significant_words("report report summary") == {"report", "summary"}
    
    def test_empty(self):
        assert significant_words("") == frozenset()


class TestRawCategoryEntry:
    """Tests for the derived fields of RawCategoryEntry."""
    
    def test_derived_fields(self):
        entry = RawCategoryEntry(label="Sales & Marketing Report", paths=("a.txt",))
        assert entry.normalized == "sales and marketing report"
        assert entry.words == {"sales", "and", "marketing", "report"}
    
    def test_immutable(self):
        entry = RawCategoryEntry(label="Invoice", paths=("a.pdf",))
        with pytest.raises(AttributeError):
            entry.label = "Receipt"
