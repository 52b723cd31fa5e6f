"""Shared helpers for archivesort."""
