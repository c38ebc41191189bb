"""Utility helpers for Vocabulary Import Workbench."""
