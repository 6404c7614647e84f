"""Validation and text extraction for untrusted résumé uploads."""
