"""
Shared utilities for VELLUM.

Common functionality used across contexts:
- Logger setup with provenance tracking
- Date formatting for entry headers
- Text processing helpers
"""
