"""
Utils module - Shared utilities for blogcraft

This module provides common utilities used across the project:
- text_processing: Text manipulation and word counting
- io_helpers: File I/O with proper encoding
- logging_helper: Consistent logging setup
- paths: Common path definitions
- config: YAML style configuration and post front matter
"""
