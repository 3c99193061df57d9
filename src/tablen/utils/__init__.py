"""Shared utilities for tablen."""
