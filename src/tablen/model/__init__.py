"""Enums shared across the scanner and report layers."""

from __future__ import annotations

from enum import Enum


class ViolationKind(str, Enum):
    """Canonical violation identifiers."""

    TAB_FOUND = "tab_found"
    LINE_TOO_LONG = "line_too_long"
    IO_ERROR = "io_error"
