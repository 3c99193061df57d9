"""Centralized exit-code contract for the CLI.

Code  Meaning
----  -------
  0   Success — no files were scanned
  1   Violation — files were scanned, or violations / unreadable files found
  2   Error — usage error, help requested, bad option value
"""

from __future__ import annotations

from enum import IntEnum


class ExitCode(IntEnum):
    SUCCESS = 0
    VIOLATION = 1
    ERROR = 2
