"""Style analyzer — detects tab characters and over-long lines in raw bytes."""

from __future__ import annotations

import logging
from pathlib import Path

from tablen.core.config import DEFAULT_MAX_LINE_LENGTH
from tablen.model.violation import (
    Violation,
    io_error_violation,
    line_length_violation,
    tab_violation,
)

_logger = logging.getLogger(__name__)

_TAB = ord("\t")
_NEWLINE = ord("\n")


def scan_bytes(data: bytes, path: str, max_line_length: int) -> list[Violation]:
    """Scan one file's contents in a single forward pass.

    Consecutive tab-containing lines are coalesced into one range, which is
    emitted when the next line without a tab ends. A trailing newline closes
    the empty last line, so a range still open there is emitted too; without
    a final newline the open range is not reported. Each line reports
    LINE_TOO_LONG at most once, at the first non-tab byte past
    ``max_line_length``. Bytes are not decoded and only ``\\n`` ends a line.
    """
    violations: list[Violation] = []

    line = 1
    count = 0
    tab_start: int | None = None
    tab_stop: int | None = None
    tab_seen = False
    flagged = False

    for byte in data:
        count += 1

        if byte == _TAB:
            tab_seen = True
        elif byte == _NEWLINE:
            if tab_seen:
                if tab_start is None:
                    tab_start = line
                tab_stop = line
            elif tab_start is not None and tab_stop is not None:
                violations.append(tab_violation(path, tab_start, tab_stop))
                tab_start = tab_stop = None

            line += 1
            count = 0
            tab_seen = False
            flagged = False
        elif count > max_line_length and not flagged:
            flagged = True
            violations.append(line_length_violation(path, line, max_line_length))

    if data.endswith(b"\n") and tab_start is not None and tab_stop is not None:
        violations.append(tab_violation(path, tab_start, tab_stop))

    return violations


class StyleAnalyzer:
    """Checks files for literal tabs and lines longer than a maximum.

    A file that cannot be read yields a single IO_ERROR violation instead of
    style violations.
    """

    id: str = "style"
    version: str = "1.0.0"

    def __init__(self, max_line_length: int = DEFAULT_MAX_LINE_LENGTH):
        self.max_line_length = max_line_length

    def check_file(self, path: Path | str) -> list[Violation]:
        rel = str(path)
        try:
            data = Path(path).read_bytes()
        except OSError as exc:
            _logger.debug("Unable to read %s: %s", rel, exc)
            return [io_error_violation(rel)]
        return scan_bytes(data, rel, self.max_line_length)
