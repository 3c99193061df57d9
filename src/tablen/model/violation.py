"""Violation — the normalized scanner output for a single detected issue."""

from __future__ import annotations

from dataclasses import dataclass

from . import ViolationKind


@dataclass(frozen=True, slots=True)
class Location:
    """Inclusive line range for a violation."""

    line_start: int
    line_end: int

    def render(self) -> str:
        if self.line_start == self.line_end:
            return str(self.line_start)
        return f"{self.line_start} - {self.line_end}"


@dataclass(frozen=True, slots=True)
class Violation:
    """Immutable style problem reported for one file.

    ``location`` is ``None`` only for ``IO_ERROR`` records, which refer to
    the file as a whole.
    """

    path: str
    kind: ViolationKind
    message: str
    location: Location | None = None

    def render(self) -> str:
        """Render the report line, e.g. ``src/a.c(3 - 5): Tabs Found!``."""
        if self.location is None:
            return self.message
        return f"{self.path}({self.location.render()}): {self.message}"

    # ── serialisation ───────────────────────────────────────────────

    def to_dict(self) -> dict:
        d: dict = {
            "path": self.path,
            "kind": self.kind.value,
            "message": self.message,
        }
        if self.location is not None:
            d["location"] = {
                "line_start": self.location.line_start,
                "line_end": self.location.line_end,
            }
        return d


def tab_violation(path: str, start: int, stop: int) -> Violation:
    message = "Tab Found!" if start == stop else "Tabs Found!"
    return Violation(
        path=path,
        kind=ViolationKind.TAB_FOUND,
        message=message,
        location=Location(line_start=start, line_end=stop),
    )


def line_length_violation(path: str, line: int, max_line_length: int) -> Violation:
    return Violation(
        path=path,
        kind=ViolationKind.LINE_TOO_LONG,
        message=f"Line is greater than {max_line_length} characters!",
        location=Location(line_start=line, line_end=line),
    )


def io_error_violation(path: str) -> Violation:
    return Violation(
        path=path,
        kind=ViolationKind.IO_ERROR,
        message=f"Unable to process file: {path}",
    )
