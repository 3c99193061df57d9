"""Scan configuration dataclass."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable

DEFAULT_EXTENSIONS: tuple[str, ...] = (".h", ".c", ".hpp", ".cpp")
DEFAULT_MAX_LINE_LENGTH = 120
MIN_LINE_LENGTH = 20


@dataclass(frozen=True)
class ScanConfig:
    """Immutable scan configuration.

    Built once at startup (see ``create``) and passed to the walker and the
    scanner. ``root`` is kept exactly as given so reported paths keep its
    spelling (e.g. a leading ``./``). An empty ``extensions`` tuple accepts
    every regular file.
    """

    root: str
    ignore_dirs: frozenset[str] = frozenset()
    extensions: tuple[str, ...] = DEFAULT_EXTENSIONS
    max_line_length: int = DEFAULT_MAX_LINE_LENGTH
    jobs: int = 1

    @classmethod
    def create(
        cls,
        root: str | Path,
        *,
        extensions: Iterable[str] | None = None,
        ignore_dirs: Iterable[str] = (),
        max_line_length: int | str = DEFAULT_MAX_LINE_LENGTH,
        jobs: int = 1,
    ) -> ScanConfig:
        """Normalize raw settings into a ``ScanConfig``.

        ``extensions=None`` selects the defaults; pass an empty iterable to
        scan every file. The line length is clamped up to ``MIN_LINE_LENGTH``.
        """
        exts = DEFAULT_EXTENSIONS if extensions is None else tuple(extensions)
        return cls(
            root=os.fspath(root),
            ignore_dirs=frozenset(ignore_dirs),
            extensions=exts,
            max_line_length=clamp_line_length(max_line_length),
            jobs=max(1, int(jobs)),
        )

    def to_dict(self) -> dict:
        return {
            "root": self.root,
            "ignore_dirs": sorted(self.ignore_dirs),
            "extensions": list(self.extensions),
            "max_line_length": self.max_line_length,
        }


def clamp_line_length(value: int | str) -> int:
    """Parse *value* as an integer and floor-clamp it to ``MIN_LINE_LENGTH``.

    Raises ``ValueError`` for non-integer input.
    """
    n = int(value)
    return max(n, MIN_LINE_LENGTH)
