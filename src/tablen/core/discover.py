"""File discovery — find source files by extension, skipping ignored directories."""

from __future__ import annotations

import logging
import os
from typing import Iterable, Iterator

from tablen.core.config import ScanConfig

_logger = logging.getLogger(__name__)


def has_valid_extension(name: str, extensions: Iterable[str]) -> bool:
    """Return True if *name*'s suffix is whitelisted.

    The suffix runs from the last ``.`` to the end of *name* and must match an
    entry exactly (case-sensitive). An empty whitelist accepts everything; a
    name without ``.`` never matches a non-empty one.
    """
    exts = tuple(extensions)
    if not exts:
        return True
    pos = name.rfind(".")
    if pos == -1:
        return False
    return name[pos:] in exts


def _list_dir(path: str) -> list[os.DirEntry[str]] | None:
    try:
        with os.scandir(path) as it:
            return list(it)
    except OSError as exc:
        _logger.debug("Skipping unreadable directory %s: %s", path, exc)
        return None


def iter_source_files(cfg: ScanConfig) -> Iterator[str]:
    """Yield regular files under *cfg.root* that pass the extension filter.

    Paths are joined onto the root string as given, so ``./src`` yields
    ``./src/a.c``.

    Depth-first, in directory-enumeration order: a subdirectory's files are
    yielded where the subdirectory appears in its parent's listing. Entry types
    come from ``os.scandir`` metadata, so symlinks are neither followed nor
    yielded, and the ``.``/``..`` pseudo-entries never show up. Directories
    whose bare name is in ``cfg.ignore_dirs`` are not entered. Unreadable
    directories are skipped without error.
    """
    listing = _list_dir(cfg.root)
    if listing is None:
        return
    stack: list[Iterator[os.DirEntry[str]]] = [iter(listing)]

    while stack:
        entry = next(stack[-1], None)
        if entry is None:
            stack.pop()
            continue
        try:
            if entry.is_file(follow_symlinks=False):
                if has_valid_extension(entry.name, cfg.extensions):
                    yield entry.path
            elif entry.is_dir(follow_symlinks=False):
                if entry.name in cfg.ignore_dirs:
                    continue
                sub = _list_dir(entry.path)
                if sub is not None:
                    stack.append(iter(sub))
        except OSError:
            continue
