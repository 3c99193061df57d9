"""Runner — walks the tree, runs the style analyzer per file, builds a ScanReport."""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Iterable

from tablen.analyzers.style import StyleAnalyzer
from tablen.core.config import ScanConfig
from tablen.core.discover import iter_source_files
from tablen.model.report import ScanReport
from tablen.model.violation import Violation

_logger = logging.getLogger(__name__)


def scan_files(files: Iterable[str], cfg: ScanConfig) -> ScanReport:
    """Check *files* and merge their violations in file order.

    With ``cfg.jobs > 1`` files are checked on a bounded thread pool; the
    merged report is identical to the sequential one.
    """
    analyzer = StyleAnalyzer(cfg.max_line_length)
    scanned: list[str] = []
    violations: list[Violation] = []

    if cfg.jobs <= 1:
        for path in files:
            scanned.append(path)
            violations.extend(analyzer.check_file(path))
    else:
        paths = list(files)
        scanned.extend(paths)
        _logger.debug("Checking %d files on %d workers", len(paths), cfg.jobs)
        with ThreadPoolExecutor(max_workers=cfg.jobs) as pool:
            for result in pool.map(analyzer.check_file, paths):
                violations.extend(result)

    _logger.debug(
        "Scanned %d files, %d violations", len(scanned), len(violations)
    )
    return ScanReport(files=scanned, violations=violations, config=cfg.to_dict())


def run_scan(cfg: ScanConfig) -> ScanReport:
    """Discover files under ``cfg.root`` and scan each of them.

    This is the single entry point that wires discovery -> analyzer -> report.
    Per-file problems are recorded as violations; nothing here raises for an
    unreadable file or directory.
    """
    _logger.debug("Scanning %s", cfg.root)
    return scan_files(iter_source_files(cfg), cfg)
