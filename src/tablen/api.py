"""
tablen.api
==========

Programmatic entrypoint for using tablen without the CLI.

Usage::

    from tablen.api import scan_project

    report, report_dict = scan_project("src", max_line_length=100)
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Iterable

from tablen.contracts.load import validate_instance
from tablen.core.config import DEFAULT_MAX_LINE_LENGTH, ScanConfig
from tablen.core.runner import run_scan
from tablen.model.report import ScanReport


def scan_project(
    root: str | Path,
    *,
    extensions: Iterable[str] | None = None,
    ignore_dirs: Iterable[str] = (),
    max_line_length: int = DEFAULT_MAX_LINE_LENGTH,
    jobs: int = 1,
) -> tuple[ScanReport, dict[str, Any]]:
    """Scan *root* and return the report and its schema-validated dict.

    ``extensions=None`` uses the default C/C++ extensions; an empty iterable
    scans every regular file.
    """
    cfg = ScanConfig.create(
        root,
        extensions=extensions,
        ignore_dirs=ignore_dirs,
        max_line_length=max_line_length,
        jobs=jobs,
    )
    report = run_scan(cfg)
    report_dict = report.to_dict()
    validate_instance(report_dict, "scan_report.schema.json")
    return report, report_dict
