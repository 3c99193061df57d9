"""Exit-code policy — maps a finished scan to the process exit code.

Contract:
  - any violation (including unreadable files) => VIOLATION
  - any scanned file, even a clean one        => VIOLATION
  - success only when no file was discovered
"""

from __future__ import annotations

from tablen.model.report import ScanReport
from tablen.utils.exit_codes import ExitCode


def exit_code_for_scan(file_count: int, message_count: int) -> int:
    """Compute the exit code from the discovered-file and message counts."""
    if message_count > 0 or file_count > 0:
        return ExitCode.VIOLATION
    return ExitCode.SUCCESS


def exit_code_for_report(report: ScanReport) -> int:
    return exit_code_for_scan(report.file_count, report.violation_count)
