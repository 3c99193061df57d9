"""ScanReport — aggregated output of one scan run."""

from __future__ import annotations

from dataclasses import dataclass, field

from . import ViolationKind
from .violation import Violation

SCHEMA_VERSION = "tablen_report_v1"


@dataclass(frozen=True)
class ScanReport:
    """Files scanned and violations found, both in processing order.

    Corresponds to ``scan_report.schema.json``.
    """

    files: list[str] = field(default_factory=list)
    violations: list[Violation] = field(default_factory=list)
    config: dict = field(default_factory=dict)

    @property
    def file_count(self) -> int:
        return len(self.files)

    @property
    def violation_count(self) -> int:
        return len(self.violations)

    def messages(self) -> list[str]:
        """Rendered report lines, one per violation."""
        return [v.render() for v in self.violations]

    def counts_by_kind(self) -> dict[str, int]:
        counts = {kind.value: 0 for kind in ViolationKind}
        for v in self.violations:
            counts[v.kind.value] += 1
        return counts

    # ── serialisation ───────────────────────────────────────────────

    def to_dict(self) -> dict:
        return {
            "schema_version": SCHEMA_VERSION,
            "config": dict(self.config),
            "summary": {
                "files_scanned": self.file_count,
                "violation_count": self.violation_count,
                "by_kind": self.counts_by_kind(),
            },
            "files": list(self.files),
            "violations": [v.to_dict() for v in self.violations],
        }
