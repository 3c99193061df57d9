"""Exporters for scan reports.

*  **Text** — one ``<path>(<line>[ - <line>]): <message>`` line per violation.
*  **JSON** — machine-readable, validated against ``scan_report.schema.json``.

Both accept a :class:`ScanReport` and produce a string.
"""

from __future__ import annotations

from tablen.contracts.load import validate_instance
from tablen.model.report import ScanReport
from tablen.utils.json_norm import stable_json_dumps


def export_text(report: ScanReport) -> str:
    """Render every violation on its own line, in report order."""
    return "".join(f"{line}\n" for line in report.messages())


def export_json(report: ScanReport, *, indent: int = 2) -> str:
    """Export a ``ScanReport`` as canonical JSON.

    Raises ``jsonschema.ValidationError`` if the report does not match the
    bundled schema.
    """
    data = report.to_dict()
    validate_instance(data, "scan_report.schema.json")
    return stable_json_dumps(data, indent=indent)
