"""Load and validate JSON instances against the bundled schemas.

Usage::

    from tablen.contracts.load import validate_instance

    validate_instance(report.to_dict(), "scan_report.schema.json")
"""

from __future__ import annotations

import json
from importlib import resources
from typing import TYPE_CHECKING, Any

import jsonschema

if TYPE_CHECKING:
    from importlib.abc import Traversable

SCHEMA_DIR = ("data", "schemas")


def schema_resource(name: str) -> Traversable:
    """Locate a bundled schema inside the ``tablen`` package data."""
    res = resources.files("tablen")
    for part in SCHEMA_DIR:
        res = res / part
    return res / name


def load_schema(name: str) -> dict[str, Any]:
    """Load a bundled JSON schema by filename.

    Read through ``importlib.resources`` so zipped installs work too.
    """
    return json.loads(schema_resource(name).read_text(encoding="utf-8"))


def validate_instance(instance: Any, schema_name: str) -> None:
    """Validate *instance* against the named schema.

    Raises ``jsonschema.ValidationError`` on failure.
    """
    schema = load_schema(schema_name)
    jsonschema.validate(instance=instance, schema=schema)
