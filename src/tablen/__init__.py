"""tablen — tab and line-length checker for source trees."""

__all__ = [
    "__version__",
    "scan_project",
]
__version__ = "0.1.0"

from tablen.api import scan_project  # noqa: E402, F401
