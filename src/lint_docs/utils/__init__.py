"""Shared utilities for lint_docs."""

from lint_docs.utils.exit_codes import ExitCode
from lint_docs.utils.json_norm import stable_json_dumps

__all__ = [
    "ExitCode",
    "stable_json_dumps",
]
