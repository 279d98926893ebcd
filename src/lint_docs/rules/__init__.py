"""Lint rules documented by the "Ignoring Rules" page."""

from lint_docs.rules.base import Diagnostic, LintContext, LintRule
from lint_docs.rules.ignore import IgnoreDirectives, parse_directives
from lint_docs.rules.linter import default_rules, lint_paths, lint_source
from lint_docs.rules.no_dupe_keys import NoDupeKeys

__all__ = [
    "Diagnostic",
    "IgnoreDirectives",
    "LintContext",
    "LintRule",
    "NoDupeKeys",
    "default_rules",
    "lint_paths",
    "lint_source",
    "parse_directives",
]
