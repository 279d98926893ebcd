"""lint_docs — the "Ignoring Rules" documentation page and the rules it documents."""

__all__ = [
    "__version__",
    "LintDocsError",
    "get_static_data",
    "IgnoringRulesPage",
    "lint_source",
    "lint_paths",
]
__version__ = "0.1.0"

from lint_docs.errors import LintDocsError  # noqa: E402, F401
from lint_docs.pages.loader import get_static_data  # noqa: E402, F401
from lint_docs.pages.ignoring_rules import IgnoringRulesPage  # noqa: E402, F401
from lint_docs.rules.linter import lint_paths, lint_source  # noqa: E402, F401
