"""Run lint rules over Python source and apply ignore directives."""

from __future__ import annotations

import ast
import logging
import tokenize
from pathlib import Path
from typing import Iterable, Sequence

from lint_docs.rules.base import Diagnostic, LintContext, LintRule
from lint_docs.rules.ignore import parse_directives
from lint_docs.rules.no_dupe_keys import NoDupeKeys

logger = logging.getLogger(__name__)

# Directory basenames never descended into.
_DEFAULT_EXCLUDES = frozenset(
    {
        ".git",
        ".venv",
        "venv",
        "__pycache__",
        "node_modules",
        "dist",
        "build",
        ".tox",
        ".mypy_cache",
        ".pytest_cache",
    }
)


def default_rules() -> list[LintRule]:
    return [NoDupeKeys()]


def lint_source(
    source: str,
    path: str = "<string>",
    rules: Sequence[LintRule] | None = None,
) -> list[Diagnostic]:
    """Lint one module's *source* text.

    Raises ``SyntaxError`` when *source* does not parse.
    """
    module = ast.parse(source, filename=path)
    context = LintContext(path=path, source=source)
    for rule in rules if rules is not None else default_rules():
        rule.lint_module(context, module)

    directives = parse_directives(source)
    kept = [d for d in context.diagnostics if not directives.suppresses(d)]
    return sorted(kept, key=Diagnostic.sort_key)


def discover_py_files(root: Path) -> list[Path]:
    """Recursively find ``*.py`` files under *root*, skipping tool directories."""
    if root.is_file():
        return [root]
    results = [
        p
        for p in root.rglob("*.py")
        if p.is_file() and not any(part in _DEFAULT_EXCLUDES for part in p.relative_to(root).parts)
    ]
    return sorted(results)


def lint_paths(
    paths: Iterable[Path],
    rules: Sequence[LintRule] | None = None,
) -> list[Diagnostic]:
    """Lint every Python file under *paths* (files or directories)."""
    diagnostics: list[Diagnostic] = []
    for root in paths:
        root = Path(root)
        if not root.exists():
            raise FileNotFoundError(f"Path does not exist: {root}")
        for file in discover_py_files(root):
            with tokenize.open(file) as fh:  # honors PEP 263 coding cookies
                source = fh.read()
            found = lint_source(source, path=file.as_posix(), rules=rules)
            logger.debug("%s: %d diagnostics", file.as_posix(), len(found))
            diagnostics.extend(found)
    return sorted(diagnostics, key=Diagnostic.sort_key)
