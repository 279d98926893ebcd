"""Diagnostics and the context rules report them through."""

from __future__ import annotations

import ast
from dataclasses import dataclass, field
from typing import Protocol


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """A single rule violation at a source position (1-based line, 0-based col)."""

    code: str
    message: str
    line: int
    col: int
    path: str = "<string>"

    def sort_key(self) -> tuple[str, int, int, str]:
        return (self.path, self.line, self.col, self.code)

    def to_dict(self) -> dict:
        return {
            "code": self.code,
            "message": self.message,
            "path": self.path,
            "line": self.line,
            "col": self.col,
        }


@dataclass
class LintContext:
    """Per-file state handed to every rule."""

    path: str
    source: str
    diagnostics: list[Diagnostic] = field(default_factory=list)

    def add_diagnostic(self, node: ast.AST, code: str, message: str) -> None:
        self.diagnostics.append(
            Diagnostic(
                code=code,
                message=message,
                line=getattr(node, "lineno", 1),
                col=getattr(node, "col_offset", 0),
                path=self.path,
            )
        )


class LintRule(Protocol):
    code: str

    def lint_module(self, context: LintContext, module: ast.Module) -> None: ...
