"""noDupeKeys — flags dict literals that repeat a key.

Only constant keys are compared; ``**spread`` entries and computed keys are
skipped. Keys collide the way Python collides them, so ``1``, ``1.0`` and
``True`` are the same key.
"""

from __future__ import annotations

import ast

from lint_docs.rules.base import LintContext

CODE = "noDupeKeys"


def _literal_key(node: ast.expr | None) -> tuple[bool, object]:
    if isinstance(node, ast.Constant):
        return True, node.value
    return False, None


class NoDupeKeys:
    code: str = CODE

    def lint_module(self, context: LintContext, module: ast.Module) -> None:
        _NoDupeKeysVisitor(context).visit(module)


class _NoDupeKeysVisitor(ast.NodeVisitor):
    def __init__(self, context: LintContext) -> None:
        self.context = context

    def visit_Dict(self, node: ast.Dict) -> None:
        seen: dict[object, str] = {}
        duplicates: dict[object, str] = {}

        for key in node.keys:
            is_literal, value = _literal_key(key)
            if not is_literal:
                continue
            if value in seen:
                duplicates[value] = seen[value]
            else:
                seen[value] = str(value)

        # One report per distinct key; "1" and 1 stay separate.
        for key in sorted(duplicates.values()):
            self.context.add_diagnostic(node, CODE, f"Duplicate key '{key}'")

        self.generic_visit(node)
