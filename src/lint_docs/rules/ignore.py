"""Ignore directives: comments that silence lint diagnostics.

``# lint-ignore-file [codes...]``
    Before any code: disables the listed codes (or every code) for the file.
``# lint-ignore [codes...]``
    On its own line: disables the listed codes (or every code) on the next line.
"""

from __future__ import annotations

import io
import re
import tokenize
from dataclasses import dataclass, field

from lint_docs.rules.base import Diagnostic

_FILE_RE = re.compile(r"^#\s*lint-ignore-file(?:\s+(?P<codes>.*))?$")
_LINE_RE = re.compile(r"^#\s*lint-ignore(?:\s+(?P<codes>.*))?$")

# Tokens that do not count as code when looking for file-level directives.
_NON_CODE = frozenset({
    tokenize.COMMENT,
    tokenize.NL,
    tokenize.NEWLINE,
    tokenize.ENCODING,
    tokenize.INDENT,
    tokenize.DEDENT,
})


def _parse_codes(raw: str | None) -> frozenset[str] | None:
    """Return the listed codes, or None meaning "every code"."""
    codes = frozenset(c for c in re.split(r"[\s,]+", raw or "") if c)
    return codes or None


@dataclass
class IgnoreDirectives:
    """Parsed directives for one file.

    ``None`` as a code set means every code is ignored.
    """

    file_codes: frozenset[str] | None = frozenset()
    line_codes: dict[int, frozenset[str] | None] = field(default_factory=dict)

    def suppresses(self, diagnostic: Diagnostic) -> bool:
        if self.file_codes is None or diagnostic.code in self.file_codes:
            return True
        if diagnostic.line not in self.line_codes:
            return False
        codes = self.line_codes[diagnostic.line]
        return codes is None or diagnostic.code in codes


def parse_directives(source: str) -> IgnoreDirectives:
    """Scan *source* comments for ignore directives."""
    directives = IgnoreDirectives()
    seen_code = False
    line_has_code: set[int] = set()

    for tok in tokenize.generate_tokens(io.StringIO(source).readline):
        if tok.type not in _NON_CODE and tok.type != tokenize.ENDMARKER:
            seen_code = True
            line_has_code.add(tok.start[0])
            continue
        if tok.type != tokenize.COMMENT:
            continue

        text = tok.string.strip()
        m = _FILE_RE.match(text)
        if m:
            if not seen_code and directives.file_codes is not None:
                codes = _parse_codes(m.group("codes"))
                directives.file_codes = None if codes is None else directives.file_codes | codes
            continue

        m = _LINE_RE.match(text)
        if m and tok.start[0] not in line_has_code:
            directives.line_codes[tok.start[0] + 1] = _parse_codes(m.group("codes"))

    return directives
