"""Tests for lint-ignore directives."""

from __future__ import annotations

from pathlib import Path

import pytest

from lint_docs.rules.ignore import parse_directives
from lint_docs.rules.linter import lint_paths, lint_source

DUPE = 'x = {"a": 1, "a": 2}\n'


class TestLineDirective:
    """``# lint-ignore`` silences the next line."""

    def test_listed_code_is_suppressed(self):
        assert lint_source("# lint-ignore noDupeKeys\n" + DUPE) == []

    def test_bare_directive_suppresses_every_code(self):
        assert lint_source("# lint-ignore\n" + DUPE) == []

    def test_other_code_does_not_suppress(self):
        assert len(lint_source("# lint-ignore someOtherRule\n" + DUPE)) == 1

    def test_trailing_comment_does_not_count(self):
        assert len(lint_source(DUPE.rstrip("\n") + "  # lint-ignore\n")) == 1

    def test_only_applies_to_the_next_line(self):
        assert len(lint_source("# lint-ignore\n\n" + DUPE)) == 1

    def test_indented_directive(self):
        source = "def f():\n    # lint-ignore noDupeKeys\n    return {'a': 1, 'a': 2}\n"
        assert lint_source(source) == []


class TestFileDirective:
    """``# lint-ignore-file`` silences the whole module."""

    def test_bare_directive_suppresses_everything(self):
        assert lint_source("# lint-ignore-file\n" + DUPE + DUPE) == []

    def test_listed_code_is_suppressed(self):
        assert lint_source("# lint-ignore-file noDupeKeys\n" + DUPE) == []

    def test_other_code_does_not_suppress(self):
        assert len(lint_source("# lint-ignore-file someOtherRule\n" + DUPE)) == 1

    def test_directive_after_code_is_ignored(self):
        source = "import os\n# lint-ignore-file\n" + DUPE
        assert len(lint_source(source)) == 1

    def test_directive_after_docstring_is_ignored(self):
        source = '"""Doc."""\n# lint-ignore-file\n' + DUPE
        assert len(lint_source(source)) == 1


class TestParseDirectives:
    """parse_directives exposes the parsed code sets."""

    def test_comma_and_space_separated_codes(self):
        directives = parse_directives("# lint-ignore a, b c\nx = 1\n")
        assert directives.line_codes == {2: frozenset({"a", "b", "c"})}
        assert directives.file_codes == frozenset()

    def test_bare_file_directive_is_none(self):
        assert parse_directives("# lint-ignore-file\nx = 1\n").file_codes is None

    def test_multiple_file_directives_accumulate(self):
        directives = parse_directives("# lint-ignore-file a\n# lint-ignore-file b\nx = 1\n")
        assert directives.file_codes == frozenset({"a", "b"})


class TestLintPaths:
    """lint_paths walks files and directories."""

    def test_walks_directories_and_skips_caches(self, tmp_path: Path):
        (tmp_path / "a.py").write_text(DUPE, encoding="utf-8")
        (tmp_path / "pkg").mkdir()
        (tmp_path / "pkg" / "b.py").write_text(DUPE, encoding="utf-8")
        (tmp_path / "__pycache__").mkdir()
        (tmp_path / "__pycache__" / "c.py").write_text(DUPE, encoding="utf-8")
        (tmp_path / "notes.txt").write_text(DUPE, encoding="utf-8")

        diagnostics = lint_paths([tmp_path])

        assert [Path(d.path).name for d in diagnostics] == ["a.py", "b.py"]

    def test_single_file(self, tmp_path: Path):
        target = tmp_path / "one.py"
        target.write_text(DUPE, encoding="utf-8")

        assert len(lint_paths([target])) == 1

    def test_directives_apply_per_file(self, tmp_path: Path):
        (tmp_path / "ignored.py").write_text("# lint-ignore-file\n" + DUPE, encoding="utf-8")
        (tmp_path / "reported.py").write_text(DUPE, encoding="utf-8")

        diagnostics = lint_paths([tmp_path])

        assert [Path(d.path).name for d in diagnostics] == ["reported.py"]

    def test_missing_path_raises(self, tmp_path: Path):
        with pytest.raises(FileNotFoundError, match="does not exist"):
            lint_paths([tmp_path / "missing"])

    def test_honors_coding_cookie(self, tmp_path: Path):
        target = tmp_path / "legacy.py"
        target.write_bytes(b"# -*- coding: latin-1 -*-\nx = {'\xe9': 1, '\xe9': 2}\n")

        diagnostics = lint_paths([target])

        assert [d.message for d in diagnostics] == ["Duplicate key 'é'"]
