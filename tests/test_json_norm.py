"""Tests for the canonical JSON serialization used by ``lint --json``."""

from __future__ import annotations

import json

from lint_docs.utils.json_norm import stable_json_dumps


def test_sorts_keys_and_adds_newline():
    s = stable_json_dumps({"b": 1, "a": 2})
    assert s.endswith("\n")
    assert s.index('"a"') < s.index('"b"')


def test_tuples_and_sets_become_lists():
    obj = json.loads(stable_json_dumps({"t": (1, 2), "s": frozenset({"x"})}))
    assert obj == {"t": [1, 2], "s": ["x"]}


def test_non_ascii_is_kept():
    assert "é" in stable_json_dumps({"message": "Duplicate key 'é'"})


def test_unknown_objects_fall_back_to_str():
    class Marker:
        def __str__(self) -> str:
            return "marker"

    assert json.loads(stable_json_dumps({"m": Marker()})) == {"m": "marker"}
