"""Centralized exit-code contract for all CLI commands.

Code  Meaning
----  -------
  0   Success — page built, or lint found nothing
  1   Violation — lint reported at least one diagnostic
  2   Error — usage error, missing source file, runtime failure
"""

from __future__ import annotations

from enum import IntEnum


class ExitCode(IntEnum):
    SUCCESS = 0
    VIOLATION = 1
    ERROR = 2
