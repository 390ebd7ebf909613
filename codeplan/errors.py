"""Error hierarchy for Codeplan.

Validation problems with a user's request are never raised: they are
returned as data by ``validate_prompt``. The exceptions below signal
programming or configuration mistakes and are meant to fail fast.
"""

from __future__ import annotations


class CodeplanError(Exception):
    """Base class for Codeplan errors."""


class ConfigError(CodeplanError, ValueError):
    """Configuration could not be loaded or is invalid."""


class KeywordTableError(ConfigError):
    """A keyword or lookup table is malformed."""

    def __init__(self, table: str, message: str) -> None:
        self.table = table
        super().__init__(f"Keyword table '{table}': {message}")


class TaskGraphError(CodeplanError):
    """A built task graph violates its structural invariants."""

    def __init__(self, message: str, task_ids: list[str] | None = None) -> None:
        self.task_ids = list(task_ids or [])
        if self.task_ids:
            message = f"{message} ({', '.join(self.task_ids)})"
        super().__init__(message)
