"""Shared planning types."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, FrozenSet


class TaskKind(Enum):
    """Kinds of work a request can be decomposed into."""

    CODE_GENERATION = "code_generation"
    DOCUMENTATION = "documentation"
    TESTING = "testing"
    OPTIMIZATION = "optimization"
    SECURITY = "security"
    DEPLOYMENT = "deployment"


@dataclass
class Task:
    """One unit of work in a decomposition.

    ``depends_on`` only ever grows, and only while the builder wires
    edges; callers receive tasks after that pass has finished.
    """

    id: str
    kind: TaskKind
    description: str
    depends_on: list[str] = field(default_factory=list)
    estimated_complexity: int = 1
    context: dict[str, Any] = field(default_factory=dict)

    def add_dependency(self, task_id: str) -> None:
        """Record an edge to ``task_id``; adding the same edge twice is a no-op."""
        if task_id != self.id and task_id not in self.depends_on:
            self.depends_on.append(task_id)

    @property
    def is_root(self) -> bool:
        return not self.depends_on

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "kind": self.kind.value,
            "description": self.description,
            "depends_on": list(self.depends_on),
            "estimated_complexity": self.estimated_complexity,
            "context": {
                key: list(value) if isinstance(value, tuple) else value
                for key, value in self.context.items()
            },
        }


@dataclass(frozen=True)
class PatternConfig:
    """Keyword configuration for a task strategy.

    Each strategy defines its own patterns; the builder uses them to
    decide whether to emit the strategy's task.
    """

    # Keywords that explicitly ask for this kind of work
    primary_keywords: FrozenSet[str] = field(default_factory=frozenset)

    # Keywords that imply this work without asking for it
    # (e.g. "password" implies a security review)
    implied_keywords: FrozenSet[str] = field(default_factory=frozenset)

    # Emit when this many structural keyword tokens are present (0 disables)
    structural_threshold: int = 0


@dataclass
class TriggerResult:
    """Whether a strategy's task should be emitted, and why."""

    triggered: bool = False
    reasoning: list[str] = field(default_factory=list)

    def add(self, reason: str) -> None:
        """Mark as triggered with a reason."""
        self.triggered = True
        self.reasoning.append(reason)
