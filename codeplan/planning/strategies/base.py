"""Base strategy for task-kind specific planning logic.

Each TaskStrategy owns the domain knowledge for one TaskKind:
- Keyword patterns that trigger the task
- Which other kinds the task depends on
- How the task is described and parameterised
"""

from typing import AbstractSet, Protocol, runtime_checkable

from codeplan.interpretation.types import InterpretedRequest
from codeplan.lexical.types import LexicalAnalysis
from codeplan.planning.types import PatternConfig, Task, TaskKind, TriggerResult


@runtime_checkable
class TaskStrategy(Protocol):
    """Interface for task-kind strategies.

    Each strategy handles one TaskKind and provides:
    - get_patterns(): Keywords that trigger this kind of task
    - evaluate(): Decide whether the task is needed for a request
    - create_task(): Build the Task with its complexity and context
    """

    kind: TaskKind
    id_prefix: str
    depends_on_kinds: tuple[TaskKind, ...]

    def get_patterns(self) -> PatternConfig:
        """Return patterns this strategy matches."""
        ...

    def evaluate(self, analysis: LexicalAnalysis) -> TriggerResult:
        """Decide whether this task kind is needed.

        Args:
            analysis: Lexical analysis of the original request

        Returns:
            TriggerResult with the decision and its reasons
        """
        ...

    def create_task(
        self,
        request: InterpretedRequest,
        task_id: str,
        emitted_kinds: AbstractSet[TaskKind],
    ) -> Task:
        """Build the task. Dependencies are wired later by the builder."""
        ...
