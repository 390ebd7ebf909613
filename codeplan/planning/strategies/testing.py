"""Testing strategy."""

from typing import AbstractSet

from codeplan.constants import STRUCTURAL_THRESHOLD
from codeplan.interpretation.types import InterpretedRequest
from codeplan.lexical.types import LexicalAnalysis
from codeplan.planning.strategies.trigger_utils import evaluate_patterns, language_context
from codeplan.planning.types import PatternConfig, Task, TaskKind, TriggerResult

_TESTING_PATTERNS = PatternConfig(
    primary_keywords=frozenset({"test", "testing", "unit test", "integration test", "e2e"}),
    structural_threshold=STRUCTURAL_THRESHOLD,
)


class TestingStrategy:
    __test__ = False  # not a pytest class

    kind = TaskKind.TESTING
    id_prefix = "test"
    depends_on_kinds = (TaskKind.CODE_GENERATION,)

    def get_patterns(self) -> PatternConfig:
        """Return patterns for testing tasks."""
        return _TESTING_PATTERNS

    def evaluate(self, analysis: LexicalAnalysis) -> TriggerResult:
        return evaluate_patterns(analysis, self.get_patterns())

    def create_task(
        self,
        request: InterpretedRequest,
        task_id: str,
        emitted_kinds: AbstractSet[TaskKind],
    ) -> Task:
        return Task(
            id=task_id,
            kind=self.kind,
            description="Generate tests for the generated code",
            estimated_complexity=request.complexity,
            context=language_context(request),
        )
