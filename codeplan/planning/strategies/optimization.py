"""Optimization strategy."""

from typing import AbstractSet

from codeplan.interpretation.types import InterpretedRequest
from codeplan.lexical.types import LexicalAnalysis
from codeplan.planning.strategies.trigger_utils import evaluate_patterns, language_context
from codeplan.planning.types import PatternConfig, Task, TaskKind, TriggerResult

_OPTIMIZATION_PATTERNS = PatternConfig(
    primary_keywords=frozenset({"optimize", "performance", "efficient", "fast", "scale"}),
)


class OptimizationStrategy:
    kind = TaskKind.OPTIMIZATION
    id_prefix = "opt"
    depends_on_kinds = (TaskKind.CODE_GENERATION, TaskKind.TESTING)

    def get_patterns(self) -> PatternConfig:
        """Return patterns for optimization tasks."""
        return _OPTIMIZATION_PATTERNS

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
            description="Optimize the generated code for performance",
            estimated_complexity=request.complexity + 1,
            context=language_context(request),
        )
