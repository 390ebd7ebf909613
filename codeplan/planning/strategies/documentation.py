"""Documentation strategy."""

from typing import AbstractSet

from codeplan.constants import STRUCTURAL_THRESHOLD
from codeplan.interpretation.types import InterpretedRequest
from codeplan.lexical.types import LexicalAnalysis
from codeplan.planning.strategies.trigger_utils import evaluate_patterns, language_context
from codeplan.planning.types import PatternConfig, Task, TaskKind, TriggerResult

_DOCUMENTATION_PATTERNS = PatternConfig(
    primary_keywords=frozenset({"document", "documentation", "docs", "comment", "api"}),
    structural_threshold=STRUCTURAL_THRESHOLD,
)


class DocumentationStrategy:
    kind = TaskKind.DOCUMENTATION
    id_prefix = "docs"
    depends_on_kinds = (TaskKind.CODE_GENERATION,)

    def get_patterns(self) -> PatternConfig:
        """Return patterns for documentation tasks."""
        return _DOCUMENTATION_PATTERNS

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
            description="Generate documentation for the generated code",
            estimated_complexity=max(request.complexity - 2, 1),
            context=language_context(request),
        )
