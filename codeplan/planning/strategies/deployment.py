"""Deployment strategy."""

from typing import AbstractSet

from codeplan.interpretation.types import InterpretedRequest
from codeplan.lexical.types import LexicalAnalysis
from codeplan.planning.strategies.trigger_utils import evaluate_patterns
from codeplan.planning.types import PatternConfig, Task, TaskKind, TriggerResult

_DEPLOYMENT_PATTERNS = PatternConfig(
    primary_keywords=frozenset({"deploy", "deployment", "ci/cd", "pipeline", "release"}),
)


class DeploymentStrategy:
    kind = TaskKind.DEPLOYMENT
    id_prefix = "deploy"
    depends_on_kinds = (TaskKind.CODE_GENERATION, TaskKind.TESTING, TaskKind.SECURITY)

    def get_patterns(self) -> PatternConfig:
        """Return patterns for deployment tasks."""
        return _DEPLOYMENT_PATTERNS

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
            description="Prepare deployment configuration and scripts",
            estimated_complexity=max(request.complexity - 1, 1),
            context={
                "platform": request.platform,
                "framework": request.framework,
            },
        )
