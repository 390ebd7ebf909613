"""Security strategy."""

from typing import AbstractSet

from codeplan.interpretation.types import InterpretedRequest
from codeplan.lexical.types import LexicalAnalysis
from codeplan.planning.strategies.trigger_utils import evaluate_patterns, language_context
from codeplan.planning.types import PatternConfig, Task, TaskKind, TriggerResult

_SECURITY_PATTERNS = PatternConfig(
    primary_keywords=frozenset({
        "secure", "security", "authentication", "authorization", "encrypt",
    }),
    # Sensitive operations need a security pass even when nobody asked for one
    implied_keywords=frozenset({
        "user", "password", "auth", "token", "credential",
        "payment", "credit", "personal", "private", "sensitive",
    }),
)

# Ordered list read by the security runner
SECURITY_CHECKS = (
    "input_validation",
    "authentication",
    "authorization",
    "data_sanitization",
    "encryption",
)


class SecurityStrategy:
    kind = TaskKind.SECURITY
    id_prefix = "security"
    depends_on_kinds = (TaskKind.CODE_GENERATION, TaskKind.OPTIMIZATION)

    def get_patterns(self) -> PatternConfig:
        """Return patterns for security tasks."""
        return _SECURITY_PATTERNS

    def evaluate(self, analysis: LexicalAnalysis) -> TriggerResult:
        return evaluate_patterns(analysis, self.get_patterns())

    def create_task(
        self,
        request: InterpretedRequest,
        task_id: str,
        emitted_kinds: AbstractSet[TaskKind],
    ) -> Task:
        context = language_context(request)
        context["security_checks"] = list(SECURITY_CHECKS)
        return Task(
            id=task_id,
            kind=self.kind,
            description="Implement security measures and validate the generated code",
            estimated_complexity=request.complexity + 2,
            context=context,
        )
