"""Code generation strategy (the root of every decomposition)."""

from typing import AbstractSet

from codeplan.interpretation.types import InterpretedRequest
from codeplan.lexical.types import LexicalAnalysis
from codeplan.planning.types import PatternConfig, Task, TaskKind, TriggerResult

# The root task is unconditional, so it matches nothing
_CODE_GENERATION_PATTERNS = PatternConfig()

UNSPECIFIED_LANGUAGE = "unspecified-language"


class CodeGenerationStrategy:
    kind = TaskKind.CODE_GENERATION
    id_prefix = "code_gen"
    depends_on_kinds: tuple[TaskKind, ...] = ()

    def get_patterns(self) -> PatternConfig:
        """Return empty patterns - code generation is always emitted."""
        return _CODE_GENERATION_PATTERNS

    def evaluate(self, analysis: LexicalAnalysis) -> TriggerResult:
        result = TriggerResult()
        result.add("root task")
        return result

    def create_task(
        self,
        request: InterpretedRequest,
        task_id: str,
        emitted_kinds: AbstractSet[TaskKind],
    ) -> Task:
        language = request.language or UNSPECIFIED_LANGUAGE
        return Task(
            id=task_id,
            kind=self.kind,
            description=f"Generate {language} code for: {request.original_prompt}",
            estimated_complexity=request.complexity,
            context={
                "language": request.language,
                "framework": request.framework,
                "platform": request.platform,
                "dependencies": list(request.dependencies),
                "constraints": list(request.constraints),
                "security_required": TaskKind.SECURITY in emitted_kinds,
                "performance_sensitive": TaskKind.OPTIMIZATION in emitted_kinds,
            },
        )
