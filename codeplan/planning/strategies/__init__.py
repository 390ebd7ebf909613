"""Task strategies package for planning.

Each strategy owns the domain knowledge for one TaskKind:
- Trigger keywords
- Dependency kinds
- Task description, complexity offset and context
"""

from .base import TaskStrategy
from .code_generation import CodeGenerationStrategy
from .documentation import DocumentationStrategy
from .testing import TestingStrategy
from .optimization import OptimizationStrategy
from .security import SecurityStrategy
from .deployment import DeploymentStrategy

from codeplan.planning.types import TaskKind

# Evaluation order; the root must come first
_STRATEGIES: dict[TaskKind, TaskStrategy] = {
    TaskKind.CODE_GENERATION: CodeGenerationStrategy(),
    TaskKind.DOCUMENTATION: DocumentationStrategy(),
    TaskKind.TESTING: TestingStrategy(),
    TaskKind.OPTIMIZATION: OptimizationStrategy(),
    TaskKind.SECURITY: SecurityStrategy(),
    TaskKind.DEPLOYMENT: DeploymentStrategy(),
}


def get_strategy_for_kind(kind: TaskKind) -> TaskStrategy:
    """Get the strategy for a given task kind."""
    return _STRATEGIES[kind]


def iter_strategies() -> list[TaskStrategy]:
    return list(_STRATEGIES.values())


__all__ = [
    "TaskStrategy",
    "CodeGenerationStrategy",
    "DocumentationStrategy",
    "TestingStrategy",
    "OptimizationStrategy",
    "SecurityStrategy",
    "DeploymentStrategy",
    "get_strategy_for_kind",
    "iter_strategies",
]
