"""Task planning package."""

from .builder import build_tasks, establish_task_dependencies, evaluate_triggers
from .graph import find_cycles, find_dangling_dependencies, topological_order, validate_task_graph
from .types import PatternConfig, Task, TaskKind, TriggerResult

__all__ = [
    "build_tasks",
    "establish_task_dependencies",
    "evaluate_triggers",
    "find_cycles",
    "find_dangling_dependencies",
    "topological_order",
    "validate_task_graph",
    "PatternConfig",
    "Task",
    "TaskKind",
    "TriggerResult",
]
