"""Task graph builder.

Expands an InterpretedRequest into a list of tasks rooted at a single
code_generation task:

1. Every strategy evaluates the original request's lexical analysis
2. Triggered strategies create their tasks, ids from a per-call counter
3. Dependency edges are wired by looking tasks up by kind in the list
4. The finished graph is validated before it is returned
"""

from __future__ import annotations

import itertools
import logging
from typing import Sequence

from codeplan.interpretation.types import InterpretedRequest
from codeplan.planning.graph import validate_task_graph
from codeplan.planning.strategies import TaskStrategy, get_strategy_for_kind, iter_strategies
from codeplan.planning.types import Task, TaskKind, TriggerResult

logger = logging.getLogger(__name__)


def evaluate_triggers(request: InterpretedRequest) -> list[tuple[TaskStrategy, TriggerResult]]:
    """Evaluate every strategy against the request, in strategy order."""
    return [(strategy, strategy.evaluate(request.analysis)) for strategy in iter_strategies()]


def establish_task_dependencies(tasks: Sequence[Task]) -> None:
    """Add the edges implied by each task's kind.

    Targets are found by kind among ``tasks`` only; kinds that were not
    emitted are skipped. Running this twice adds nothing the second time.
    """
    by_kind: dict[TaskKind, Task] = {}
    for task in tasks:
        by_kind.setdefault(task.kind, task)

    for task in tasks:
        for kind in get_strategy_for_kind(task.kind).depends_on_kinds:
            target = by_kind.get(kind)
            if target is not None:
                task.add_dependency(target.id)


def build_tasks(request: InterpretedRequest) -> list[Task]:
    """Decompose a request into a validated, root-reachable task DAG."""
    triggered = [
        (strategy, result)
        for strategy, result in evaluate_triggers(request)
        if result.triggered
    ]
    emitted_kinds = frozenset(strategy.kind for strategy, _ in triggered)

    counter = itertools.count(1)
    tasks: list[Task] = []
    for strategy, result in triggered:
        task_id = f"{strategy.id_prefix}_{next(counter)}"
        tasks.append(strategy.create_task(request, task_id, emitted_kinds))
        logger.debug(f"Emitting {strategy.kind.value} task {task_id}: {'; '.join(result.reasoning)}")

    establish_task_dependencies(tasks)
    validate_task_graph(tasks)

    logger.debug(f"Tasks extracted: {len(tasks)} ({', '.join(task.kind.value for task in tasks)})")
    return tasks
