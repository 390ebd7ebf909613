"""Dependency graph checks and ordering for task lists."""

from __future__ import annotations

from typing import Sequence

from codeplan.errors import TaskGraphError
from codeplan.planning.types import Task, TaskKind


def find_dangling_dependencies(tasks: Sequence[Task]) -> list[tuple[str, str]]:
    """Return (task id, missing id) pairs for edges leaving the task list."""
    known = {task.id for task in tasks}
    return [
        (task.id, dependency)
        for task in tasks
        for dependency in task.depends_on
        if dependency not in known
    ]


def find_cycles(tasks: Sequence[Task]) -> list[list[str]]:
    """Detect cycles in the dependency graph."""
    graph = {task.id: list(task.depends_on) for task in tasks}
    cycles: list[list[str]] = []
    state: dict[str, str] = {}
    path: list[str] = []

    def visit(node: str) -> None:
        marker = state.get(node)
        if marker == "permanent":
            return
        if marker == "temporary":
            start_index = path.index(node)
            cycle = path[start_index:] + [node]
            if cycle not in cycles:
                cycles.append(cycle)
            return
        state[node] = "temporary"
        path.append(node)
        for neighbour in graph.get(node, []):
            visit(neighbour)
        path.pop()
        state[node] = "permanent"

    for node in graph:
        if state.get(node) != "permanent":
            visit(node)
    return cycles


def topological_order(tasks: Sequence[Task]) -> list[Task]:
    """Order tasks so every task follows its dependencies.

    Ties keep the input order, so the same task list always yields the
    same order. Raises TaskGraphError if the graph has a cycle.
    """
    position = {task.id: index for index, task in enumerate(tasks)}
    by_id = {task.id: task for task in tasks}
    remaining = {task.id: len([d for d in task.depends_on if d in by_id]) for task in tasks}
    dependents: dict[str, list[str]] = {task.id: [] for task in tasks}
    for task in tasks:
        for dependency in task.depends_on:
            if dependency in dependents:
                dependents[dependency].append(task.id)

    ready = [task.id for task in tasks if remaining[task.id] == 0]
    ordered: list[Task] = []
    while ready:
        ready.sort(key=position.__getitem__)
        current = ready.pop(0)
        ordered.append(by_id[current])
        for dependent in dependents[current]:
            remaining[dependent] -= 1
            if remaining[dependent] == 0:
                ready.append(dependent)

    if len(ordered) != len(tasks):
        stuck = [task.id for task in tasks if remaining[task.id] > 0]
        raise TaskGraphError("Task graph has a cycle", stuck)
    return ordered


def validate_task_graph(tasks: Sequence[Task]) -> None:
    """Check the invariants every decomposition must satisfy.

    - exactly one code_generation task, with no dependencies
    - every dependency id names a task in the same list
    - no cycles
    - every task reaches the root by following dependencies
    """
    roots = [task for task in tasks if task.kind == TaskKind.CODE_GENERATION]
    if len(roots) != 1:
        raise TaskGraphError(
            f"Expected exactly one code_generation task, found {len(roots)}",
            [task.id for task in roots],
        )
    root = roots[0]
    if root.depends_on:
        raise TaskGraphError("Root task must not have dependencies", [root.id])

    ids = [task.id for task in tasks]
    duplicates = sorted({task_id for task_id in ids if ids.count(task_id) > 1})
    if duplicates:
        raise TaskGraphError("Duplicate task ids", duplicates)

    dangling = find_dangling_dependencies(tasks)
    if dangling:
        raise TaskGraphError(
            "Dependencies reference unknown tasks",
            [f"{task_id}->{missing}" for task_id, missing in dangling],
        )

    cycles = find_cycles(tasks)
    if cycles:
        raise TaskGraphError("Task graph has a cycle", cycles[0])

    by_id = {task.id: task for task in tasks}
    reaches_root: dict[str, bool] = {root.id: True}

    def _reaches_root(task: Task) -> bool:
        if task.id not in reaches_root:
            reaches_root[task.id] = any(_reaches_root(by_id[dep]) for dep in task.depends_on)
        return reaches_root[task.id]

    unreachable = [task.id for task in tasks if not _reaches_root(task)]
    if unreachable:
        raise TaskGraphError("Tasks do not depend on the root task", unreachable)
