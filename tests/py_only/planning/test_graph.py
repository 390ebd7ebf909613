"""Tests for task graph validation and ordering."""

import pytest

from codeplan.errors import TaskGraphError
from codeplan.planning import Task, TaskKind, find_cycles, topological_order, validate_task_graph


def _task(task_id: str, kind: TaskKind, *depends_on: str) -> Task:
    return Task(id=task_id, kind=kind, description=task_id, depends_on=list(depends_on))


def _valid_graph() -> list[Task]:
    return [
        _task("code_gen_1", TaskKind.CODE_GENERATION),
        _task("test_2", TaskKind.TESTING, "code_gen_1"),
        _task("opt_3", TaskKind.OPTIMIZATION, "code_gen_1", "test_2"),
        _task("docs_4", TaskKind.DOCUMENTATION, "code_gen_1"),
    ]


def test_valid_graph_passes():
    validate_task_graph(_valid_graph())


def test_topological_order_is_stable():
    tasks = list(reversed(_valid_graph()))
    ordered = [task.id for task in topological_order(tasks)]
    assert ordered == ["code_gen_1", "docs_4", "test_2", "opt_3"]


def test_topological_order_raises_on_cycle():
    tasks = [
        _task("code_gen_1", TaskKind.CODE_GENERATION),
        _task("a", TaskKind.TESTING, "b"),
        _task("b", TaskKind.OPTIMIZATION, "a"),
    ]
    with pytest.raises(TaskGraphError):
        topological_order(tasks)


def test_find_cycles_reports_path():
    tasks = [
        _task("a", TaskKind.TESTING, "b"),
        _task("b", TaskKind.OPTIMIZATION, "a"),
    ]
    assert find_cycles(tasks) == [["a", "b", "a"]]


def test_self_dependency_is_ignored_by_add_dependency():
    task = _task("a", TaskKind.TESTING)
    task.add_dependency("a")
    task.add_dependency("b")
    task.add_dependency("b")
    assert task.depends_on == ["b"]


@pytest.mark.parametrize(
    ("tasks", "message"),
    [
        pytest.param(
            [_task("test_1", TaskKind.TESTING)],
            "Expected exactly one code_generation task",
            id="no-root",
        ),
        pytest.param(
            [_task("code_gen_1", TaskKind.CODE_GENERATION), _task("code_gen_2", TaskKind.CODE_GENERATION)],
            "Expected exactly one code_generation task",
            id="two-roots",
        ),
        pytest.param(
            [_task("code_gen_1", TaskKind.CODE_GENERATION, "docs_2"), _task("docs_2", TaskKind.DOCUMENTATION)],
            "Root task must not have dependencies",
            id="root-with-dependency",
        ),
        pytest.param(
            [_task("code_gen_1", TaskKind.CODE_GENERATION), _task("test_2", TaskKind.TESTING, "code_gen_9")],
            "Dependencies reference unknown tasks",
            id="dangling",
        ),
        pytest.param(
            [
                _task("code_gen_1", TaskKind.CODE_GENERATION),
                _task("a", TaskKind.TESTING, "code_gen_1", "b"),
                _task("b", TaskKind.OPTIMIZATION, "a"),
            ],
            "Task graph has a cycle",
            id="cycle",
        ),
        pytest.param(
            [_task("code_gen_1", TaskKind.CODE_GENERATION), _task("docs_2", TaskKind.DOCUMENTATION)],
            "Tasks do not depend on the root task",
            id="unreachable",
        ),
        pytest.param(
            [_task("code_gen_1", TaskKind.CODE_GENERATION), _task("x", TaskKind.TESTING, "code_gen_1"), _task("x", TaskKind.SECURITY, "code_gen_1")],
            "Duplicate task ids",
            id="duplicate-ids",
        ),
    ],
)
def test_invalid_graphs_raise(tasks, message):
    with pytest.raises(TaskGraphError, match=message):
        validate_task_graph(tasks)


def test_task_to_dict():
    task = _task("test_2", TaskKind.TESTING, "code_gen_1")
    task.context = {"language": "python", "dependencies": ("redis",)}
    assert task.to_dict() == {
        "id": "test_2",
        "kind": "testing",
        "description": "test_2",
        "depends_on": ["code_gen_1"],
        "estimated_complexity": 1,
        "context": {"language": "python", "dependencies": ["redis"]},
    }
