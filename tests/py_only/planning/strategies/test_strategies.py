"""Tests for task-kind strategies."""

import pytest

from codeplan.lexical import analyze
from codeplan.planning.strategies import (
    SecurityStrategy,
    TaskStrategy,
    get_strategy_for_kind,
    iter_strategies,
)
from codeplan.planning.types import TaskKind


def test_registry_covers_every_kind_root_first():
    strategies = iter_strategies()
    assert [strategy.kind for strategy in strategies] == list(TaskKind)
    assert strategies[0].kind == TaskKind.CODE_GENERATION
    assert all(isinstance(strategy, TaskStrategy) for strategy in strategies)


def test_dependency_kinds_only_point_to_earlier_kinds():
    """Edges always point backwards in registry order, so no cycle can form."""
    order = list(TaskKind)
    for strategy in iter_strategies():
        for kind in strategy.depends_on_kinds:
            assert order.index(kind) < order.index(strategy.kind)


def test_code_generation_always_triggers():
    strategy = get_strategy_for_kind(TaskKind.CODE_GENERATION)
    assert strategy.evaluate(analyze("")).triggered


@pytest.mark.parametrize(
    ("kind", "text", "expected"),
    [
        pytest.param(TaskKind.DOCUMENTATION, "Add docs for the module", True, id="docs-keyword"),
        pytest.param(TaskKind.DOCUMENTATION, "Write a rapid prototype", False, id="api-not-inside-words"),
        pytest.param(TaskKind.DOCUMENTATION, "A class and an interface", True, id="docs-structural"),
        pytest.param(TaskKind.TESTING, "Needs e2e coverage", True, id="testing-e2e"),
        pytest.param(TaskKind.TESTING, "Write one function", False, id="testing-below-threshold"),
        pytest.param(TaskKind.OPTIMIZATION, "Make it efficient", True, id="optimization-keyword"),
        pytest.param(TaskKind.OPTIMIZATION, "A class and an interface", False, id="optimization-no-structural"),
        pytest.param(TaskKind.OPTIMIZATION, "Create a FastAPI service", False, id="keyword-inside-technology-name"),
        pytest.param(TaskKind.OPTIMIZATION, "Make a fast FastAPI service", True, id="keyword-beside-technology-name"),
        pytest.param(TaskKind.SECURITY, "Handle credit card payments", True, id="security-sensitive"),
        pytest.param(TaskKind.SECURITY, "Render a chart", False, id="security-none"),
        pytest.param(TaskKind.DEPLOYMENT, "Set up CI/CD for releases", True, id="deployment-cicd"),
        pytest.param(TaskKind.DEPLOYMENT, "Write a parser", False, id="deployment-none"),
    ],
)
def test_triggers(kind, text, expected):
    assert get_strategy_for_kind(kind).evaluate(analyze(text)).triggered is expected


def test_trigger_reasoning_names_keywords():
    result = SecurityStrategy().evaluate(analyze("Store the user password securely"))
    assert result.triggered
    assert "keywords: secure" in result.reasoning
    assert "implied by: password, user" in result.reasoning
