"""End-to-end decomposition tests."""

import json

import pytest

from codeplan.config import CodeplanConfig, KeywordSettings
from codeplan.errors import KeywordTableError
from codeplan.pipeline import decompose
from codeplan.planning import TaskKind


def test_decompose_scenario(scenario_b_prompt):
    result = decompose(scenario_b_prompt)
    assert result.request.language == "typescript"
    assert result.root.kind == TaskKind.CODE_GENERATION
    assert result.task_for(TaskKind.SECURITY).depends_on == [result.root.id]
    assert result.task_for(TaskKind.OPTIMIZATION) is None
    assert result.execution_order()[0] is result.root


def test_decompose_empty_request():
    result = decompose("")
    assert result.kinds() == [TaskKind.CODE_GENERATION]
    assert result.request.complexity == 1
    assert result.request.priority == 5


def test_decompose_is_deterministic(scenario_b_prompt):
    first = decompose(scenario_b_prompt).to_dict()
    second = decompose(scenario_b_prompt).to_dict()
    assert first == second


def test_to_dict_is_json_serializable(scenario_b_prompt):
    payload = decompose(scenario_b_prompt).to_dict()
    decoded = json.loads(json.dumps(payload))
    assert decoded["request"]["framework"] == "express"
    assert decoded["execution_order"][0] == decoded["tasks"][0]["id"]
    root_context = decoded["tasks"][0]["context"]
    assert {"language", "framework", "dependencies"} <= set(root_context)


def test_custom_languages_are_recognised():
    config = CodeplanConfig(keywords=KeywordSettings(languages=["zig", "python"]))
    result = decompose("Write a Zig allocator", config)
    assert result.request.language == "zig"


def test_malformed_tables_fail_fast():
    config = CodeplanConfig(keywords=KeywordSettings(platforms=["web", "python"]))
    with pytest.raises(KeywordTableError):
        decompose("Write a Python web app", config)


def test_technology_names_do_not_trigger_tasks():
    assert decompose("Create a FastAPI service").kinds() == [TaskKind.CODE_GENERATION]
