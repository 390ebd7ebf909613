"""Tests for the command-line interface."""

import json

from typer.testing import CliRunner

from codeplan.cli import app

runner = CliRunner()


def test_decompose_json(scenario_b_prompt):
    result = runner.invoke(app, ["decompose", scenario_b_prompt, "--json"])
    assert result.exit_code == 0, result.output
    payload = json.loads(result.stdout)
    kinds = [task["kind"] for task in payload["tasks"]]
    assert kinds[0] == "code_generation"
    assert "security" in kinds
    assert payload["validation"]["is_valid"] is True


def test_decompose_table_output():
    result = runner.invoke(app, ["decompose", "Write a class with a method in Python"])
    assert result.exit_code == 0, result.output
    assert "Language: python" in result.stdout
    assert "Tasks (3)" in result.stdout


def test_command_shortcut():
    result = runner.invoke(app, ["-c", "Write a class with a method in Python", "--json"])
    assert result.exit_code == 0, result.output
    assert json.loads(result.stdout)["request"]["language"] == "python"


def test_decompose_rejects_short_prompt():
    result = runner.invoke(app, ["decompose", "hi"])
    assert result.exit_code == 1
    assert "too short" in result.stdout


def test_validate_reports_suggestions():
    result = runner.invoke(app, ["validate", "Create a function that sorts numbers", "--json"])
    assert result.exit_code == 0, result.output
    payload = json.loads(result.stdout)
    assert "Consider specifying the programming language." in payload["suggestions"]


def test_analyze_json():
    result = runner.invoke(app, ["analyze", "Write 2 Flask views", "--json"])
    assert result.exit_code == 0, result.output
    assert json.loads(result.stdout)["entities"]["technologies"] == ["Flask"]


def test_bad_config_exits_with_error(tmp_path):
    path = tmp_path / "codeplan.yaml"
    path.write_text("keywords:\n  frameworks: [python]\n")
    result = runner.invoke(app, ["decompose", "Write a Python function", "--config", str(path)])
    assert result.exit_code == 1
    assert "python" in result.stdout


def test_version():
    result = runner.invoke(app, ["version"])
    assert result.exit_code == 0
    assert "0.1.0" in result.stdout
