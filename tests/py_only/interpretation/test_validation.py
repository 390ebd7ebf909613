"""Tests for prompt validation and phrase completion."""

import pytest

from codeplan.config import ValidationSettings
from codeplan.interpretation import suggest_completions, validate_prompt

STRUCTURE_WARNING = "Consider specifying the type of code you want to generate (function, class, component, etc.)."
LANGUAGE_SUGGESTION = "Consider specifying the programming language."


def test_short_prompt_is_invalid():
    result = validate_prompt("short")
    assert result.is_valid is False
    assert result.errors == ["Prompt is too short. Please provide more details."]


def test_prompt_at_length_floor_is_valid():
    result = validate_prompt("create a function")
    assert result.is_valid is True
    assert result.errors == []


def test_long_prompt_is_only_a_warning():
    result = validate_prompt("python function " + "x" * 1000)
    assert result.is_valid is True
    assert "Prompt is very long. Consider breaking it into smaller requests." in result.warnings


def test_missing_structural_keyword_warns():
    result = validate_prompt("Build a python API")
    assert STRUCTURE_WARNING in result.warnings
    assert LANGUAGE_SUGGESTION not in result.suggestions


def test_missing_language_is_a_suggestion():
    result = validate_prompt("Create a function that sorts numbers")
    assert result.is_valid is True
    assert STRUCTURE_WARNING not in result.warnings
    assert LANGUAGE_SUGGESTION in result.suggestions


def test_trailing_verb_triggers_completions():
    result = validate_prompt("Write a Python class and then create")
    assert 'Did you mean to say "create a function"?' in result.suggestions


def test_ellipsis_triggers_completions():
    result = validate_prompt("build a comp...")
    assert 'Did you mean to say "build a component"?' in result.suggestions


def test_complete_sentence_does_not_trigger_completions():
    result = validate_prompt("Write a Python class to create.")
    assert not any(suggestion.startswith("Did you mean") for suggestion in result.suggestions)


def test_custom_thresholds():
    settings = ValidationSettings(min_prompt_length=2, max_prompt_length=20)
    result = validate_prompt("a python function, please", settings)
    assert result.is_valid is True
    assert "Prompt is very long. Consider breaking it into smaller requests." in result.warnings


@pytest.mark.parametrize(
    "text",
    [
        pytest.param("", id="empty"),
        pytest.param("...", id="only-ellipsis"),
        pytest.param("generate", id="only-verb"),
        pytest.param("🚀" * 2000, id="emoji"),
    ],
)
def test_validation_never_raises(text):
    result = validate_prompt(text)
    assert isinstance(result.to_dict(), dict)


@pytest.mark.parametrize(
    ("partial", "expected"),
    [
        pytest.param("create", [], id="single-word"),
        pytest.param("please create", ["create a function"], id="trailing-verb"),
        pytest.param("build a comp...", ["build a component"], id="partial-word"),
        pytest.param("now develop an", ["develop an API"], id="keeps-phrase-casing"),
        pytest.param("write a story", [], id="no-prefix-match"),
    ],
)
def test_suggest_completions(partial, expected):
    assert suggest_completions(partial) == expected


def test_suggest_completions_limit():
    assert suggest_completions("please create", limit=0) == []
