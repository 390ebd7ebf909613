import pytest

# This hook is a pluggy hook specification from pytest
# hookwrapper=True allows us to wrap the execution and access the result
@pytest.hookimpl(tryfirst=True, hookwrapper=True)
def pytest_runtest_makereport(item, call):
    """
    Extends the test report with the test docstring on failure.
    """
    outcome = yield
    rep = outcome.get_result()

    if rep.when == "call" and rep.failed:
        doc = getattr(item.obj, "__doc__", None)
        if doc:
            from inspect import cleandoc
            rep.sections.append(("Test Description", cleandoc(doc)))


@pytest.hookimpl
def pytest_terminal_summary(terminalreporter, exitstatus, config):
    """
    Add a summary section listing failed tests.
    """
    failures = terminalreporter.stats.get("failed", [])

    if failures:
        terminalreporter.section("Codeplan Debug Context", sep="=", red=True, bold=True)
        terminalreporter.write_line(f"Found {len(failures)} failures.")
        for report in failures:
            terminalreporter.write_line(f"  {report.nodeid}")


@pytest.fixture
def scenario_b_prompt() -> str:
    return (
        "Build a secure authenticated REST API in TypeScript with Express "
        "that must be PCI compliant and needs extensive testing"
    )
