"""Shared pytest configuration, marker assignment and fixtures."""

from __future__ import annotations

from pathlib import Path

import pytest


def pytest_collection_modifyitems(
    config: pytest.Config, items: list[pytest.Item]
) -> None:
    """Attach suite markers based on test file path."""
    del config
    for item in items:
        path = Path(str(item.fspath))
        parts = set(path.parts)
        if "e2e_tests" in parts:
            item.add_marker(pytest.mark.e2e)
        elif "integration_tests" in parts:
            item.add_marker(pytest.mark.integration)
        elif "unit_tests" in parts:
            item.add_marker(pytest.mark.unit)


@pytest.fixture
def workdir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run the test inside an empty temporary working directory."""
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def answers() -> list[str]:
    """Operator answers for the seven metadata prompts, in prompt order."""
    return [
        "demo",
        "https://github.com/quantii/demo.git",
        "0.1.0",
        "Alice, Bob",
        "A simple app",
        "icon.svg",
        "a,b,c",
    ]


@pytest.fixture
def expected_manifest() -> str:
    """Manifest text rendered from the ``answers`` fixture."""
    return (
        "[app]\n"
        'name = "demo"\n'
        'repo = "https://github.com/quantii/demo.git"\n'
        'version = "0.1.0"\n'
        'author = ["Alice, Bob"]\n'
        'description = "A simple app"\n'
        'icon = "icon.svg"\n'
        'other_metadata = "[a,b,c]"\n'
    )
