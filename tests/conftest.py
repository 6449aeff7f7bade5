"""Shared fixtures for todo tests."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from click.testing import CliRunner


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep a developer's TODO_DATA_DIR out of the tests."""
    monkeypatch.delenv("TODO_DATA_DIR", raising=False)


@pytest.fixture
def data_dir(tmp_path: Path) -> Path:
    """A data directory that does not exist yet."""
    return tmp_path / "data"


@pytest.fixture
def tasks_file(data_dir: Path) -> Path:
    return data_dir / "tasks.json"


@pytest.fixture
def sample_tasks_data() -> list[dict]:
    """Sample stored task records."""
    return [
        {"id": 1, "text": "buy milk", "done": True, "created_at": 1700000000},
        {"id": 2, "text": "write report", "done": False, "created_at": 1700000100},
        {"id": 3, "text": "call mum", "done": True, "created_at": 1700000200},
    ]


@pytest.fixture
def sample_tasks_file(tasks_file: Path, sample_tasks_data: list[dict]) -> Path:
    """Write the sample records to disk."""
    tasks_file.parent.mkdir(parents=True)
    tasks_file.write_text(json.dumps(sample_tasks_data, indent=2))
    return tasks_file


@pytest.fixture
def cli_runner(data_dir: Path) -> CliRunner:
    """A CLI runner pointed at the temporary data directory."""
    return CliRunner(env={"TODO_DATA_DIR": str(data_dir)})
