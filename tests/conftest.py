"""Shared fixtures."""

import json
from pathlib import Path
from typing import Any

import pytest


@pytest.fixture
def run_definition_data() -> dict[str, Any]:
    """A run definition with one outcome per verdict."""
    return {
        "outcomes": [
            {
                "name": "libcore.java.lang.IntegerTest#testParse",
                "result": "success",
                "output": ["parsed 3 values"],
                "date": "2024-05-01T10:00:00Z",
            },
            {
                "name": "libcore.java.lang.IntegerTest#testOverflow",
                "result": "exec_failed",
                "output": ["java.lang.AssertionError: expected <1>\r\n", "\tat Foo"],
            },
            {
                "name": "libcore.java.net.SocketTest",
                "result": "unsupported",
                "output": [],
            },
        ],
        "expectations": {
            "libcore.java.net.SocketTest": {"result": "success"},
        },
    }


@pytest.fixture
def run_definition_path(tmp_path: Path, run_definition_data: dict[str, Any]) -> Path:
    """The run definition written to disk."""
    path = tmp_path / "run.json"
    path.write_text(json.dumps(run_definition_data), encoding="utf-8")
    return path
