"""Unit test fixtures."""

import json
from pathlib import Path
from typing import Any

import pytest


@pytest.fixture
def write_pairs(tmp_path: Path):
    """Factory writing pair objects to a JSONL file and returning its path."""

    def _factory(pairs: list[Any], name: str = "pairs.jsonl") -> Path:
        path = tmp_path / name
        with path.open("w", encoding="utf-8") as f:
            for pair in pairs:
                if isinstance(pair, str):
                    f.write(pair + "\n")
                else:
                    f.write(json.dumps(pair) + "\n")
        return path

    return _factory


@pytest.fixture
def read_events():
    """Read all JSONL events from a file."""

    def _read(path: Path) -> list[dict[str, Any]]:
        with path.open() as f:
            return [json.loads(line) for line in f if line.strip()]

    return _read
