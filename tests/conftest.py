"""Pytest configuration and fixtures for test suite."""

import sys
from collections.abc import Iterator
from pathlib import Path

import pytest

# Add src directory to path for imports
SRC_PATH = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(SRC_PATH))

from unionfind.audit import AuditLogger  # noqa: E402


class Token:
    """Opaque element with identity semantics.

    Mirrors elements that have no meaningful value equality: each
    instance is only equal to itself.
    """

    def __init__(self, name: str) -> None:
        self.name = name

    def __repr__(self) -> str:
        return f"Token({self.name!r})"


@pytest.fixture
def tokens() -> dict[str, Token]:
    """Named opaque elements used by the merge scenarios."""
    names = ["child", "parent", "child1", "parent1", "child2", "parent2"]
    return {name: Token(name) for name in names}


@pytest.fixture
def audit_logger(tmp_path: Path) -> Iterator[AuditLogger]:
    """Create a logger that auto-closes after test."""
    lg = AuditLogger(run_id="test_run", log_path=tmp_path / "events.jsonl")
    yield lg
    lg.close()
