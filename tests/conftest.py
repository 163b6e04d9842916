from __future__ import annotations

import json
from pathlib import Path

import pytest


def repo_root() -> Path:
    """
    Find the repository root by walking upward until we find pyproject.toml.
    This is robust regardless of where tests live.
    """
    start = Path(__file__).resolve()
    for p in [start] + list(start.parents):
        if (p / "pyproject.toml").exists():
            return p
    raise RuntimeError("repo_root(): could not find pyproject.toml walking upward")


def sample_assets_dir() -> Path:
    """
    Committed reference vectors for tests.
    """
    return repo_root() / "tests" / "sample_assets"


@pytest.fixture(scope="session")
def lfsr_golden() -> dict:
    """
    Pinned LFSR digest vectors. Hex strings for messages, ints for values.
    """
    path = sample_assets_dir() / "lfsr_golden.json"
    return json.loads(path.read_text(encoding="utf-8"))
