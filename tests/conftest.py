from __future__ import annotations

import json
from pathlib import Path
from typing import Callable

import pytest

from flake_checker.config import load_policy


@pytest.fixture(autouse=True)
def _fresh_policy_cache():
    load_policy.cache_clear()
    yield
    load_policy.cache_clear()


@pytest.fixture
def write_flake_lock(tmp_path: Path) -> Callable[..., Path]:
    def _write(payload: dict[str, object], *, name: str = "flake.lock") -> Path:
        path = tmp_path / name
        path.write_text(json.dumps(payload, indent=2) + "\n", encoding="utf-8")
        return path

    return _write
