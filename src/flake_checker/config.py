from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache
from importlib import resources
import json
from pathlib import Path
from typing import Mapping

from flake_checker.exceptions import PolicyError

POLICY_RESOURCE = "policy.json"


@dataclass(frozen=True)
class Config:
    allowed_refs: tuple[str, ...]
    max_days: int


def _as_ref_list(raw: object) -> tuple[str, ...]:
    if not isinstance(raw, list) or any(not isinstance(item, str) for item in raw):
        raise PolicyError("policy invalid allowed_refs: expected list[str]")
    return tuple(raw)


def _as_int(raw: object, *, field_name: str) -> int:
    # JSON booleans decode to bool, which is an int subclass.
    if isinstance(raw, bool) or not isinstance(raw, int):
        raise PolicyError(f"policy invalid {field_name}: expected int")
    return raw


def policy_from_mapping(payload: Mapping[str, object]) -> Config:
    return Config(
        allowed_refs=_as_ref_list(payload.get("allowed_refs")),
        max_days=_as_int(payload.get("max_days"), field_name="max_days"),
    )


def _read_policy_text(path: Path | None) -> str:
    if path is None:
        return resources.files("flake_checker").joinpath(POLICY_RESOURCE).read_text(encoding="utf-8")
    return path.read_text(encoding="utf-8")


@lru_cache(maxsize=1)
def load_policy(path: Path | None = None) -> Config:
    """Load the policy, defaulting to the copy shipped inside the package.

    ``path`` exists for tests; the CLI always uses the packaged document.
    """
    try:
        raw = json.loads(_read_policy_text(path))
    except (OSError, ValueError) as exc:
        raise PolicyError(f"policy.json is malformed: {exc}") from exc
    if not isinstance(raw, Mapping):
        raise PolicyError("policy root must be a mapping")
    return policy_from_mapping(raw)
