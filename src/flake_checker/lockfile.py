"""Typed model of a Nix ``flake.lock`` document."""

from __future__ import annotations

from pathlib import Path
from typing import Dict, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from flake_checker.exceptions import LockFileError

DEFAULT_LOCK_PATH = Path("flake.lock")


class _LockModel(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True, strict=True)


class Original(_LockModel):
    """How a dependency was specified in ``flake.nix``."""

    owner: Optional[str] = None
    repo: Optional[str] = None
    node_type: str = Field(alias="type")
    git_ref: Optional[str] = Field(default=None, alias="ref")


class Locked(_LockModel):
    """The pinned state a dependency resolved to."""

    last_modified: int = Field(alias="lastModified")
    nar_hash: str = Field(alias="narHash")
    owner: Optional[str] = None
    repo: Optional[str] = None
    rev: Optional[str] = None
    node_type: str = Field(alias="type")


class SingleRef(_LockModel):
    name: str

    @property
    def names(self) -> Tuple[str, ...]:
        return (self.name,)


class RefList(_LockModel):
    refs: Tuple[str, ...] = ()

    @property
    def names(self) -> Tuple[str, ...]:
        return self.refs


Input = Union[SingleRef, RefList]


def decode_input(raw: object) -> Input:
    # A lock file writes either a node name or a path of node names (``follows``).
    if isinstance(raw, (SingleRef, RefList)):
        return raw
    if isinstance(raw, str):
        return SingleRef(name=raw)
    if isinstance(raw, list) and all(isinstance(item, str) for item in raw):
        return RefList(refs=tuple(raw))
    raise ValueError(f"input must be a node name or a list of node names, got {raw!r}")


class Node(_LockModel):
    inputs: Optional[Dict[str, Input]] = None
    locked: Optional[Locked] = None
    origin: Optional[Original] = Field(default=None, alias="original")

    @field_validator("inputs", mode="before")
    @classmethod
    def _decode_inputs(cls, value: object) -> object:
        if not isinstance(value, dict):
            return value
        return {name: decode_input(raw) for name, raw in value.items()}


class FlakeLock(_LockModel):
    nodes: Dict[str, Node]
    root: str
    version: int = Field(ge=0)

    def missing_root(self) -> bool:
        return self.root not in self.nodes


def parse_flake_lock(text: str | bytes) -> FlakeLock:
    try:
        return FlakeLock.model_validate_json(text)
    except ValidationError as exc:
        raise LockFileError(f"couldn't parse flake.lock: {exc}") from exc


def load_flake_lock(path: Path = DEFAULT_LOCK_PATH) -> FlakeLock:
    try:
        text = path.read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        raise LockFileError(f"couldn't parse flake.lock: {exc}") from exc
    except OSError as exc:
        raise LockFileError(f"couldn't access flake.lock: {exc}") from exc
    return parse_flake_lock(text)
