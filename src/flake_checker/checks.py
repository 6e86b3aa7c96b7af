"""Policy checks evaluated over a parsed lock file."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, FrozenSet, List, Protocol
import time

from flake_checker.lockfile import FlakeLock
from flake_checker.selector import Selector, select_tracked

SECONDS_PER_DAY = 86_400


class IssueKind(str, Enum):
    DISALLOWED = "disallowed"
    OUTDATED = "outdated"


@dataclass(frozen=True)
class Issue:
    kind: IssueKind
    message: str

    def to_payload(self) -> dict[str, str]:
        return {"kind": self.kind.value, "message": self.message}


class Check(Protocol):
    def run(self, flake_lock: FlakeLock) -> List[Issue]:
        ...


def _unix_now() -> int:
    return int(time.time())


def truncated_days(seconds: int) -> int:
    """Whole days in ``seconds``, truncated toward zero."""
    days = abs(seconds) // SECONDS_PER_DAY
    return days if seconds >= 0 else -days


@dataclass(frozen=True)
class ReferenceCheck:
    allowed_refs: FrozenSet[str]
    selector: Selector = select_tracked

    def run(self, flake_lock: FlakeLock) -> List[Issue]:
        issues: List[Issue] = []
        for name, node in self.selector(flake_lock.nodes).items():
            if node.origin is None or node.origin.git_ref is None:
                continue
            git_ref = node.origin.git_ref
            if git_ref in self.allowed_refs:
                continue
            issues.append(
                Issue(
                    kind=IssueKind.DISALLOWED,
                    message=(
                        f"dependency `{name}` has a Git ref of `{git_ref}` "
                        "which is not explicitly allowed"
                    ),
                )
            )
        return issues


@dataclass(frozen=True)
class MaxAgeCheck:
    max_days: int
    selector: Selector = select_tracked
    clock_fn: Callable[[], int] = field(default=_unix_now, compare=False)

    def run(self, flake_lock: FlakeLock) -> List[Issue]:
        issues: List[Issue] = []
        now = self.clock_fn()
        for name, node in self.selector(flake_lock.nodes).items():
            if node.locked is None:
                continue
            age_days = truncated_days(now - node.locked.last_modified)
            if age_days > self.max_days:
                issues.append(
                    Issue(
                        kind=IssueKind.OUTDATED,
                        message=(
                            f"dependency `{name}` is **{age_days}** days old, "
                            f"which is over the max of **{self.max_days}**"
                        ),
                    )
                )
        return issues
