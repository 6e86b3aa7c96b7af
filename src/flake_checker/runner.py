"""Run the configured checks over a lock file."""

from __future__ import annotations

from typing import List, Sequence

from flake_checker.checks import Check, Issue, MaxAgeCheck, ReferenceCheck
from flake_checker.config import Config
from flake_checker.lockfile import FlakeLock


def build_checks(config: Config) -> tuple[Check, ...]:
    # Order is observable: outdated issues are reported before disallowed refs.
    return (
        MaxAgeCheck(max_days=config.max_days),
        ReferenceCheck(allowed_refs=frozenset(config.allowed_refs)),
    )


def run_checks(flake_lock: FlakeLock, checks: Sequence[Check]) -> List[Issue]:
    issues: List[Issue] = []
    for check in checks:
        issues.extend(check.run(flake_lock))
    return issues


def check_flake_lock(flake_lock: FlakeLock, config: Config) -> List[Issue]:
    return run_checks(flake_lock, build_checks(config))
