"""flake-checker package root."""

__version__ = "0.1.0"

from flake_checker.checks import Issue, IssueKind, MaxAgeCheck, ReferenceCheck
from flake_checker.config import Config, load_policy
from flake_checker.lockfile import FlakeLock, load_flake_lock, parse_flake_lock
from flake_checker.runner import build_checks, check_flake_lock

__all__ = [
    "__version__",
    "Config",
    "FlakeLock",
    "Issue",
    "IssueKind",
    "MaxAgeCheck",
    "ReferenceCheck",
    "build_checks",
    "check_flake_lock",
    "load_flake_lock",
    "load_policy",
    "parse_flake_lock",
]
