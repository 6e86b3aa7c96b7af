"""Error types raised by flake-checker."""

from __future__ import annotations


class FlakeCheckerError(RuntimeError):
    """Base class for failures that abort a check run.

    Each subclass maps to one fatal condition; the CLI reports the message
    and exits non-zero without writing a summary.
    """


class LockFileError(FlakeCheckerError):
    """The lock file could not be read or did not parse."""


class PolicyError(FlakeCheckerError):
    """The embedded policy document is malformed.

    This is a packaging defect rather than a user error.
    """


class SummaryError(FlakeCheckerError):
    """The summary destination is missing or could not be written."""
