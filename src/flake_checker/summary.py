"""Markdown job summary for a check run."""

from __future__ import annotations

from functools import lru_cache
import os
from pathlib import Path
from typing import Mapping, Sequence

from jinja2 import Environment, PackageLoader, StrictUndefined

from flake_checker.checks import Issue
from flake_checker.exceptions import SummaryError

SUMMARY_ENV_VAR = "GITHUB_STEP_SUMMARY"
SUMMARY_TEMPLATE = "summary.md.j2"


@lru_cache(maxsize=1)
def _environment() -> Environment:
    return Environment(
        loader=PackageLoader("flake_checker", "templates"),
        autoescape=False,
        undefined=StrictUndefined,
        trim_blocks=True,
        lstrip_blocks=True,
        keep_trailing_newline=True,
    )


def render_summary(issues: Sequence[Issue]) -> str:
    template = _environment().get_template(SUMMARY_TEMPLATE)
    return template.render(issues=[issue.to_payload() for issue in issues])


def summary_destination(environ: Mapping[str, str] | None = None) -> Path:
    env = os.environ if environ is None else environ
    raw = env.get(SUMMARY_ENV_VAR, "").strip()
    if not raw:
        raise SummaryError(f"summary markdown file not found: ${SUMMARY_ENV_VAR} is not set")
    return Path(raw)


def append_summary(markdown: str, destination: Path) -> None:
    try:
        with destination.open("a", encoding="utf-8") as handle:
            handle.write(markdown)
    except OSError as exc:
        raise SummaryError(f"error writing summary markdown to {destination}: {exc}") from exc
