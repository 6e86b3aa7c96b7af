from __future__ import annotations

from pathlib import Path
from typing import List, Mapping, NoReturn, Optional

import typer

from flake_checker import __version__
from flake_checker.checks import Issue
from flake_checker.config import load_policy
from flake_checker.diagnostics import warn
from flake_checker.exceptions import FlakeCheckerError
from flake_checker.lockfile import DEFAULT_LOCK_PATH, load_flake_lock
from flake_checker.runner import check_flake_lock
from flake_checker.summary import append_summary, render_summary, summary_destination

EXIT_FAILURE = 2

app = typer.Typer(add_completion=False)


def run_flake_check(
    flake_lock_path: Path,
    *,
    environ: Optional[Mapping[str, str]] = None,
) -> List[Issue]:
    """Check one lock file and append the markdown summary.

    Every input is resolved before the summary is written, so a failure
    leaves the destination untouched.
    """
    flake_lock = load_flake_lock(flake_lock_path)
    if flake_lock.missing_root():
        warn(flake_lock_path, f"root node `{flake_lock.root}` is not present in nodes")
    config = load_policy()
    destination = summary_destination(environ)
    issues = check_flake_lock(flake_lock, config)
    append_summary(render_summary(issues), destination)
    return issues


def _fail(error: FlakeCheckerError) -> NoReturn:
    typer.echo(f"flake-checker: {error}", err=True)
    raise typer.Exit(code=EXIT_FAILURE)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"flake-checker {__version__}")
        raise typer.Exit()


@app.command()
def main(
    flake_lock_path: Path = typer.Argument(
        DEFAULT_LOCK_PATH,
        help="The path to the flake.lock file to check.",
    ),
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show the version and exit.",
    ),
) -> None:
    """A flake.lock checker for Nix projects."""
    try:
        issues = run_flake_check(flake_lock_path)
    except FlakeCheckerError as exc:
        _fail(exc)
    typer.echo(f"flake-checker: {len(issues)} issue(s) found in {flake_lock_path}")
