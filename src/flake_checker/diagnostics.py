from __future__ import annotations

from pathlib import Path
from typing import Callable

import typer


def annotation(level: str, path: Path | str, message: str) -> str:
    return f"::{level} file={path}::{message}"


def warn(path: Path | str, message: str, *, echo_fn: Callable[[str], None] = typer.echo) -> None:
    """Emit a GitHub Actions warning annotation on stdout."""
    echo_fn(annotation("warning", path, message))
