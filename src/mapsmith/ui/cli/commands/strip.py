"""Inspect fingerprinted asset names."""

from __future__ import annotations

from typing import Annotated

import typer

from mapsmith.core.fingerprint import strip_fingerprint


def strip(
    paths: Annotated[
        list[str],
        typer.Argument(metavar="PATH...", help="Asset paths to inspect."),
    ],
) -> None:
    """Print the bare path and fingerprint of each PATH."""
    for path in paths:
        bare_path, fingerprint = strip_fingerprint(path)
        typer.echo(f"{bare_path}\t{fingerprint or '-'}")
