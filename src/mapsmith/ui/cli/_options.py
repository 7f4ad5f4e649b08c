"""Shared Typer option definitions for CLI commands."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer


INPUTS_PANEL = "Input Handling"
ENVIRONMENT_PANEL = "Environment"
OUTPUT_PANEL = "Output"

AssetArgument = Annotated[
    Path,
    typer.Argument(
        metavar="ASSET",
        help="Script or stylesheet whose source map should be processed.",
        exists=True,
        file_okay=True,
        dir_okay=False,
        readable=True,
        resolve_path=True,
    ),
]

ContentTypeOption = Annotated[
    str | None,
    typer.Option(
        "--content-type",
        "-t",
        help=(
            "Source map content type (application/js-sourcemap+json or "
            "application/css-sourcemap+json). Inferred from ASSET when omitted."
        ),
        rich_help_panel=INPUTS_PANEL,
    ),
]

LinkOption = Annotated[
    list[str] | None,
    typer.Option(
        "--link",
        "-l",
        help="Asset path already linked by the artefact. May be repeated.",
        rich_help_panel=INPUTS_PANEL,
    ),
]

ConfigOption = Annotated[
    Path | None,
    typer.Option(
        "--config",
        "-c",
        help="YAML file describing the asset environment.",
        exists=True,
        dir_okay=False,
        resolve_path=True,
        rich_help_panel=ENVIRONMENT_PANEL,
    ),
]

RootOption = Annotated[
    Path | None,
    typer.Option(
        "--root",
        help="Base directory for load paths (defaults to the current directory).",
        file_okay=False,
        resolve_path=True,
        rich_help_panel=ENVIRONMENT_PANEL,
    ),
]

LoadPathOption = Annotated[
    list[Path] | None,
    typer.Option(
        "--load-path",
        "-I",
        help="Load path searched when resolving assets. May be repeated.",
        rich_help_panel=ENVIRONMENT_PANEL,
    ),
]

PrefixOption = Annotated[
    str | None,
    typer.Option(
        "--prefix",
        help="Public URL prefix prepended to asset paths.",
        rich_help_panel=ENVIRONMENT_PANEL,
    ),
]

DigestOption = Annotated[
    bool,
    typer.Option(
        "--digest",
        help="Embed content fingerprints in public asset paths.",
        rich_help_panel=ENVIRONMENT_PANEL,
    ),
]

OutputOption = Annotated[
    Path | None,
    typer.Option(
        "--output",
        "-o",
        help="Write the processed source map to this file instead of stdout.",
        dir_okay=False,
        resolve_path=True,
        rich_help_panel=OUTPUT_PANEL,
    ),
]

VerbosityOption = Annotated[
    int,
    typer.Option(
        "--verbose",
        "-v",
        count=True,
        help="Increase diagnostic output. Repeat for more detail.",
    ),
]

DebugOption = Annotated[
    bool,
    typer.Option(
        "--debug",
        help="Show full tracebacks when an error occurs.",
    ),
]
