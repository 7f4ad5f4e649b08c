"""Implementation of the ``mapsmith process`` command."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import typer

from mapsmith.adapters.filesystem import FileSystemEnvironment, content_type_for
from mapsmith.core.config import EnvironmentConfig, load_config
from mapsmith.core.content_types import SourceMapKind
from mapsmith.core.exceptions import SourceMapProcessingError, UnsupportedContentTypeError
from mapsmith.core.models import ProcessRequest, ProcessResult
from mapsmith.core.processor import SourceMapProcessor

from .._options import (
    AssetArgument,
    ConfigOption,
    ContentTypeOption,
    DigestOption,
    LinkOption,
    LoadPathOption,
    OutputOption,
    PrefixOption,
    RootOption,
)
from ..diagnostics import CliEmitter
from ..state import emit_error, get_cli_state


def build_config(
    *,
    config: Path | None,
    root: Path | None,
    load_paths: list[Path] | None,
    prefix: str | None,
    digest: bool | None,
) -> EnvironmentConfig:
    """Merge command line overrides into the configured environment."""
    overrides: dict[str, Any] = {
        "root": root,
        "paths": load_paths or None,
        "prefix": prefix,
        "digest_public_paths": digest,
    }
    if config is not None:
        return load_config(config, **overrides)
    return EnvironmentConfig(**{key: value for key, value in overrides.items() if value is not None})


def infer_content_type(asset: Path, map_suffix: str = ".map") -> tuple[str, Path]:
    """Return the source map content type for ``asset`` and its subject file."""
    subject = asset
    if asset.name.endswith(map_suffix):
        subject = asset.with_name(asset.name[: -len(map_suffix)])
    companion = content_type_for(subject)
    if companion is None:
        raise UnsupportedContentTypeError(content_type_for(asset))
    return SourceMapKind.for_companion(companion).content_type, subject


def _render_links(result: ProcessResult) -> None:
    from rich.table import Table

    state = get_cli_state()
    table = Table(title="Source map links", header_style="bold cyan")
    table.add_column("Asset", style="magenta")
    for uri in sorted(str(link) for link in result.links):
        table.add_row(uri)
    state.err_console.print(table)


def process(
    asset: AssetArgument,
    content_type: ContentTypeOption = None,
    config: ConfigOption = None,
    root: RootOption = None,
    load_paths: LoadPathOption = None,
    prefix: PrefixOption = None,
    digest: DigestOption = False,
    links: LinkOption = None,
    output: OutputOption = None,
) -> None:
    """Rewrite the source map of ASSET to public paths and list its links."""
    state = get_cli_state()
    try:
        settings = build_config(
            config=config,
            root=root,
            load_paths=load_paths,
            prefix=prefix,
            digest=digest or None,
        )
        inferred_type, subject = infer_content_type(asset, settings.map_suffix)
        environment = FileSystemEnvironment(settings)
        request = ProcessRequest(
            content_type=content_type or inferred_type,
            filename=str(subject),
            environment=environment,
            metadata={"links": {environment.resolve(link) for link in links or ()}},
        )
        result = SourceMapProcessor(emitter=CliEmitter(state)).process(request)
    except SourceMapProcessingError as exc:
        if state.show_tracebacks:
            raise
        emit_error(str(exc), exception=exc)
        raise typer.Exit(code=1) from exc

    if output is not None:
        output.parent.mkdir(parents=True, exist_ok=True)
        output.write_text(result.data, encoding="utf-8")
    else:
        typer.echo(result.data)

    if state.verbosity >= 1:
        _render_links(result)


__all__ = ["build_config", "infer_content_type", "process"]
