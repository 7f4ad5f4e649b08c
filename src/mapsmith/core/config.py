"""Configuration model for the filesystem asset environment.

EnvironmentConfig

`root` (`Path`)
: Base directory that load paths are resolved against. Relative roots read
  from a configuration file are anchored at the file's directory.

`paths` (`list[Path]`)
: Load paths searched in order when resolving logical asset paths.

`prefix` (`str`)
: Public URL prefix prepended to logical paths, e.g. ``/assets``.

`map_suffix` (`str`)
: Suffix of the sidecar file holding an asset's raw source map.

`digest_public_paths` (`bool`)
: Embed the content fingerprint of each resolved asset in its public path.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator
import yaml

from .exceptions import ConfigurationError


class EnvironmentConfig(BaseModel):
    """Settings driving asset resolution and public path formatting."""

    model_config = ConfigDict(extra="forbid")

    root: Path = Field(default_factory=Path.cwd)
    paths: list[Path] = Field(default_factory=lambda: [Path(".")])
    prefix: str = "/assets"
    map_suffix: str = ".map"
    digest_public_paths: bool = False

    @field_validator("prefix")
    @classmethod
    def normalise_prefix(cls, value: str) -> str:
        """Keep a single leading slash and drop trailing ones."""
        stripped = value.strip().strip("/")
        return f"/{stripped}" if stripped else ""

    @field_validator("map_suffix")
    @classmethod
    def check_map_suffix(cls, value: str) -> str:
        if not value:
            raise ValueError("map_suffix must not be empty")
        return value

    def load_paths(self) -> list[Path]:
        """Return absolute load paths in search order."""
        root = self.root.expanduser()
        return [(root / path).resolve() for path in self.paths]


def load_config(path: Path, **overrides: Any) -> EnvironmentConfig:
    """Read an :class:`EnvironmentConfig` from a YAML file.

    Keyword overrides that are not ``None`` replace the values read from the
    file.
    """
    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigurationError(f"Unable to read configuration '{path}': {exc}") from exc
    try:
        data = yaml.safe_load(raw) or {}
    except yaml.YAMLError as exc:
        raise ConfigurationError(f"Invalid YAML in '{path}': {exc}") from exc
    if not isinstance(data, dict):
        raise ConfigurationError(f"Configuration '{path}' must contain a mapping.")

    overrides = {key: value for key, value in overrides.items() if value is not None}
    if "root" in overrides:
        # An overriding root is relative to the working directory.
        overrides["root"] = Path(overrides["root"]).expanduser().resolve()
    data.update(overrides)
    base_dir = path.resolve().parent
    root = Path(data.get("root") or ".").expanduser()
    data["root"] = root if root.is_absolute() else base_dir / root
    try:
        return EnvironmentConfig.model_validate(data)
    except ValidationError as exc:
        raise ConfigurationError(f"Invalid configuration '{path}': {exc}") from exc


__all__ = ["EnvironmentConfig", "load_config"]
