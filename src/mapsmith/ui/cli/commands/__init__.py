"""CLI command implementations exposed via ``mapsmith.ui.cli``."""

from __future__ import annotations

from .process import process
from .strip import strip


__all__ = ["process", "strip"]
