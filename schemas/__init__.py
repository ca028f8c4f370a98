"""Bundled application schema documents."""

from __future__ import annotations

from pathlib import Path
from typing import Final

APPLICATIONS_DIR: Final[Path] = Path(__file__).resolve().parent / "applications"

__all__ = ["APPLICATIONS_DIR"]
