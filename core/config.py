"""Configuration loader for the intake wizard.

Reads environment variables (optionally from a ``.env`` file) or Streamlit
secrets and exposes the settings used by the Streamlit shell. A clear runtime
error is raised for an unknown default category.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

from core.schema import ApplicationCategory

try:  # pragma: no cover - streamlit not always available
    import streamlit as st
except ImportError:  # pragma: no cover
    st = None  # type: ignore

_DEFAULT_CATEGORY = ApplicationCategory.WORKERS_COMPENSATION
_DEFAULT_LOG_LEVEL = "INFO"


@dataclass(slots=True)
class Settings:
    """Runtime configuration values.

    Attributes:
        schema_dir: Directory holding application JSON documents, or ``None``
            to use the bundled ``schemas/applications`` directory.
        default_category: Category preselected in the UI.
        log_level: Root logging level name.
        debug: Dump submitted values to a temp file for inspection.
    """

    schema_dir: Optional[Path]
    default_category: ApplicationCategory
    log_level: str
    debug: bool


def _as_bool(value: Optional[str]) -> bool:
    """Interpret truthy string values as boolean True."""

    if value is None:
        return False
    return value.strip().lower() in {"1", "true", "yes", "on"}


def _read_secrets() -> dict[str, str]:
    if st is None:
        return {}
    try:
        return {key: str(value) for key, value in dict(st.secrets).items()}
    except FileNotFoundError:
        return {}


def load_settings() -> Settings:
    """Load settings from env vars, ``.env`` or Streamlit secrets.

    Raises:
        RuntimeError: If ``INTAKE_DEFAULT_CATEGORY`` is not a known category.
    """

    load_dotenv()
    secrets = _read_secrets()

    def _get(key: str) -> Optional[str]:
        return secrets.get(key) or os.getenv(key)

    schema_dir_raw = (_get("INTAKE_SCHEMA_DIR") or "").strip()
    category_raw = (_get("INTAKE_DEFAULT_CATEGORY") or "").strip()
    try:
        category = ApplicationCategory(category_raw) if category_raw else _DEFAULT_CATEGORY
    except ValueError as exc:
        allowed = ", ".join(item.value for item in ApplicationCategory)
        raise RuntimeError(
            f"INTAKE_DEFAULT_CATEGORY={category_raw!r} is not supported. Use one of: {allowed}."
        ) from exc

    return Settings(
        schema_dir=Path(schema_dir_raw).expanduser() if schema_dir_raw else None,
        default_category=category,
        log_level=(_get("INTAKE_LOG_LEVEL") or _DEFAULT_LOG_LEVEL).strip().upper(),
        debug=_as_bool(_get("INTAKE_DEBUG")),
    )


__all__ = ["Settings", "load_settings"]
