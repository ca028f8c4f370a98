"""Central accessors for application schema documents.

Schemas are static JSON documents stored one per category
(``<category>.json``). The bundled documents live in
``schemas/applications``; deployments can point ``INTAKE_SCHEMA_DIR`` at a
different directory. Loaded applications are cached since they are immutable.
"""

from __future__ import annotations

import logging
from functools import lru_cache
from pathlib import Path

from core.errors import SchemaLoadError
from core.schema import Application, ApplicationCategory, load_application
from schemas import APPLICATIONS_DIR

logger = logging.getLogger(__name__)


def _resolve_dir(schema_dir: str | Path | None) -> Path:
    return Path(schema_dir) if schema_dir is not None else APPLICATIONS_DIR


def load_application_file(path: str | Path) -> Application:
    """Read and validate the application schema stored at ``path``.

    Raises:
        SchemaLoadError: If the file is missing, unreadable or invalid.
    """

    target = Path(path)
    try:
        payload = target.read_bytes()
    except OSError as exc:
        logger.error("Application schema missing at %s", target)
        raise SchemaLoadError(
            f"Cannot read application schema {target}: {exc}",
            source=str(target),
            original=exc,
        ) from exc
    return load_application(payload, source=str(target))


@lru_cache(maxsize=8)
def _load_cached(category: ApplicationCategory, schema_dir: Path) -> Application:
    application = load_application_file(schema_dir / f"{category.value}.json")
    if application.category is not category:
        raise SchemaLoadError(
            f"Schema for {category.value} declares category {application.category.value}",
            source=str(schema_dir / f"{category.value}.json"),
        )
    return application


def load_application_for_category(
    category: ApplicationCategory | str,
    *,
    schema_dir: str | Path | None = None,
) -> Application:
    """Return the application schema registered for ``category``.

    Raises:
        SchemaLoadError: If ``category`` is unknown or its document is invalid.
    """

    try:
        resolved = ApplicationCategory(category)
    except ValueError as exc:
        raise SchemaLoadError(f"Unknown application category: {category!r}", original=exc) from exc
    return _load_cached(resolved, _resolve_dir(schema_dir).resolve())


def available_categories(*, schema_dir: str | Path | None = None) -> tuple[ApplicationCategory, ...]:
    """Return the categories that have a schema document, in enum order."""

    directory = _resolve_dir(schema_dir)
    return tuple(category for category in ApplicationCategory if (directory / f"{category.value}.json").is_file())


def clear_cache() -> None:
    """Forget cached applications, e.g. after editing schema files."""

    _load_cached.cache_clear()


__all__ = [
    "available_categories",
    "clear_cache",
    "load_application_file",
    "load_application_for_category",
]
