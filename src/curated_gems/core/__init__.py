"""Core domain layer."""

from curated_gems.core.engine import facet_keys, recompute
from curated_gems.core.entities import (
    ALL_SOURCES,
    DisplayRecord,
    FacetCounts,
    FacetEntry,
    FilterState,
    Item,
    ViewResult,
    ViewStatus,
)
from curated_gems.core.errors import DatasetLoadError
from curated_gems.core.i18n import DEFAULT_LANGUAGE, SUPPORTED_LANGUAGES, coerce_language
from curated_gems.core.interfaces import DatasetSource, ViewRenderer
from curated_gems.core.matcher import matches
from curated_gems.core.projection import escape, project, project_facets
from curated_gems.core.resolver import candidate_keys, resolve, resolve_tags, resolve_text

__all__ = [
    "ALL_SOURCES",
    "DEFAULT_LANGUAGE",
    "SUPPORTED_LANGUAGES",
    "Item",
    "FilterState",
    "FacetCounts",
    "FacetEntry",
    "DisplayRecord",
    "ViewResult",
    "ViewStatus",
    "DatasetLoadError",
    "DatasetSource",
    "ViewRenderer",
    "coerce_language",
    "candidate_keys",
    "resolve",
    "resolve_text",
    "resolve_tags",
    "matches",
    "facet_keys",
    "recompute",
    "escape",
    "project",
    "project_facets",
]
