"""Projection of items into escaped display records."""

from typing import Any

from curated_gems.core.entities import ALL_SOURCES, DisplayRecord, FacetEntry, Item, ViewResult
from curated_gems.core.i18n import (
    AI_SUMMARY_LABELS,
    ALL_FACET_LABELS,
    FALLBACK_LANGUAGE,
    QUOTE_GLYPHS,
    SOURCE_FACET_LABEL,
    localized,
)
from curated_gems.core.resolver import resolve_tags, resolve_text

_ENTITIES = {
    "&": "&amp;",
    "<": "&lt;",
    ">": "&gt;",
    '"': "&quot;",
    "'": "&#39;",
}
_ESCAPE_TABLE = str.maketrans(_ENTITIES)


def escape(value: Any) -> str:
    """Escape markup-significant characters; ``None`` becomes ``""``."""
    if value is None:
        return ""
    return str(value).translate(_ESCAPE_TABLE)


def project(item: Item, language: str) -> DisplayRecord:
    """Build the display record for an item in the given language.

    Raw dataset records are accepted as well. Anything unusable degrades to an
    empty record rather than raising.
    """
    item = Item.coerce(item) or Item(link="", source="")
    title = resolve_text(item, "title", language)
    summary = resolve_text(item, "summary", language)
    quote = resolve_text(item, "best_quote", language)
    tags = resolve_tags(item, language)

    summary_text = ""
    if summary:
        summary_text = localized(AI_SUMMARY_LABELS, language, FALLBACK_LANGUAGE) + summary

    quote_text = ""
    if quote:
        opening, closing = localized(QUOTE_GLYPHS, language, FALLBACK_LANGUAGE)
        quote_text = f"{opening}{quote}{closing}"

    link = item.link or "#"

    # Escaping is the final step for every field
    return DisplayRecord(
        title=escape(title),
        summary_text=escape(summary_text),
        quote_text=escape(quote_text),
        tags_joined=escape(", ".join(tags)),
        source_text=escape(item.source),
        date_text=escape(item.date),
        link_target=escape(link),
    )


def project_facets(view: ViewResult, active_source: str, language: str) -> list[FacetEntry]:
    """Build labelled facet entries from a recompute result."""
    entries = []
    for key in view.facets:
        count = view.facet_counts.get(key, 0)
        if key == ALL_SOURCES:
            label = localized(ALL_FACET_LABELS, language).format(count=count)
        else:
            label = SOURCE_FACET_LABEL.format(source=key, count=count)

        entries.append(
            FacetEntry(
                key=key,
                label=escape(label),
                count=count,
                active=key == active_source,
            )
        )
    return entries
