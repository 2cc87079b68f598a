"""Static HTML card rendering surface."""

from curated_gems.core import DisplayRecord, FacetEntry, ViewRenderer, ViewStatus
from curated_gems.core.i18n import (
    EMPTY_TEXTS,
    ERROR_PREFIXES,
    LOAD_FAILED_TEXTS,
    SEARCH_PLACEHOLDERS,
    localized,
)
from curated_gems.core.projection import escape


class HtmlRenderer(ViewRenderer):
    """Render the filtered list as HTML cards.

    Display records arrive escaped, so their fields are interpolated as-is.
    Only strings built here (placeholders, facet keys, messages) go through
    ``escape``.
    """

    def __init__(self, query: str = "") -> None:
        self.query = query

    def render(
        self,
        records: list[DisplayRecord],
        facets: list[FacetEntry],
        language: str,
        status: ViewStatus,
        error: str = "",
    ) -> str:
        """Render HTML fragment with controls, list and empty notice."""
        parts = [
            f'<html lang="{escape(language)}">',
            '<div id="controls" class="controls">',
            f'  <input id="search" placeholder="{escape(localized(SEARCH_PLACEHOLDERS, language))}"'
            f' value="{escape(self.query)}" autocomplete="off"/>',
            f'  <div id="sources" class="tags">{"".join(self._facet(f) for f in facets)}</div>',
            "</div>",
        ]

        if status == ViewStatus.LOAD_FAILED:
            message = localized(ERROR_PREFIXES, language) + localized(LOAD_FAILED_TEXTS, language)
            if error:
                message += f" ({error})"
            parts.append('<div id="list"></div>')
            parts.append(f'<div id="empty">{escape(message)}</div>')
        elif status == ViewStatus.EMPTY or not records:
            parts.append('<div id="list"></div>')
            parts.append(f'<div id="empty">{escape(localized(EMPTY_TEXTS, language))}</div>')
        else:
            parts.append('<div id="list">')
            parts.extend(self._card(record) for record in records)
            parts.append("</div>")
            parts.append('<div id="empty" class="hidden"></div>')

        parts.append("</html>")
        return "\n".join(parts) + "\n"

    def _facet(self, facet: FacetEntry) -> str:
        css = "tag active" if facet.active else "tag"
        return f'<span class="{css}" data-source="{escape(facet.key)}">{facet.label}</span>'

    def _card(self, record: DisplayRecord) -> str:
        lines = [
            '<article class="card">',
            f'  <h3><a href="{record.link_target}" target="_blank" rel="noopener">{record.title}</a></h3>',
        ]
        if record.summary_text:
            lines.append(f"  <p>{record.summary_text}</p>")
        if record.quote_text:
            lines.append(f"  <blockquote>{record.quote_text}</blockquote>")
        lines.append(
            f'  <div class="meta">{record.source_text} · {record.tags_joined} · {record.date_text}</div>'
        )
        lines.append("</article>")
        return "\n".join(lines)
