"""Markdown rendering surface."""

from curated_gems.core import DisplayRecord, FacetEntry, ViewRenderer, ViewStatus
from curated_gems.core.i18n import EMPTY_TEXTS, ERROR_PREFIXES, LOAD_FAILED_TEXTS, localized
from curated_gems.core.projection import escape

_LINK_TEXT_TABLE = str.maketrans({c: "\\" + c for c in "[]()"})


def _link_text(text: str) -> str:
    """Backslash-escape brackets so link text can't close the link early."""
    return text.translate(_LINK_TEXT_TABLE)


class MarkdownRenderer(ViewRenderer):
    """Render the filtered list as a markdown document."""

    def render(
        self,
        records: list[DisplayRecord],
        facets: list[FacetEntry],
        language: str,
        status: ViewStatus,
        error: str = "",
    ) -> str:
        """Render markdown."""
        if status == ViewStatus.LOAD_FAILED:
            message = localized(ERROR_PREFIXES, language) + localized(LOAD_FAILED_TEXTS, language)
            if error:
                message += f" ({error})"
            return escape(message) + "\n"

        lines = [
            "# 💎 Curated Gems",
            "",
        ]

        if facets:
            lines.append(" · ".join(self._format_facet(facet) for facet in facets))
            lines.append("")

        if status == ViewStatus.EMPTY or not records:
            lines.append(localized(EMPTY_TEXTS, language))
            lines.append("")
            return "\n".join(lines)

        for record in records:
            lines.extend(self._format_record(record))

        return "\n".join(lines)

    def _format_facet(self, facet: FacetEntry) -> str:
        if facet.active:
            return f"**{facet.label}**"
        return facet.label

    def _format_record(self, record: DisplayRecord) -> list[str]:
        """Format single display record."""
        lines = [
            f"### [{_link_text(record.title)}](<{record.link_target}>)",
            "",
        ]

        if record.summary_text:
            lines.extend([record.summary_text, ""])

        if record.quote_text:
            lines.extend([f"> {record.quote_text}", ""])

        meta_parts = [part for part in (record.source_text, record.tags_joined, record.date_text) if part]
        if meta_parts:
            lines.append(f"*{' · '.join(meta_parts)}*")
            lines.append("")

        lines.append("---")
        lines.append("")

        return lines
