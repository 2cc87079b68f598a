"""Case-insensitive substring matching over resolved fields."""

from curated_gems.core.entities import Item
from curated_gems.core.resolver import TEXT_FIELDS, resolve_tags, resolve_text


def matches(item: Item, language: str, query: str) -> bool:
    """
    Check whether an item contains the query in any searchable field.

    Args:
        item: Item to test
        language: Already coerced display language
        query: Raw query text; blank means no filter

    Returns:
        True if the lower-cased query is a substring of the resolved title,
        summary, quote or any tag
    """
    needle = (query or "").strip().lower()
    if not needle:
        return True

    for field in TEXT_FIELDS:
        if needle in resolve_text(item, field, language).lower():
            return True

    return any(needle in tag.lower() for tag in resolve_tags(item, language))
