"""Localized field resolution with a fixed fallback chain."""

from typing import Any, Union

from curated_gems.core.entities import Item
from curated_gems.core.i18n import FALLBACK_LANGUAGE

TEXT_FIELDS = ("title", "summary", "best_quote")
TAGS_FIELD = "tags"


def candidate_keys(field: str, language: str) -> list[str]:
    """Ordered dataset keys tried when resolving a logical field.

    The order is ``{field}_{language}``, ``{field}_en``, then the bare
    ``{field}``. Duplicates are dropped so ``en`` yields two keys.
    """
    keys: list[str] = []
    for key in (f"{field}_{language}", f"{field}_{FALLBACK_LANGUAGE}", field):
        if key not in keys:
            keys.append(key)
    return keys


def _scalar(value: Any) -> str:
    if isinstance(value, str):
        return value.strip()
    # bool is an int subclass but "True" is never meaningful display text
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return str(value)
    return ""


def _tag_list(value: Any) -> list[str]:
    if isinstance(value, str):
        parts = value.split(",")
    elif isinstance(value, (list, tuple)):
        parts = [v for v in value if isinstance(v, (str, int, float)) and not isinstance(v, bool)]
    else:
        return []

    tags = []
    for part in parts:
        tag = str(part).strip()
        if tag:
            tags.append(tag)
    return tags


def resolve_text(item: Item, field: str, language: str) -> str:
    """Resolve a scalar logical field to display text, or ``""``."""
    for key in candidate_keys(field, language):
        text = _scalar(item.get(key))
        if text:
            return text
    return ""


def resolve_tags(item: Item, language: str) -> list[str]:
    """Resolve the tags field to an ordered list, or ``[]``."""
    for key in candidate_keys(TAGS_FIELD, language):
        tags = _tag_list(item.get(key))
        if tags:
            return tags
    return []


def resolve(item: Item, field: str, language: str) -> Union[str, list[str]]:
    """Resolve any logical field for the given language."""
    if field == TAGS_FIELD:
        return resolve_tags(item, language)
    return resolve_text(item, field, language)
