"""Filter and facet engine."""

from typing import Any, Iterable, Mapping, Optional

from curated_gems.core.entities import ALL_SOURCES, FacetCounts, FilterState, Item, ViewResult
from curated_gems.core.matcher import matches


def _dataset_items(dataset: Any) -> list[Item]:
    """Usable items of a dataset; raw records are converted, junk is dropped."""
    if dataset is None or isinstance(dataset, (str, bytes, Mapping)):
        return []
    try:
        entries = list(dataset)
    except TypeError:
        return []

    items = []
    for entry in entries:
        item = Item.coerce(entry)
        if item is not None:
            items.append(item)
    return items


def facet_keys(dataset: Optional[Iterable[Item]]) -> list[str]:
    """Facets offered for a dataset: ``all`` plus every distinct source."""
    keys = [ALL_SOURCES]
    seen = {ALL_SOURCES}
    for item in _dataset_items(dataset):
        if item.source not in seen:
            seen.add(item.source)
            keys.append(item.source)
    return keys


def recompute(dataset: Optional[Iterable[Item]], state: FilterState) -> ViewResult:
    """Compute the visible items and per-facet counts for a filter state.

    Counts are gated by the query alone, so switching facets never changes
    them. Facets with no matching items stay listed with a count of 0.
    Visible items keep their dataset order. Raw records are accepted and
    entries that are not records are skipped, so no input raises.
    """
    items = _dataset_items(dataset)
    facets = facet_keys(items)
    counts: FacetCounts = {key: 0 for key in facets}
    visible: list[Item] = []

    for item in items:
        if not matches(item, state.language, state.query):
            continue

        counts[ALL_SOURCES] += 1
        # A literal "all" source is folded into the sentinel facet
        if item.source != ALL_SOURCES:
            counts[item.source] += 1

        if state.active_source == ALL_SOURCES or item.source == state.active_source:
            visible.append(item)

    return ViewResult(items=visible, facet_counts=counts, facets=facets)
