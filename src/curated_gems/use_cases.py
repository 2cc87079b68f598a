"""Business logic use cases."""

import logging
from typing import Optional

from curated_gems.core import (
    ALL_SOURCES,
    DatasetLoadError,
    DatasetSource,
    DisplayRecord,
    FacetEntry,
    FilterState,
    Item,
    ViewRenderer,
    ViewResult,
    ViewStatus,
    coerce_language,
    facet_keys,
    project,
    project_facets,
    recompute,
)

logger = logging.getLogger(__name__)


class BrowseSession:
    """Owns the dataset snapshot and filter state for one browsing surface.

    The core stays stateless. This class holds the mutable slots and runs
    exactly one recompute per event (query edit, facet selection, language
    change, dataset load).
    """

    def __init__(self, source: DatasetSource, language: Optional[str] = None) -> None:
        self.source = source
        self.dataset: list[Item] = []
        self.state = FilterState(language=coerce_language(language))
        self.status = ViewStatus.LOADING
        self.error: str = ""
        self.loaded = False
        self.recompute_count = 0
        self._generation = 0
        self._view = recompute(self.dataset, self.state)

    @property
    def language(self) -> str:
        return self.state.language

    @property
    def view(self) -> ViewResult:
        return self._view

    async def load(self) -> bool:
        """Load (or reload) the dataset.

        The previous snapshot stays in place while the fetch is pending. When
        loads overlap, only the most recently started one is installed.

        Returns:
            True if the dataset was installed
        """
        self._generation += 1
        generation = self._generation

        try:
            items = await self.source.fetch_items()
        except DatasetLoadError as e:
            if generation != self._generation:
                logger.info("Ignoring failure of superseded load #%d: %s", generation, e)
                return False
            logger.error("%s", e)
            self.dataset = []
            self.error = str(e)
            self.loaded = False
            self._recompute()
            return False

        if generation != self._generation:
            logger.info("Discarding superseded load #%d (%d items)", generation, len(items))
            return False

        self.dataset = items
        self.error = ""
        self.loaded = True
        if self.state.active_source not in self._facet_set():
            self.state = self.state.with_source(ALL_SOURCES)
        self._recompute()
        logger.debug("Installed dataset with %d items", len(items))
        return True

    def set_query(self, query: Optional[str]) -> ViewResult:
        """Handle a query text change."""
        self.state = self.state.with_query(query)
        return self._recompute()

    def select_source(self, source: Optional[str]) -> ViewResult:
        """Handle a facet selection; unknown facets select ``all``."""
        if source not in self._facet_set():
            logger.debug("Unknown facet %r, selecting %r", source, ALL_SOURCES)
            source = ALL_SOURCES
        self.state = self.state.with_source(source)
        return self._recompute()

    def change_language(self, language: Optional[str]) -> ViewResult:
        """Handle a language change without reloading the dataset."""
        self.state = self.state.with_language(coerce_language(language))
        return self._recompute()

    def records(self) -> list[DisplayRecord]:
        """Display records for the current view."""
        return [project(item, self.state.language) for item in self._view.items]

    def facets(self) -> list[FacetEntry]:
        """Labelled facets for the current view."""
        return project_facets(self._view, self.state.active_source, self.state.language)

    def render(self, renderer: ViewRenderer) -> str:
        """Render the current view with a rendering surface."""
        return renderer.render(
            self.records(),
            self.facets(),
            self.state.language,
            self.status,
            self.error,
        )

    def _facet_set(self) -> set[str]:
        return set(facet_keys(self.dataset))

    def _recompute(self) -> ViewResult:
        self._view = recompute(self.dataset, self.state)
        self.recompute_count += 1

        if self.error:
            self.status = ViewStatus.LOAD_FAILED
        elif not self.loaded:
            self.status = ViewStatus.LOADING
        elif self._view.is_empty:
            self.status = ViewStatus.EMPTY
        else:
            self.status = ViewStatus.READY

        return self._view
