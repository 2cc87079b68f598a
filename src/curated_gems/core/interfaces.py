"""Core interfaces for adapters."""

from abc import ABC, abstractmethod

from curated_gems.core.entities import DisplayRecord, FacetEntry, Item, ViewStatus


class DatasetSource(ABC):
    """Interface for loading the curated dataset."""
    
    @abstractmethod
    async def fetch_items(self) -> list[Item]:
        """Fetch the full dataset, raising DatasetLoadError on failure."""
        pass


class ViewRenderer(ABC):
    """Interface for rendering a filtered view."""
    
    @abstractmethod
    def render(
        self,
        records: list[DisplayRecord],
        facets: list[FacetEntry],
        language: str,
        status: ViewStatus,
        error: str = "",
    ) -> str:
        """Render display records and facets into a document."""
        pass
