"""Core domain entities."""

from dataclasses import dataclass, field, replace
from enum import Enum
from types import MappingProxyType
from typing import Any, Mapping, Optional

from curated_gems.core.i18n import DEFAULT_LANGUAGE, coerce_language

ALL_SOURCES = "all"
UNKNOWN_SOURCE = "unknown"


class ViewStatus(str, Enum):
    """State of the browsing view."""

    LOADING = "loading"
    READY = "ready"
    EMPTY = "empty"
    LOAD_FAILED = "load_failed"


def _as_text(value: Any) -> str:
    if value is None or isinstance(value, (dict, list, tuple, set)):
        return ""
    return str(value).strip()


@dataclass(frozen=True)
class Item:
    """One curated content entry, immutable once loaded."""

    link: str
    source: str
    date: str = ""
    fields: Mapping[str, Any] = field(default_factory=dict, compare=False, repr=False)

    def __post_init__(self) -> None:
        # Freeze the raw record so resolution can't be affected by later mutation
        object.__setattr__(self, "fields", MappingProxyType(dict(self.fields)))

    @classmethod
    def from_record(cls, record: Mapping[str, Any]) -> "Item":
        """Build an item from one raw dataset record."""
        if not isinstance(record, Mapping):
            raise ValueError(f"Dataset record must be an object, got {type(record).__name__}")

        return cls(
            link=_as_text(record.get("link")),
            source=_as_text(record.get("source")) or UNKNOWN_SOURCE,
            date=_as_text(record.get("date")),
            fields=record,
        )

    @classmethod
    def coerce(cls, value: Any) -> Optional["Item"]:
        """Item for a dataset entry, or None when the entry is unusable."""
        if isinstance(value, Item):
            return value
        if isinstance(value, Mapping):
            return cls.from_record(value)
        return None

    def get(self, key: str, default: Any = None) -> Any:
        """Raw value of a dataset key."""
        return self.fields.get(key, default)


@dataclass(frozen=True)
class FilterState:
    """User-controlled filter inputs."""

    query: str = ""
    active_source: str = ALL_SOURCES
    language: str = DEFAULT_LANGUAGE

    def __post_init__(self) -> None:
        # Only supported languages ever reach field resolution
        object.__setattr__(self, "language", coerce_language(self.language))

    def with_query(self, query: Optional[str]) -> "FilterState":
        return replace(self, query=query or "")

    def with_source(self, source: Optional[str]) -> "FilterState":
        return replace(self, active_source=source or ALL_SOURCES)

    def with_language(self, language: str) -> "FilterState":
        return replace(self, language=language)


FacetCounts = dict[str, int]


@dataclass
class ViewResult:
    """Output of one recompute pass."""

    items: list[Item]
    facet_counts: FacetCounts
    facets: list[str]

    @property
    def is_empty(self) -> bool:
        return not self.items


@dataclass(frozen=True)
class DisplayRecord:
    """Escaped, language-resolved projection of an item."""

    title: str
    summary_text: str
    quote_text: str
    tags_joined: str
    source_text: str
    date_text: str
    link_target: str


@dataclass(frozen=True)
class FacetEntry:
    """Display form of one source facet."""

    key: str
    label: str
    count: int
    active: bool
