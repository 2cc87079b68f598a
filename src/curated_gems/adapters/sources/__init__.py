"""Dataset source adapters."""

from curated_gems.adapters.sources.json_source import FileDatasetSource, HttpDatasetSource, parse_dataset

__all__ = ["FileDatasetSource", "HttpDatasetSource", "parse_dataset"]
