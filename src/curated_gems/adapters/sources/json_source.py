"""Dataset sources for the static data.json feed."""

import asyncio
import json
import logging
import time
from pathlib import Path
from typing import Any

import httpx

from curated_gems.core import DatasetLoadError, DatasetSource, Item

logger = logging.getLogger(__name__)


def parse_dataset(payload: Any, location: str = "<memory>") -> list[Item]:
    """
    Convert a decoded JSON payload into items.

    Args:
        payload: Decoded JSON value, expected to be an array of objects
        location: URL or path used in error messages

    Returns:
        Items in dataset order; non-object entries are skipped
    """
    if not isinstance(payload, list):
        raise DatasetLoadError(location, f"expected a JSON array, got {type(payload).__name__}")

    items: list[Item] = []
    skipped = 0
    for index, record in enumerate(payload):
        try:
            items.append(Item.from_record(record))
        except ValueError as e:
            skipped += 1
            logger.warning("Skipping dataset entry %d: %s", index, e)

    logger.debug("Parsed %d items from %s (%d skipped)", len(items), location, skipped)
    return items


class HttpDatasetSource(DatasetSource):
    """Fetch data.json over HTTP."""

    emoji = "🌐"
    name = "HTTP"

    def __init__(self, url: str, timeout: float = 30.0, cache_bust: bool = True) -> None:
        self.url = url
        self.timeout = timeout
        self.cache_bust = cache_bust

    async def fetch_items(self) -> list[Item]:
        """Download and parse the dataset."""
        params = {}
        if self.cache_bust:
            params["_"] = str(int(time.time() * 1000))

        async with httpx.AsyncClient(timeout=self.timeout, follow_redirects=True) as client:
            try:
                response = await client.get(
                    self.url,
                    params=params,
                    headers={"Cache-Control": "no-store"},
                )
                response.raise_for_status()
            except httpx.HTTPStatusError as e:
                raise DatasetLoadError(
                    self.url, f"HTTP {e.response.status_code}", e.response.status_code
                ) from e
            except (httpx.HTTPError, httpx.InvalidURL) as e:
                raise DatasetLoadError(self.url, str(e) or type(e).__name__) from e

        try:
            payload = response.json()
        except ValueError as e:
            raise DatasetLoadError(self.url, f"invalid JSON: {e}") from e

        return parse_dataset(payload, self.url)


class FileDatasetSource(DatasetSource):
    """Read data.json from the local filesystem."""

    emoji = "📁"
    name = "File"

    def __init__(self, path: Path) -> None:
        self.path = Path(path)

    def _read(self) -> Any:
        with open(self.path, "r", encoding="utf-8") as f:
            return json.load(f)

    async def fetch_items(self) -> list[Item]:
        """Read and parse the dataset file."""
        try:
            payload = await asyncio.to_thread(self._read)
        except OSError as e:
            raise DatasetLoadError(str(self.path), e.strerror or str(e)) from e
        except ValueError as e:
            raise DatasetLoadError(str(self.path), f"invalid JSON: {e}") from e

        return parse_dataset(payload, str(self.path))
