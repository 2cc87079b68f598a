"""Tests for the browsing session."""

import asyncio
from unittest.mock import AsyncMock, patch

import httpx

import pytest

from curated_gems.adapters.render import MarkdownRenderer
from curated_gems.adapters.sources import HttpDatasetSource
from curated_gems.core import DatasetLoadError, Item, ViewStatus
from curated_gems.use_cases import BrowseSession


def make_source(items: list[Item]) -> AsyncMock:
    source = AsyncMock()
    source.fetch_items.return_value = items
    return source


@pytest.mark.asyncio
async def test_load_installs_dataset(two_item_dataset: list[Item]) -> None:
    session = BrowseSession(make_source(two_item_dataset), language="en")
    assert session.status == ViewStatus.LOADING
    
    assert await session.load()
    
    assert session.status == ViewStatus.READY
    assert session.view.facet_counts == {"all": 2, "blogA": 1, "blogB": 1}
    assert [r.title for r in session.records()] == ["Hello", "World"]


@pytest.mark.asyncio
async def test_unsupported_language_is_coerced(two_item_dataset: list[Item]) -> None:
    session = BrowseSession(make_source(two_item_dataset), language="fr")
    await session.load()
    
    assert session.language == "zh"
    assert [r.title for r in session.records()] == ["你好", "World"]


@pytest.mark.asyncio
async def test_each_event_recomputes_once(two_item_dataset: list[Item]) -> None:
    session = BrowseSession(make_source(two_item_dataset), language="en")
    await session.load()
    start = session.recompute_count
    
    session.set_query("hello")
    assert session.recompute_count == start + 1
    
    session.select_source("blogB")
    assert session.recompute_count == start + 2
    
    session.change_language("zh")
    assert session.recompute_count == start + 3


@pytest.mark.asyncio
async def test_facet_switch_keeps_counts(two_item_dataset: list[Item]) -> None:
    session = BrowseSession(make_source(two_item_dataset), language="en")
    await session.load()
    
    session.set_query("hello")
    counts = dict(session.view.facet_counts)
    
    session.select_source("blogB")
    
    assert session.view.facet_counts == counts
    assert session.view.items == []
    assert session.status == ViewStatus.EMPTY


@pytest.mark.asyncio
async def test_change_language_does_not_reload(two_item_dataset: list[Item]) -> None:
    source = make_source(two_item_dataset)
    session = BrowseSession(source, language="en")
    await session.load()
    
    session.set_query("hello")
    assert len(session.view.items) == 1
    
    session.change_language("zh")
    
    # "Hello" is not the zh text of item a
    assert session.view.items == []
    assert session.language == "zh"
    source.fetch_items.assert_called_once()


@pytest.mark.asyncio
async def test_unknown_facet_selects_all(two_item_dataset: list[Item]) -> None:
    session = BrowseSession(make_source(two_item_dataset), language="en")
    await session.load()
    
    session.select_source("does-not-exist")
    
    assert session.state.active_source == "all"
    assert len(session.view.items) == 2
    assert [f.active for f in session.facets()] == [True, False, False]


@pytest.mark.asyncio
async def test_empty_dataset_is_empty_result_not_failure() -> None:
    session = BrowseSession(make_source([]), language="en")
    
    assert await session.load()
    
    assert session.status == ViewStatus.EMPTY
    assert session.view.facet_counts == {"all": 0}
    assert session.error == ""


@pytest.mark.asyncio
async def test_load_failure_empties_view(two_item_dataset: list[Item]) -> None:
    source = make_source(two_item_dataset)
    session = BrowseSession(source, language="en")
    await session.load()
    
    source.fetch_items.side_effect = DatasetLoadError("data.json", "HTTP 500", 500)
    
    assert not await session.load()
    
    assert session.status == ViewStatus.LOAD_FAILED
    assert session.dataset == []
    assert session.view.facet_counts == {"all": 0}
    assert "HTTP 500" in session.error
    
    # Further events keep the failure state
    session.set_query("x")
    assert session.status == ViewStatus.LOAD_FAILED


@pytest.mark.asyncio
async def test_retry_after_failure(two_item_dataset: list[Item]) -> None:
    source = AsyncMock()
    source.fetch_items.side_effect = [DatasetLoadError("data.json", "timeout"), two_item_dataset]
    session = BrowseSession(source, language="en")
    
    assert not await session.load()
    assert session.status == ViewStatus.LOAD_FAILED
    
    assert await session.load()
    assert session.status == ViewStatus.READY
    assert session.error == ""


@pytest.mark.asyncio
async def test_stale_load_is_discarded(two_item_dataset: list[Item]) -> None:
    """Test that a slow first load can't overwrite a newer one."""
    release_first = asyncio.Event()
    old_items = [Item.from_record({"link": "old", "source": "old"})]
    
    async def fetch_items():
        if not calls:
            calls.append("first")
            await release_first.wait()
            return old_items
        calls.append("second")
        return two_item_dataset
    
    calls: list[str] = []
    source = AsyncMock()
    source.fetch_items.side_effect = fetch_items
    session = BrowseSession(source, language="en")
    
    first = asyncio.create_task(session.load())
    while not calls:
        await asyncio.sleep(0)
    
    assert await session.load()
    release_first.set()
    assert not await first
    
    assert session.dataset == two_item_dataset
    assert session.view.facets == ["all", "blogA", "blogB"]


@pytest.mark.asyncio
async def test_reload_resets_vanished_facet(two_item_dataset: list[Item]) -> None:
    source = make_source(two_item_dataset)
    session = BrowseSession(source, language="en")
    await session.load()
    session.select_source("blogB")
    
    source.fetch_items.return_value = two_item_dataset[:1]
    await session.load()
    
    assert session.state.active_source == "all"
    assert session.view.facets == ["all", "blogA"]


@pytest.mark.asyncio
async def test_render_uses_current_state(two_item_dataset: list[Item]) -> None:
    session = BrowseSession(make_source(two_item_dataset), language="en")
    await session.load()
    session.set_query("world")
    
    document = session.render(MarkdownRenderer())
    
    assert "[World](<b>)" in document
    assert "Hello" not in document
    assert "📚 All (1)" in document


@pytest.mark.asyncio
async def test_invalid_url_reports_load_failure() -> None:
    session = BrowseSession(HttpDatasetSource("http://\x00/data.json"), language="en")
    
    with patch("httpx.AsyncClient") as mock_client:
        mock_client.return_value.__aenter__.return_value.get = AsyncMock(
            side_effect=httpx.InvalidURL("Invalid non-printable ASCII character in URL")
        )
        
        assert not await session.load()
    
    assert session.status == ViewStatus.LOAD_FAILED
    assert "non-printable" in session.error
