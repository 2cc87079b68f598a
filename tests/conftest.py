"""Shared fixtures."""

import pytest

from curated_gems.core import Item


@pytest.fixture
def two_item_dataset() -> list[Item]:
    """Two items from two blogs, only the first one translated to Chinese."""
    return [
        Item.from_record({"link": "a", "title_zh": "你好", "title_en": "Hello", "source": "blogA"}),
        Item.from_record({"link": "b", "title_en": "World", "source": "blogB"}),
    ]


@pytest.fixture
def mixed_dataset() -> list[Item]:
    """Dataset with several sources, languages and tag formats."""
    records = [
        {
            "link": "https://example.com/1",
            "source": "Hacker News",
            "date": "2025-08-01",
            "title_zh": "向量数据库入门",
            "title_en": "Intro to vector databases",
            "summary_zh": "讲解索引结构",
            "summary_en": "Explains index structures",
            "tags_zh": ["数据库", "检索"],
            "tags_en": ["database", "retrieval"],
        },
        {
            "link": "https://example.com/2",
            "source": "Paul Graham",
            "date": "2025-08-02",
            "title": "How to Do Great Work",
            "best_quote_en": "Curiosity is the engine",
            "tags": "essay, career, ",
        },
        {
            "link": "https://example.com/3",
            "source": "Hacker News",
            "title_en": "Rust in production",
            "summary": "Memory safety without GC",
            "tags_en": "rust,systems",
        },
    ]
    return [Item.from_record(r) for r in records]
