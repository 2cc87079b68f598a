"""CLI entry point for curated gems."""

import asyncio
import logging
import sys
from pathlib import Path
from typing import Optional

import typer

from curated_gems.adapters.render import HtmlRenderer, MarkdownRenderer
from curated_gems.adapters.sources import FileDatasetSource, HttpDatasetSource
from curated_gems.config import Settings, get_settings
from curated_gems.core import ALL_SOURCES, DatasetSource, ViewRenderer, ViewStatus
from curated_gems.use_cases import BrowseSession

RENDERERS = ("markdown", "html")


def main(
    lang: Optional[str] = typer.Option(None, "--lang", help="Display language: zh, en, ja, ko"),
    query: str = typer.Option("", "--query", "-q", help="Free-text filter"),
    source: str = typer.Option(ALL_SOURCES, "--source", "-s", help="Source facet to show"),
    output_format: Optional[str] = typer.Option(None, "--format", help="Output format: markdown or html"),
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="Write output to file"),
    data_url: Optional[str] = typer.Option(None, "--data-url", help="Load data.json from URL"),
    data_file: Optional[Path] = typer.Option(None, "--data-file", help="Load data.json from file"),
    config: Path = typer.Option(Path("config.yaml"), "--config", help="YAML config file"),
    debug: bool = False,
) -> None:
    """Browse the curated list with search and source facets."""
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    settings = get_settings(config)

    if data_url:
        settings.dataset.url = data_url
        settings.dataset.file = None
    elif data_file:
        settings.dataset.url = None
        settings.dataset.file = data_file
    if lang:
        settings.display.language = lang
    if output_format:
        settings.display.format = output_format

    if settings.output_format not in RENDERERS:
        print(f"❌ Unknown format: {settings.output_format} (expected one of {', '.join(RENDERERS)})", file=sys.stderr)
        raise typer.Exit(code=2)

    status = asyncio.run(async_run(settings, query, source, output))
    if status == ViewStatus.LOAD_FAILED:
        raise typer.Exit(code=1)


def app() -> None:
    """CLI entry point."""
    typer.run(main)


def build_source(settings: Settings) -> DatasetSource:
    """Pick the dataset source from settings; a URL wins over a file."""
    if settings.data_url:
        return HttpDatasetSource(
            settings.data_url,
            timeout=settings.request_timeout,
            cache_bust=settings.dataset.cache_bust,
        )
    return FileDatasetSource(settings.data_file or Path("data.json"))


def build_renderer(settings: Settings, query: str) -> ViewRenderer:
    if settings.output_format == "html":
        return HtmlRenderer(query=query)
    return MarkdownRenderer()


async def async_run(
    settings: Settings,
    query: str,
    source: str,
    output: Optional[Path],
) -> ViewStatus:
    """Async implementation of the browse command."""
    dataset_source = build_source(settings)
    session = BrowseSession(dataset_source, language=settings.language)

    location = settings.data_url or settings.data_file
    emoji = getattr(dataset_source, 'emoji', '•')
    print(f"{emoji} Loading {location} ...", file=sys.stderr)

    if await session.load():
        print(f"✓ Loaded {len(session.dataset)} items", file=sys.stderr)
        if query:
            session.set_query(query)
        if source != ALL_SOURCES:
            session.select_source(source)
    else:
        print(f"❌ {session.error}", file=sys.stderr)

    document = session.render(build_renderer(settings, query))

    if output is None:
        print(document)
    else:
        output.parent.mkdir(parents=True, exist_ok=True)
        output.write_text(document, encoding="utf-8")
        print(f"📄 Saved: {output}", file=sys.stderr)

    counts = session.view.facet_counts
    print(f"🔎 Showing {len(session.view.items)} of {counts.get(ALL_SOURCES, 0)} matching items", file=sys.stderr)
    return session.status


if __name__ == "__main__":
    app()
