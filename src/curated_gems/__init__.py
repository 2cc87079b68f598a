"""Curated, multi-language content list with search and source facets."""

__version__ = "0.2.0"
