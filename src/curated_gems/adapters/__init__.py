"""Adapters for dataset sources and rendering surfaces."""
