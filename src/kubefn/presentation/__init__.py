"""Presentation layer - renders function lists for humans and machines."""

from .renderer import OutputFormat, render, TABLE_HEADERS, WIDE_HEADERS

__all__ = ["OutputFormat", "render", "TABLE_HEADERS", "WIDE_HEADERS"]
