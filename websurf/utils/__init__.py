"""Utility functions for websurf."""

from websurf.utils.html import strip_leading_spans

__all__ = ["strip_leading_spans"]
