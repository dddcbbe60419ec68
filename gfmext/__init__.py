"""Building blocks for GitHub Flavored Markdown tables, autolinks, strikethrough, task lists and tag filtering."""

__version__ = "0.1.0"
__all__ = [
    "scanners",
    "tagfilter",
    "tasklist",
    "strikethrough",
    "autolink",
    "table",
    "table_render",
]