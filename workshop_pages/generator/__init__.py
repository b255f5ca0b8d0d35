"""Utilities for rendering Markdown task documents into HTML pages."""

from .alerts import AlertExtension
from .models import PageIndexEntry, RenderedPage
from .page_generator import TaskPageGenerator, output_filename_for
from .renderer import (
    GithubHeadingSlugger,
    HtmlContentRenderer,
    MarkdownRenderer,
    heading_slug,
)

__all__ = [
    "AlertExtension",
    "GithubHeadingSlugger",
    "HtmlContentRenderer",
    "MarkdownRenderer",
    "PageIndexEntry",
    "RenderedPage",
    "TaskPageGenerator",
    "heading_slug",
    "output_filename_for",
]
