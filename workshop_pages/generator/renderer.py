"""Render task Markdown into GitHub-flavoured HTML fragments."""

from __future__ import annotations

import re
import typing as typ

from markdown import Markdown
from pygments.formatters.html import HtmlFormatter
from pymdownx.slugs import slugify

from .alerts import AlertExtension

if typ.TYPE_CHECKING:
    from markdown.extensions import Extension
else:  # pragma: no cover - type-checking fallback
    Extension = typ.Any

FENCED_INDENT_PATTERN = re.compile(r"^[ ]{1,3}([`~]{3,})", re.MULTILINE)
FENCE_LABEL_PATTERN = re.compile(
    r"^([`~]{3,})([A-Za-z0-9_+#.-]+)?(,[^\r\n]+)$", re.MULTILINE
)

heading_slug = slugify(case="lower")


class MarkdownRenderer(typ.Protocol):
    """Capability used by the builder to turn Markdown into an HTML fragment."""

    def render(self, markdown_text: str) -> str:
        """Return the HTML fragment for ``markdown_text``."""
        ...


class GithubHeadingSlugger:
    """Hand out heading ids the way GitHub numbers repeated headings.

    The first ``## Setup`` becomes ``setup``, the next ``setup-1``, then
    ``setup-2``. One instance covers one document.

    >>> slugger = GithubHeadingSlugger()
    >>> [slugger("Setup", "-") for _ in range(3)]
    ['setup', 'setup-1', 'setup-2']
    """

    def __init__(self) -> None:
        self._occurrences: dict[str, int] = {}

    def __call__(self, value: str, separator: str) -> str:
        base = heading_slug(value, sep=separator)
        slug = base
        while slug in self._occurrences:
            self._occurrences[base] += 1
            slug = f"{base}{separator}{self._occurrences[base]}"
        self._occurrences[slug] = 0
        return slug


class HtmlContentRenderer:
    """Render Markdown with heading anchors, alerts, and highlighted code."""

    def __init__(
        self,
        pygments_style: str = "default",
        extra_extensions: typ.Sequence[Extension] = (),
    ) -> None:
        """Initialize a renderer with optional pygments style and extensions.

        Parameters
        ----------
        pygments_style : str, optional
            Name of the Pygments style used for syntax highlighting. Defaults to
            ``"default"``.
        extra_extensions : Sequence[Extension], optional
            Additional Markdown extensions appended after the built-in set.
        """
        self.pygments_style = pygments_style
        self._formatter = HtmlFormatter(style=pygments_style, cssclass="codehilite")
        self._extra_extensions = list(extra_extensions)

    @property
    def stylesheet(self) -> str:
        """Return the CSS used for highlighted code blocks."""
        return self._formatter.get_style_defs(".codehilite")

    def render(self, markdown_text: str) -> str:
        """Render Markdown into HTML using the configured extensions."""
        normalized = self._normalize_fenced_blocks(markdown_text)
        if not normalized.strip():
            return ""
        extensions: list[Extension | str] = [
            "fenced_code",
            "codehilite",
            "tables",
            "sane_lists",
            "mdx_truly_sane_lists",
            "toc",
            "pymdownx.tilde",
            "pymdownx.magiclink",
            "pymdownx.tasklist",
            AlertExtension(),
            *self._extra_extensions,
        ]
        md = Markdown(
            extensions=extensions,
            extension_configs={
                "codehilite": {
                    "linenums": False,
                    "guess_lang": False,
                    "css_class": "codehilite",
                    "pygments_style": self.pygments_style,
                },
                "mdx_truly_sane_lists": {"nested_indent": 2},
                "toc": {"slugify": GithubHeadingSlugger(), "permalink": False},
                "pymdownx.tilde": {"subscript": False},
            },
        )
        return md.convert(normalized)

    @staticmethod
    def _normalize_fenced_blocks(text: str) -> str:
        """Dedent list-nested fences and drop ``lang,attrs`` fence suffixes."""
        without_indent = FENCED_INDENT_PATTERN.sub(r"\1", text)

        def _strip_labels(match: re.Match[str]) -> str:
            fence, language, _extras = match.groups()
            return f"{fence}{language or ''}"

        return FENCE_LABEL_PATTERN.sub(_strip_labels, without_indent)


__all__ = [
    "GithubHeadingSlugger",
    "HtmlContentRenderer",
    "MarkdownRenderer",
    "heading_slug",
]
