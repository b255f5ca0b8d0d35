"""GitHub-style alert blocks for Python-Markdown.

A blockquote whose first line is one of ``[!NOTE]``, ``[!TIP]``,
``[!IMPORTANT]``, ``[!WARNING]`` or ``[!CAUTION]`` is rewritten into a styled
admonition container matching GitHub's markup::

    > [!WARNING]
    > Secrets are masked in logs.

becomes::

    <div class="markdown-alert markdown-alert-warning">
    <p class="markdown-alert-title">Warning</p>
    <p>Secrets are masked in logs.</p>
    </div>
"""

from __future__ import annotations

import re
import typing as typ
import xml.etree.ElementTree as ET

from markdown.extensions import Extension
from markdown.treeprocessors import Treeprocessor

if typ.TYPE_CHECKING:
    from xml.etree.ElementTree import Element

    from markdown import Markdown
else:  # pragma: no cover - type-checking fallback
    Markdown = typ.Any
    Element = typ.Any

ALERT_KINDS: dict[str, str] = {
    "note": "Note",
    "tip": "Tip",
    "important": "Important",
    "warning": "Warning",
    "caution": "Caution",
}
ALERT_MARKER_PATTERN = re.compile(
    r"^[ \t]*\[!(" + "|".join(ALERT_KINDS) + r")\][ \t]*(?:\n|$)", re.IGNORECASE
)


class AlertExtension(Extension):
    """Turn ``> [!KIND]`` blockquotes into GitHub alert containers."""

    def extendMarkdown(self, md: Markdown) -> None:  # type: ignore[override]  # noqa: N802
        """Register the alert treeprocessor ahead of inline processing."""
        md.treeprocessors.register(AlertTreeprocessor(md), "workshop_alerts", 25)


class AlertTreeprocessor(Treeprocessor):
    """Rewrite marked blockquotes before inline patterns touch their text."""

    def run(self, root: Element) -> Element:
        """Convert every alert blockquote in the parsed tree in place."""
        for element in list(root.iter("blockquote")):
            kind = self._match_kind(element)
            if kind:
                self._convert(element, kind)
        return root

    @staticmethod
    def _match_kind(blockquote: Element) -> str | None:
        """Return the alert kind when the blockquote opens with a marker."""
        if len(blockquote) == 0:
            return None
        first = blockquote[0]
        if first.tag != "p" or not first.text:
            return None
        match = ALERT_MARKER_PATTERN.match(first.text)
        return match.group(1).lower() if match else None

    @staticmethod
    def _convert(blockquote: Element, kind: str) -> None:
        first = blockquote[0]
        remainder = ALERT_MARKER_PATTERN.sub("", first.text or "", count=1)
        if remainder.strip() or len(first):
            first.text = remainder
        else:
            blockquote.remove(first)

        title = ET.Element("p", {"class": "markdown-alert-title"})
        title.text = ALERT_KINDS[kind]
        blockquote.insert(0, title)

        blockquote.tag = "div"
        blockquote.set("class", f"markdown-alert markdown-alert-{kind}")


__all__ = ["ALERT_KINDS", "AlertExtension", "AlertTreeprocessor"]
