"""Markdown to HTML rendering.

Raw HTML in the source is passed through untouched; the result is marked
as :class:`TrustedHTML` so every place that injects it into a page is easy
to find.
"""

import html
import re

import mistune
from pydantic_core import core_schema


class TrustedHTML(str):
    """HTML produced by the markdown renderer, to be emitted without escaping."""

    def __html__(self) -> str:
        return str(self)

    @classmethod
    def __get_pydantic_core_schema__(cls, source, handler):
        return core_schema.no_info_after_validator_function(cls, core_schema.str_schema())


def _generate_heading_id(text: str) -> str:
    """Generate a URL-friendly ID from heading text."""
    slug = html.unescape(re.sub(r"<[^>]+>", "", text)).lower().strip()
    slug = re.sub(r"[^\w\s-]", "", slug)
    slug = re.sub(r"[-\s]+", "-", slug)
    return slug.strip("-")


class _HeadingIdRenderer(mistune.HTMLRenderer):
    """HTML renderer that gives every heading a unique ``id`` anchor."""

    def __init__(self):
        super().__init__(escape=False)
        self._heading_id_counts: dict[str, int] = {}

    def heading(self, text: str, level: int, **attrs) -> str:
        base_id = _generate_heading_id(text)
        if not base_id:
            return f"<h{level}>{text}</h{level}>\n"

        if base_id in self._heading_id_counts:
            self._heading_id_counts[base_id] += 1
            heading_id = f"{base_id}-{self._heading_id_counts[base_id]}"
        else:
            self._heading_id_counts[base_id] = 0
            heading_id = base_id

        return f'<h{level} id="{heading_id}">{text}</h{level}>\n'


def render_markdown(content: str) -> TrustedHTML:
    """Render markdown source to HTML.

    Deterministic for a fixed input; a fresh renderer per call keeps heading
    ids independent between documents.
    """
    markdown = mistune.create_markdown(
        renderer=_HeadingIdRenderer(), plugins=["strikethrough", "table", "url"]
    )
    return TrustedHTML(markdown(content or ""))
