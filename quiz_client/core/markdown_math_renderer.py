"""Question text markup: Markdown with ``$...$`` / ``$$...$$`` TeX spans.

Math spans are cut out before Markdown runs so that ``*`` or ``_`` inside a
formula never turns into emphasis, then put back escaped for MathJax to
typeset inside the web view.
"""

from __future__ import annotations

import re
from html import escape

from markdown_it import MarkdownIt

from quiz_client.constants.about import APP_NAME

MATHJAX_URL = "https://cdn.jsdelivr.net/npm/mathjax@3/es5/tex-mml-chtml.js"

EMPTY_TEXT_HTML = "<p><em>No content provided.</em></p>"

_MATH_SPAN = re.compile(r"(?<!\\)(\$\$.+?\$\$|\$[^$\n]+?\$)", re.DOTALL)
_PLACEHOLDER = re.compile(r"QDMATH(\d+)Z")

_MATHJAX_CONFIG = (
    "window.MathJax = {tex: {inlineMath: [['$', '$']], displayMath: [['$$', '$$']]}};"
)

_PAGE_CSS = (
    "body { margin: 0; padding: 12px; background: transparent;"
    " font-family: 'Segoe UI', system-ui, sans-serif; }"
    " .question-html { line-height: 1.5; }"
    " .question-html p { margin: 0 0 0.6em 0; }"
)


def _stash_math(text: str) -> tuple[str, list[str]]:
    spans: list[str] = []

    def replace(match: re.Match[str]) -> str:
        spans.append(match.group(0))
        return f"QDMATH{len(spans) - 1}Z"

    return _MATH_SPAN.sub(replace, text), spans


def _restore_math(html: str, spans: list[str]) -> str:
    return _PLACEHOLDER.sub(lambda match: escape(spans[int(match.group(1))], quote=False), html)


class MarkdownMathRenderer:
    """Turns question markup into HTML for ``QWebEngineView``."""

    def __init__(self) -> None:
        # Raw HTML stays disabled: question text comes from the server.
        self._markdown = MarkdownIt("commonmark", {"html": False}).enable(["table", "strikethrough"])

    def render_fragment(self, text: str) -> str:
        text = text.strip()
        if not text:
            return EMPTY_TEXT_HTML
        protected, spans = _stash_math(text)
        return _restore_math(self._markdown.render(protected), spans)

    def render_full_document(self, text: str, font_size: int = 14) -> str:
        """A standalone page that loads MathJax around the rendered fragment."""
        body = self.render_fragment(text)
        return (
            "<!doctype html>\n"
            '<html lang="en"><head><meta charset="utf-8" />'
            f"<title>{escape(APP_NAME)}</title>"
            f"<style>{_PAGE_CSS} .question-html {{ font-size: {font_size}pt; }}</style>"
            f"<script>{_MATHJAX_CONFIG}</script>"
            f'<script defer src="{MATHJAX_URL}"></script>'
            "</head><body>"
            f'<div class="question-html">{body}</div>'
            "</body></html>"
        )


renderer = MarkdownMathRenderer()
