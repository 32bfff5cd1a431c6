"""HTML and Markdown to plain text."""

from __future__ import annotations

import re

import markdown

from ..utils import decode_text

_SUBSTITUTIONS: tuple[tuple[re.Pattern[str], str], ...] = (
    (re.compile(r"<script[^>]*>[\s\S]*?</script>", re.IGNORECASE), ""),
    (re.compile(r"<style[^>]*>[\s\S]*?</style>", re.IGNORECASE), ""),
    (re.compile(r"<br\s*/?>", re.IGNORECASE), "\n"),
    (re.compile(r"</p>", re.IGNORECASE), "\n\n"),
    (re.compile(r"</div>", re.IGNORECASE), "\n"),
    (re.compile(r"</li>", re.IGNORECASE), "\n"),
    (re.compile(r"<li(?:\s[^>]*)?>", re.IGNORECASE), "• "),
    (re.compile(r"</tr>", re.IGNORECASE), "\n"),
    (re.compile(r"<t[dh](?:\s[^>]*)?>", re.IGNORECASE), "\t"),
    (re.compile(r"<[^>]+>"), ""),
)

# &amp; goes last so "&amp;lt;" decodes to "&lt;" rather than "<".
_ENTITIES = (
    ("&nbsp;", " "),
    ("&lt;", "<"),
    ("&gt;", ">"),
    ("&quot;", '"'),
    ("&#39;", "'"),
    ("&amp;", "&"),
)

_BLANK_RUN_RE = re.compile(r"\n{3,}")

_MARKDOWN_EXTENSIONS = ["tables", "fenced_code"]


def strip_html(html: str) -> str:
    """Reduce an HTML string to readable plain text."""

    text = html
    for pattern, replacement in _SUBSTITUTIONS:
        text = pattern.sub(replacement, text)
    for entity, replacement in _ENTITIES:
        text = text.replace(entity, replacement)
    text = _BLANK_RUN_RE.sub("\n\n", text)
    return text.strip()


def html_to_text(data: bytes, filename: str = "") -> str:
    return strip_html(decode_text(data))


def markdown_to_text(data: bytes, filename: str = "") -> str:
    """Render Markdown to HTML, then strip it to plain text."""

    html = markdown.markdown(decode_text(data), extensions=_MARKDOWN_EXTENSIONS)
    return strip_html(html)


__all__ = ["strip_html", "html_to_text", "markdown_to_text"]
