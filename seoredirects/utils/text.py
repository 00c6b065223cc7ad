"""Text helpers for markdown descriptions.

Descriptions are stored as markdown source. Meta tags and search need the
plain text, the page body a light HTML rendering. Both are derived on demand.

Example:
    >>> strip_markdown('Test **bold** and [a link](https://example.com)')
    'Test bold and a link'
    >>> truncate_for_meta('word ' * 50, limit=20)
    'word word word word…'
"""

import re
import html

from seoredirects.constants import META_DESCRIPTION_LENGTH


_CODE_FENCE = re.compile(r'```[^\n]*\n?(.*?)```', re.DOTALL)
_IMAGE = re.compile(r'!\[([^\]]*)\]\([^)]*\)')
_LINK = re.compile(r'\[([^\]]+)\]\([^)]*\)')
_HTML_TAG = re.compile(r'<[^>]+>')
_HORIZONTAL_RULE = re.compile(r'^\s*([-*_])(?:\s*\1){2,}\s*$', re.MULTILINE)
_HEADING = re.compile(r'^\s{0,3}#{1,6}\s*', re.MULTILINE)
_BLOCKQUOTE = re.compile(r'^\s*>\s?', re.MULTILINE)
_LIST_MARKER = re.compile(r'^\s*(?:[-*+]|\d+\.)\s+', re.MULTILINE)
_EMPHASIS = (
    re.compile(r'\*\*(.+?)\*\*'),
    re.compile(r'__(.+?)__'),
    re.compile(r'~~(.+?)~~'),
    re.compile(r'\*(.+?)\*'),
    re.compile(r'(?<!\w)_(.+?)_(?!\w)'),
)
_INLINE_CODE = re.compile(r'`([^`]*)`')
_WHITESPACE = re.compile(r'\s+')


def strip_markdown(text: str | None) -> str:
    """Derive plain text from a markdown (or HTML) description."""
    if not text:
        return ''

    plain = _CODE_FENCE.sub(r'\1', text)
    plain = _IMAGE.sub(r'\1', plain)
    plain = _LINK.sub(r'\1', plain)
    plain = _HTML_TAG.sub(' ', plain)
    plain = _HORIZONTAL_RULE.sub(' ', plain)
    plain = _HEADING.sub('', plain)
    plain = _BLOCKQUOTE.sub('', plain)
    plain = _LIST_MARKER.sub('', plain)
    for pattern in _EMPHASIS:
        plain = pattern.sub(r'\1', plain)
    plain = _INLINE_CODE.sub(r'\1', plain)
    plain = html.unescape(plain)
    return _WHITESPACE.sub(' ', plain).strip()


def truncate_for_meta(text: str, limit: int = META_DESCRIPTION_LENGTH) -> str:
    """Shorten text to at most `limit` characters, cutting on a word boundary."""
    if len(text) <= limit:
        return text

    cut = text[: limit - 1]
    if not text[limit - 1].isspace():
        boundary = cut.rfind(' ')
        if boundary > limit // 2:
            cut = cut[:boundary]
    return cut.rstrip(' ,.;:-') + '…'


_HTML_BOLD = re.compile(r'\*\*(.+?)\*\*')
_HTML_ITALIC = re.compile(r'\*(.+?)\*')
_HTML_CODE = re.compile(r'`([^`]+)`')
_HTML_LINK = re.compile(r'\[([^\]]+)\]\((https?://[^)\s]+)\)')


def markdown_to_html(text: str | None) -> str:
    """Render the inline markdown of a description for display.

    Source is HTML-escaped first, so raw tags never reach the page. Supported:
    `**bold**`, `*italic*`, `` `code` ``, `[label](http(s) url)` and line breaks.

    Example:
        >>> markdown_to_html('Test **bold**\\n<b>x</b>')
        'Test <strong>bold</strong><br>&lt;b&gt;x&lt;/b&gt;'
    """
    if not text:
        return ''

    rendered = html.escape(text.strip(), quote=True)
    rendered = _HTML_CODE.sub(r'<code>\1</code>', rendered)
    rendered = _HTML_LINK.sub(r'<a href="\2" rel="noopener">\1</a>', rendered)
    rendered = _HTML_BOLD.sub(r'<strong>\1</strong>', rendered)
    rendered = _HTML_ITALIC.sub(r'<em>\1</em>', rendered)
    return rendered.replace('\r\n', '\n').replace('\n', '<br>')
