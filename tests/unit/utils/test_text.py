"""Unit tests for plain-text helpers in text.py.

Test coverage includes:

1. strip_markdown() for common markdown and HTML constructs
2. truncate_for_meta() word-boundary truncation
3. markdown_to_html() display rendering with escaping
"""

import pytest

from seoredirects.utils.text import strip_markdown, truncate_for_meta, markdown_to_html


# -------------------------------
# 1. strip_markdown()
# -------------------------------


@pytest.mark.parametrize(
    'markdown, expected',
    [
        ('Test **bold**', 'Test bold'),
        ('Some *italic* and __strong__ and ~~gone~~', 'Some italic and strong and gone'),
        ('snake_case_name stays', 'snake_case_name stays'),
        ('A [link](https://example.com) here', 'A link here'),
        ('![Alt text](https://example.com/i.png) caption', 'Alt text caption'),
        ('# Heading\n\nParagraph', 'Heading Paragraph'),
        ('> quoted\n- item one\n- item two\n1. first', 'quoted item one item two first'),
        ('Use `code` inline', 'Use code inline'),
        ('```python\nprint(1)\n```', 'print(1)'),
        ('<p>Hello <b>there</b></p>', 'Hello there'),
        ('Fish &amp; chips', 'Fish & chips'),
        ('before\n\n---\n\nafter', 'before after'),
        ('', ''),
        (None, ''),
    ],
)
def test_strip_markdown(markdown, expected):
    assert strip_markdown(markdown) == expected


# -------------------------------
# 2. truncate_for_meta()
# -------------------------------


def test_truncate_for_meta_keeps_short_text():
    assert truncate_for_meta('short text') == 'short text'


def test_truncate_for_meta_cuts_on_word_boundary():
    result = truncate_for_meta('word ' * 50, limit=20)
    assert result == 'word word word word…'
    assert len(result) <= 20


def test_truncate_for_meta_cuts_long_words():
    result = truncate_for_meta('x' * 200, limit=10)
    assert result == 'x' * 9 + '…'


def test_truncate_for_meta_default_limit():
    assert len(truncate_for_meta('lorem ipsum ' * 40)) <= 160


# -------------------------------
# 3. markdown_to_html()
# -------------------------------


@pytest.mark.parametrize(
    'markdown, expected',
    [
        ('Test **bold**', 'Test <strong>bold</strong>'),
        ('*italic* and `code`', '<em>italic</em> and <code>code</code>'),
        ('line one\nline two', 'line one<br>line two'),
        ('[docs](https://e.com/a?b=1&c=2)', '<a href="https://e.com/a?b=1&amp;c=2" rel="noopener">docs</a>'),
        ('[bad](javascript:alert(1))', '[bad](javascript:alert(1))'),
        ('', ''),
        (None, ''),
    ],
)
def test_markdown_to_html(markdown, expected):
    assert markdown_to_html(markdown) == expected


def test_markdown_to_html_escapes_raw_html():
    rendered = markdown_to_html('<script>alert("x")</script> **hi**')

    assert '<script>' not in rendered
    assert rendered == '&lt;script&gt;alert(&quot;x&quot;)&lt;/script&gt; <strong>hi</strong>'
