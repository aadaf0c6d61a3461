"""Tests for HTML title/content extraction and truncation (no network)."""

from curabot.extraction.article import (
    CONTENT_CAP,
    FALLBACK_TITLE,
    TRUNCATION_MARKER,
    parse_article,
    truncate_content,
)


def _page(head: str = "", body: str = "") -> str:
    return f"<html><head>{head}</head><body>{body}</body></html>"


# -- Title preference --


def test_title_prefers_h1():
    html = _page(
        head='<title>Page Title</title><meta property="og:title" content="OG Title">',
        body="<h1>  Heading   Title </h1><p>text</p>",
    )
    assert parse_article(html).title == "Heading Title"


def test_title_falls_back_to_title_element():
    html = _page(
        head='<title>Page Title</title><meta property="og:title" content="OG Title">',
        body="<p>text</p>",
    )
    assert parse_article(html).title == "Page Title"


def test_title_falls_back_to_og_title():
    html = _page(head='<meta property="og:title" content="OG Title">', body="<p>text</p>")
    assert parse_article(html).title == "OG Title"


def test_title_element_whitespace_is_collapsed():
    html = _page(head="<title>\n  Page\n\tTitle  \n</title>", body="<p>text</p>")
    assert parse_article(html).title == "Page Title"


def test_og_title_whitespace_is_collapsed():
    html = _page(head='<meta property="og:title" content="  OG \n  Title ">', body="<p>text</p>")
    assert parse_article(html).title == "OG Title"


def test_whitespace_only_h1_falls_through_to_title():
    html = _page(head="<title>Page Title</title>", body="<h1> \n </h1><p>text</p>")
    assert parse_article(html).title == "Page Title"


def test_title_fixed_fallback():
    assert parse_article(_page(body="<p>text</p>")).title == FALLBACK_TITLE


def test_h1_inside_header_is_ignored():
    """Header, nav, footer and aside are stripped before the title lookup."""
    html = _page(
        head="<title>Real Title</title>",
        body="<header><h1>Site Name</h1></header><p>text</p>",
    )
    assert parse_article(html).title == "Real Title"


# -- Content preference --


def test_content_prefers_article():
    html = _page(body="<main>main text</main><article>article text</article>")
    assert parse_article(html).content == "article text"


def test_content_falls_back_to_main():
    html = _page(body="<div class='post-content'>post</div><main>main text</main>")
    assert parse_article(html).content == "main text"


def test_content_falls_back_to_post_content_then_entry_content():
    html = _page(body="<div class='entry-content'>entry</div><div class='post-content'>post</div>")
    assert parse_article(html).content == "post"

    html = _page(body="<p>intro</p><div class='entry-content'>entry</div>")
    assert parse_article(html).content == "entry"


def test_content_falls_back_to_body():
    html = _page(body="<div><p>one</p><p>two</p></div>")
    assert parse_article(html).content == "one two"


def test_empty_article_does_not_win():
    """First NON-EMPTY container wins."""
    html = _page(body="<article>   </article><main>main text</main>")
    assert parse_article(html).content == "main text"


def test_scripts_styles_and_nav_are_removed():
    html = _page(
        body=(
            "<nav>menu</nav><article><script>var x = 1;</script>"
            "<style>p {}</style><p>Body</p></article><footer>foot</footer>"
        )
    )
    assert parse_article(html).content == "Body"


def test_whitespace_is_normalized():
    html = _page(body="<article>\n  Lots\t\tof \n\n  space  </article>")
    assert parse_article(html).content == "Lots of space"


# -- Truncation --


def test_long_content_is_truncated_to_cap_plus_marker():
    text = "a" * (CONTENT_CAP + 500)
    result = truncate_content(text)
    assert len(result) == CONTENT_CAP + len(TRUNCATION_MARKER)
    assert result.endswith(TRUNCATION_MARKER)
    assert result[:CONTENT_CAP] == text[:CONTENT_CAP]


def test_content_at_or_under_cap_is_untouched():
    assert truncate_content("short") == "short"
    exact = "b" * CONTENT_CAP
    assert truncate_content(exact) == exact


def test_parse_article_applies_cap():
    html = _page(body="<article>" + "word " * 5000 + "</article>")
    content = parse_article(html).content
    assert len(content) == CONTENT_CAP + len(TRUNCATION_MARKER)
