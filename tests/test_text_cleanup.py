from websurf.utils.html import strip_leading_spans


def test_removes_leading_date_span_and_middot() -> None:
    raw = "<span>Jan 5, 2024</span>\xa0·\xa0Rust is a language"
    assert strip_leading_spans(raw) == "Rust is a language"


def test_removes_escaped_and_mojibake_separators() -> None:
    assert strip_leading_spans("<span class='d'>3 days ago</span>&nbsp;Â· text") == "text"
    assert strip_leading_spans("<span>x</span>&nbsp;&middot; text") == "text"


def test_removes_span_without_separator() -> None:
    assert strip_leading_spans("  <span>News</span> Headline  ") == "Headline"


def test_keeps_spans_that_are_not_leading() -> None:
    raw = "Intro <span>kept</span> tail"
    assert strip_leading_spans(raw) == raw


def test_cleanup_is_idempotent() -> None:
    samples = [
        "<span>Jan 5, 2024</span>\xa0·\xa0Body",
        "<span>a</span> · <span>b</span> · Body",
        "<span>a</span>&nbsp;<span>b</span>",
        "<span><span>nested</span></span> Body",
        "Plain description",
        "",
    ]
    for raw in samples:
        once = strip_leading_spans(raw)
        assert strip_leading_spans(once) == once


def test_nested_leading_span_leaves_no_closing_tag() -> None:
    assert strip_leading_spans("<span><span>nested</span></span> Body") == "Body"
