"""Text cleanup for HTML fragments scraped from result pages."""

from __future__ import annotations

import re

# One or more leading <span>...</span> blocks (dates, badges), each optionally
# followed by a middot separator in any of the encodings upstreams emit. Closing
# tags left over from nested spans are consumed with their block.
_LEADING_SPAN_RE = re.compile(
    r"""(?isx)
    ^(?:
        \s*<span\b[^>]*>.*?</span>
        (?:\s*</span>)*
        (?:\s*(?:&nbsp;|\xa0)?\s*(?:Â)?(?:·|&middot;|&\#183;))?
    )+
    """
)


def strip_leading_spans(html: str) -> str:
    """Remove leading span fragments from a description and trim it."""
    return _LEADING_SPAN_RE.sub("", html, count=1).strip()
