"""Wikilink parser (UNO: single function)."""

import re
from collections.abc import Iterator

from .WikiLink import WikiLink

# [[...]] with a non-empty interior free of ']'
WIKILINK_PATTERN = re.compile(r"\[\[([^\]]+)\]\]")


def parse_wikilinks(text: str) -> Iterator[WikiLink]:
    """Extract all wiki links from document text.

    Unbalanced or malformed brackets are simply not matched.

    Args:
        text: Document content to parse

    Yields:
        WikiLink objects for each [[...]] found, in text order
    """
    for match in WIKILINK_PATTERN.finditer(text):
        target, display = WikiLink.split_alias(match.group(1))
        yield WikiLink(target=target, display=display, raw=match.group(0))
