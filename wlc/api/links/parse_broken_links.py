"""Broken links file parser."""

import re

# Optional indentation and list dashes, then the first [[...]] on the line
LIST_ITEM_PATTERN = re.compile(r"^[\s-]*(\[\[[^\]]+\]\])")


def parse_broken_links(text: str) -> list[str]:
    """Parse a broken links report or hand-written list into keys.

    Accepts both ``- [[Name]]`` lists and generated report lines
    ``- [[Name]] in [[Path1]], [[Path2]]``. Only the first bracketed
    expression of a list line is a key; the ``in [[...]]`` references are
    never keys. Blank lines, headings and any other line are skipped.

    Returns:
        Keys taken verbatim, deduplicated, in first-seen order
    """
    keys: dict[str, None] = {}
    for line in text.splitlines():
        stripped = line.strip()
        if not stripped or stripped.startswith("#"):
            continue
        match = LIST_ITEM_PATTERN.match(line)
        if match:
            keys.setdefault(match.group(1), None)
    return list(keys)
