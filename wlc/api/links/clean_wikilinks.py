"""Broken wiki link rewriter."""

import re
from collections.abc import Collection

# [[target|display]]
ALIAS_PATTERN = re.compile(r"\[\[([^\]|]+)\|([^\]]+)\]\]")
# [[target]] without a pipe
PLAIN_PATTERN = re.compile(r"\[\[([^\]|]+)\]\]")


def clean_wikilinks(text: str, broken_keys: Collection[str], delete_text: bool = False) -> tuple[str, bool]:
    """Remove or unwrap the links whose key is in ``broken_keys``.

    Aliased links ``[[target|display]]`` are handled first and match on
    ``[[target]]``; they become ``display`` (or nothing with ``delete_text``).
    Plain links ``[[target]]`` then match on the whole bracket expression and
    become ``target`` (or nothing). Every other link is left byte for byte.

    Returns:
        The rewritten text and whether it differs from the input
    """

    def _alias(match: re.Match[str]) -> str:
        if f"[[{match.group(1)}]]" in broken_keys:
            return "" if delete_text else match.group(2)
        return match.group(0)

    def _plain(match: re.Match[str]) -> str:
        if match.group(0) in broken_keys:
            return "" if delete_text else match.group(1)
        return match.group(0)

    cleaned = PLAIN_PATTERN.sub(_plain, ALIAS_PATTERN.sub(_alias, text))
    return cleaned, cleaned != text
