"""WikiLink model (UNO: single model)."""

from dataclasses import dataclass


@dataclass(frozen=True)
class WikiLink:
    """A wiki link occurrence parsed from document text.

    ``raw`` is the exact matched ``[[...]]`` span, ``target`` the text before
    the first ``|`` and ``display`` the text after it (None without a ``|``).
    The target keeps its whitespace; only ``key`` trims it.
    """

    target: str
    display: str | None
    raw: str

    @property
    def key(self) -> str:
        """Broken link key shared by every occurrence of the same target."""
        return broken_link_key(self.target)

    @staticmethod
    def split_alias(inner: str) -> tuple[str, str | None]:
        """Split ``target|display`` on the first pipe."""
        if "|" in inner:
            target, display = inner.split("|", 1)
            return target, display
        return inner, None


def broken_link_key(target: str) -> str:
    """Canonical ``[[target]]`` key for a link target."""
    return f"[[{target.strip()}]]"
