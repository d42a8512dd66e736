"""WLC - Wiki Link Cleaner."""

__all__: list[str] = []
