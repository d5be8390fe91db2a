"""Display formatting for the manifestation text."""
from __future__ import annotations

ELLIPSIS = "..."


def display_text(text: str, limit: int = 60) -> str:
    """Shorten ``text`` to at most ``limit`` characters.

    Text longer than ``limit`` keeps its first ``limit - 3`` characters
    followed by ``"..."``; anything else is returned unchanged.
    """
    if limit < len(ELLIPSIS):
        raise ValueError(f"limit must be at least {len(ELLIPSIS)}")
    if len(text) > limit:
        return text[: limit - len(ELLIPSIS)] + ELLIPSIS
    return text
