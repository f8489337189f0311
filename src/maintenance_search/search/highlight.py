"""Wrap query words found in a piece of text with highlight markers."""

from __future__ import annotations

import re


DEFAULT_MARKERS = ("<mark>", "</mark>")


def highlight_terms(text: str, query: str, markers: tuple[str, str] = DEFAULT_MARKERS) -> str:
    """Wrap each case-insensitive occurrence of every query word.

    Words are applied in order over the already-marked text, so a word such
    as ``mark`` also matches inside markers added for earlier words.
    """
    if not text or not query:
        return text

    opening, closing = markers
    for word in query.lower().split():
        pattern = re.compile(f"({re.escape(word)})", re.IGNORECASE)
        text = pattern.sub(lambda match: f"{opening}{match.group(1)}{closing}", text)
    return text
