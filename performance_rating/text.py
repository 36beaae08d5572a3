"""Text normalization shared by the position classifier and alias matcher.

Pure functions with no domain dependencies.
"""

from __future__ import annotations

import re
import unicodedata

_WHITESPACE = re.compile(r"\s+")


def strip_diacritics(text: str) -> str:
    """Drop combining marks after canonical decomposition.

    >>> strip_diacritics("Pemahaman Sosiál")
    'Pemahaman Sosial'
    """
    decomposed = unicodedata.normalize("NFD", text)
    return "".join(ch for ch in decomposed if not unicodedata.combining(ch))


def normalize_text(text: str | None) -> str:
    """Fold *text* into the form used for keyword and alias containment.

    Strips diacritics, lowercases, keeps ASCII letters and whitespace only,
    and collapses whitespace runs to a single space.

    >>> normalize_text("1. Kehadiran  dan Tepat-Waktu")
    'kehadiran dan tepatwaktu'
    """
    if not text:
        return ""
    folded = strip_diacritics(text).lower()
    kept = "".join(ch for ch in folded if (ch.isascii() and ch.isalpha()) or ch.isspace())
    return _WHITESPACE.sub(" ", kept).strip()


def contains_any(haystack: str, needles: tuple[str, ...]) -> bool:
    return any(needle and needle in haystack for needle in needles)
