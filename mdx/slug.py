"""mdx/slug.py — zamiana tekstu nagłówka H2 na fragment nazwy pliku."""

from __future__ import annotations

import re

# Czasowniki i słowa funkcyjne, które nic nie wnoszą do nazwy pliku.
STOP_WORDS: frozenset[str] = frozenset({
    "measure", "check", "analyze", "analyse", "detect", "find", "get", "fetch",
    "track", "monitor", "for", "all", "the", "a", "an", "to", "of", "and", "or",
    "with", "in", "by", "via", "its",
})

_PUNCT_RE = re.compile(r"[^\w\s-]", re.ASCII)
_SPLIT_RE = re.compile(r"[\s-]+")


def _excluded_words(basename: str) -> set[str]:
    return set(re.sub(r"[-_]", " ", basename.lower()).split(" "))


def derive_slug(heading: str | None, basename: str) -> str:
    """
    Zwraca fragment kebab-case z nagłówka, np.
    ("Measure TTFB sub-parts", "TTFB") → "Sub-Parts".

    Pomija słowa 1-znakowe, STOP_WORDS i słowa z nazwy dokumentu.
    Pusty wynik oznacza, że wywołujący ma użyć numeru bloku.
    """
    if not heading:
        return ""
    excluded = _excluded_words(basename)
    words = [
        w for w in _SPLIT_RE.split(_PUNCT_RE.sub("", heading))
        if len(w) > 1 and w.lower() not in STOP_WORDS and w.lower() not in excluded
    ]
    return "-".join(w[0].upper() + w[1:] for w in words)
