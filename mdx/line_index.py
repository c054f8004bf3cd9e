"""
mdx/line_index.py — indeks linii i nagłówków dokumentu.

LineIndex budujemy raz na dokument. Wyszukiwanie najbliższego nagłówka
przed/za offsetem to bisect po posortowanych offsetach, bez ponownego
skanowania tekstu od początku dla każdego bloku.
"""

from __future__ import annotations

import bisect
from dataclasses import dataclass, field


@dataclass(frozen=True, slots=True)
class Heading:
    level: int
    text: str        # tekst po znacznikach "#", bez białych znaków na brzegach
    start: int       # offset początku linii
    end: int         # offset końca linii (pozycja \n lub len(text))


@dataclass(slots=True)
class LineIndex:
    text: str
    line_starts: list[int] = field(default_factory=list, init=False)
    headings: list[Heading] = field(default_factory=list, init=False)
    _by_level: dict[int, list[Heading]] = field(default_factory=dict, init=False, repr=False)
    _starts_by_level: dict[int, list[int]] = field(default_factory=dict, init=False, repr=False)

    def __post_init__(self) -> None:
        text = self.text
        pos = 0
        while True:
            self.line_starts.append(pos)
            nl = text.find("\n", pos)
            end = len(text) if nl == -1 else nl
            heading = _parse_heading(text[pos:end], pos, end)
            if heading is not None:
                self.headings.append(heading)
                self._by_level.setdefault(heading.level, []).append(heading)
                self._starts_by_level.setdefault(heading.level, []).append(heading.start)
            if nl == -1:
                break
            pos = nl + 1

    # ------------------------------------------------------------------
    # Linie
    # ------------------------------------------------------------------

    def line_end(self, pos: int) -> int:
        """Offset końca linii zawierającej pos."""
        nl = self.text.find("\n", pos)
        return len(self.text) if nl == -1 else nl

    def lines_equal_to(self, line: str) -> list[int]:
        """Offsety początków linii identycznych z `line`."""
        text = self.text
        found: list[int] = []
        for start in self.line_starts:
            end = start + len(line)
            if text.startswith(line, start) and (end == len(text) or text[end] == "\n"):
                found.append(start)
        return found

    # ------------------------------------------------------------------
    # Nagłówki
    # ------------------------------------------------------------------

    def preceding(self, pos: int, level: int) -> Heading | None:
        """Najbliższy nagłówek danego poziomu zaczynający się przed pos."""
        starts = self._starts_by_level.get(level, [])
        i = bisect.bisect_left(starts, pos)
        return self._by_level[level][i - 1] if i > 0 else None

    def following(self, pos: int, level: int) -> Heading | None:
        """Pierwszy nagłówek danego poziomu zaczynający się za pos."""
        starts = self._starts_by_level.get(level, [])
        i = bisect.bisect_right(starts, pos)
        return self._by_level[level][i] if i < len(starts) else None

    def first(self, level: int) -> Heading | None:
        hs = self._by_level.get(level)
        return hs[0] if hs else None


def _parse_heading(line: str, start: int, end: int) -> Heading | None:
    """'## Tytuł' → Heading(level=2, ...). Wymaga spacji po znacznikach."""
    if not line.startswith("#"):
        return None
    level = len(line) - len(line.lstrip("#"))
    rest = line[level:]
    if not rest.startswith(" ") or not rest.strip():
        return None
    return Heading(level=level, text=rest.strip(), start=start, end=end)
