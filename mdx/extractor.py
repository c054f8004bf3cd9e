"""
mdx/extractor.py — wyszukiwanie bloków kodu do ekstrakcji.

Algorytm:
  tekst → LineIndex → linie "### Snippet"
  → dla każdej: obszar [koniec linii nagłówka, następny nagłówek ekstrakcji)
  → pierwszy "```js copy\\n" w obszarze + pasujące zamknięcie "\\n```"
  → ExtractionBlock(heading=najbliższe H2 przed nagłówkiem ekstrakcji)

Nagłówek bez pasującego bloku nie daje nic (to nie jest błąd).

Kluczowe funkcje publiczne:
  extract_blocks(text) -> list[ExtractionBlock]
"""

from __future__ import annotations

from data_model.documents import ExtractionBlock
from mdx.dialect import EXTRACTION_HEADING, FENCE_CLOSE, FENCE_OPEN
from mdx.line_index import LineIndex


def extract_blocks(text: str, index: LineIndex | None = None) -> list[ExtractionBlock]:
    """Zwraca bloki w kolejności dokumentu, z offsetami względem `text`."""
    index = index or LineIndex(text)
    markers = index.lines_equal_to(EXTRACTION_HEADING)

    blocks: list[ExtractionBlock] = []
    for i, marker_pos in enumerate(markers):
        heading_end = index.line_end(marker_pos)
        bound = markers[i + 1] if i + 1 < len(markers) else len(text)

        open_pos = text.find(FENCE_OPEN, heading_end, bound)
        if open_pos == -1:
            continue
        code_start = open_pos + len(FENCE_OPEN)
        close_pos = text.find(FENCE_CLOSE, code_start, bound)
        if close_pos == -1:
            continue

        h2 = index.preceding(marker_pos, level=2)
        blocks.append(ExtractionBlock(
            heading=h2.text if h2 else None,
            start=open_pos,
            end=close_pos + len(FENCE_CLOSE),
            code=text[code_start:close_pos],
        ))

    return blocks
