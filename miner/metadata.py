"""
miner/metadata.py — tytuł, opis i tabela progów dla jednego artefaktu.

Wejście: LocatedImport (dokument + identyfikator + zakres SINGLE/SHARED).

  SINGLE — cały dokument: tytuł = pierwsze "# ", opis = pierwszy akapit
           po tytule, progi = z całego dokumentu.
  SHARED — sekcja zawierająca <Snippet code={id} />, czyli obszar
           [najbliższy poprzedzający H2, następny H2). Snippet przed
           pierwszym H2 należy do wstępu [tytuł, pierwszy H2).
           Tytuł = "<tytuł dokumentu>: <sekcja>" (sam tytuł dla wstępu).
           Gdy sekcja nie ma akapitu prozy, opis szukamy od początku
           sekcji do końca dokumentu, nigdy przed sekcją.
           Progi tylko z sekcji.

Funkcja czysta: nie modyfikuje tekstu ani plików.
"""

from __future__ import annotations

from data_model.documents import DocumentScope, LocatedImport, SectionMetadata
from mdx.dialect import component_reference
from mdx.line_index import Heading, LineIndex
from miner.text_cleaner import find_thresholds, first_paragraph


def title_from_filename(basename: str) -> str:
    return basename.replace("-", " ")


def fallback_metadata(basename: str) -> SectionMetadata:
    """Metadane dla artefaktu bez dokumentu (osieroconego)."""
    return SectionMetadata(title=title_from_filename(basename))


def _body_start(index: LineIndex) -> int:
    h1 = index.first(level=1)
    return h1.end if h1 else 0


def _section_bounds(index: LineIndex, pos: int) -> tuple[Heading | None, int, int]:
    """(nagłówek H2 lub None dla wstępu, początek, koniec) sekcji zawierającej pos."""
    h2 = index.preceding(pos, level=2)
    if h2 is None:
        nxt = index.following(pos, level=2)
        return None, _body_start(index), nxt.start if nxt else len(index.text)
    nxt = index.following(h2.start, level=2)
    return h2, h2.end, nxt.start if nxt else len(index.text)


def mine_metadata(located: LocatedImport, basename: str) -> SectionMetadata:
    text = located.text
    index = LineIndex(text)
    h1 = index.first(level=1)
    doc_title = h1.text if h1 else title_from_filename(basename)

    if located.scope is DocumentScope.SINGLE:
        return SectionMetadata(
            title=doc_title,
            description=first_paragraph(text[_body_start(index):]),
            thresholds=find_thresholds(text),
        )

    pos = text.find(component_reference(located.identifier))
    if pos == -1:
        # Import bez odwołania w treści: opis z całego dokumentu.
        return SectionMetadata(title=doc_title, description=first_paragraph(text[_body_start(index):]))

    h2, start, end = _section_bounds(index, pos)
    section = text[start:end]
    return SectionMetadata(
        title=f"{doc_title}: {h2.text}" if h2 else doc_title,
        description=first_paragraph(section) or first_paragraph(text[start:]),
        thresholds=find_thresholds(section),
    )
