"""
data_model/documents.py — model dokumentu MDX i artefaktów (snippetów).

Document odpowiada jednej stronie MDX; ExtractionBlock to blok kodu znaleziony
pod nagłówkiem ekstrakcji (żyje tylko w przebiegu 1). Artifact to plik ze
snippetem zapisany w katalogu kategorii. Pole `identifier` jest nazwą
zmiennej z linii importu i stanowi klucz łączący oba przebiegi.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from pathlib import Path
from typing import TypeAlias

# Kategoria korzenia stron (dokument bez podkatalogu).
ROOT_CATEGORY = "."


@dataclass(slots=True)
class Document:
    path: Path
    text: str            # treść dokumentu (modyfikowana przez przebieg 1)
    category: str        # podkatalog względem katalogu stron, "." dla korzenia
    basename: str        # nazwa pliku bez .mdx

    @property
    def is_root(self) -> bool:
        return self.category == ROOT_CATEGORY


@dataclass(frozen=True, slots=True)
class ExtractionBlock:
    """
    Blok kodu pod nagłówkiem ekstrakcji.

    - heading: tekst najbliższego poprzedzającego nagłówka H2 (None gdy brak)
    - start:   offset otwierającego ``` (włącznie)
    - end:     offset tuż za zamykającym ``` (wyłącznie)
    - code:    treść bloku bez płotków
    """

    heading: str | None
    start: int
    end: int
    code: str


@dataclass(frozen=True, slots=True)
class Artifact:
    """
    Snippet wyodrębniony z jednego bloku.

    Tożsamość: (category, filename). Obiekt niezmienny po zapisie.
    """

    category: str
    filename: str
    code: str
    origin: Path
    heading: str | None
    index: int           # 0-based, gęsty w obrębie dokumentu
    identifier: str      # nazwa zmiennej w linii importu, np. "snippet2"

    @property
    def category_prefix(self) -> str:
        """Prefiks ścieżki kategorii: "" dla korzenia, "Loading/" itd."""
        return "" if self.category == ROOT_CATEGORY else f"{self.category}/"


# Mapowanie {nazwa pliku artefaktu -> identyfikator}, odtwarzane z linii importu.
ImportBinding: TypeAlias = dict[str, str]


class DocumentScope(StrEnum):
    """Dokument z jednym snippetem (SINGLE) lub współdzielony (SHARED)."""
    SINGLE = "single"
    SHARED = "shared"


@dataclass(frozen=True, slots=True)
class LocatedImport:
    """Wynik lokalizatora: dokument importujący artefakt."""
    path: Path
    text: str
    identifier: str
    scope: DocumentScope


@dataclass(slots=True)
class SectionMetadata:
    title: str
    description: str = ""
    thresholds: str = ""     # tabela markdown (bez końcowego \n) lub ""


@dataclass(slots=True)
class ArtifactDescriptor:
    """Wpis manifestu kategorii dla jednego artefaktu."""
    filename: str
    title: str
    description: str = ""
    thresholds: str = ""

    @property
    def stem(self) -> str:
        return Path(self.filename).stem
