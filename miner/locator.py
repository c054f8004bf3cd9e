"""
miner/locator.py — odnajdywanie dokumentu, który importuje dany artefakt.

Nie ma zapisanego indeksu artefakt → dokument; jedynym śladem jest linia
importu w przepisanym dokumencie:

  import snippet2 from '../../snippets/Loading/TTFB-Sub-Parts.js?raw'

Dokumenty kategorii przeglądamy w stałej (leksykograficznej) kolejności;
wygrywa pierwsze dopasowanie. Brak dopasowania → None (artefakt osierocony),
nigdy wyjątek.
"""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path

from data_model.documents import DocumentScope, ImportBinding, LocatedImport
from data_model.errors import PipelineIOError
from mdx.dialect import ARTIFACT_IMPORT_RE, import_pattern


def import_bindings(text: str) -> ImportBinding:
    """{nazwa pliku artefaktu -> identyfikator} z linii importu dokumentu."""
    return {m.group(2): m.group(1) for m in ARTIFACT_IMPORT_RE.finditer(text)}


def classify_scope(text: str) -> DocumentScope:
    """SHARED gdy dokument importuje więcej niż jeden artefakt."""
    return DocumentScope.SHARED if len(import_bindings(text)) > 1 else DocumentScope.SINGLE


def locate_import(
    filename: str,
    documents: Iterable[tuple[Path, str]],
) -> LocatedImport | None:
    """Pierwszy dokument (w podanej kolejności) z linią importu `filename`."""
    pattern = import_pattern(filename)
    for path, text in documents:
        m = pattern.search(text)
        if m:
            return LocatedImport(
                path=path,
                text=text,
                identifier=m.group(1),
                scope=classify_scope(text),
            )
    return None


def category_documents(pages_dir: Path, category: str) -> list[tuple[Path, str]]:
    """Dokumenty .mdx bezpośrednio w katalogu kategorii, posortowane po nazwie."""
    directory = pages_dir / category
    if not directory.is_dir():
        return []
    docs: list[tuple[Path, str]] = []
    for path in sorted(directory.glob("*.mdx")):
        try:
            docs.append((path, path.read_text(encoding="utf-8")))
        except OSError as e:
            raise PipelineIOError(path, "Odczyt", e) from e
    return docs


def find_document_for_artifact(pages_dir: Path, category: str, filename: str) -> LocatedImport | None:
    return locate_import(filename, category_documents(pages_dir, category))
