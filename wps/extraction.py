"""
wps/extraction.py — przebieg 1 na dysku: skan stron, zapis artefaktów, przepisanie MDX.

Architektura:
  pages/**/*.mdx (posortowane) → Document
  → extract_blocks() → plan_artifacts() → rewrite_document()   (czyste, mdx/)
  → zapis snippets/<kategoria>/<plik>.js, potem zapis dokumentu

Dokument bez bloków nie jest dotykany. Dokument już przepisany (ma import
komponentu) jest pomijany, więc drugie uruchomienie nie wyodrębnia niczego.
Błąd I/O przerywa cały batch (PipelineIOError).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
from pathlib import Path

from rich.console import Console

from data_model.documents import Artifact, Document
from data_model.errors import ConfigError, PipelineIOError
from mdx import extract_blocks, is_rewritten, plan_artifacts, rewrite_document

_QUIET = Console(quiet=True)


class DocumentStatus(StrEnum):
    UPDATED   = "updated"      # artefakty zapisane, dokument przepisany
    PLANNED   = "planned"      # --dry-run: byłby przepisany
    NO_BLOCKS = "no_blocks"    # brak bloków do ekstrakcji
    REWRITTEN = "rewritten"    # już przepisany wcześniej, pominięty


@dataclass(slots=True)
class DocumentResult:
    path: Path
    category: str
    status: DocumentStatus
    artifacts: list[Artifact] = field(default_factory=list)
    pending_blocks: int = 0    # bloki w dokumencie już przepisanym (nieobsłużone)


@dataclass(slots=True)
class ExtractionReport:
    documents: list[DocumentResult] = field(default_factory=list)

    @property
    def scanned(self) -> int:
        return len(self.documents)

    def with_status(self, status: DocumentStatus) -> list[DocumentResult]:
        return [d for d in self.documents if d.status == status]

    @property
    def artifacts(self) -> list[Artifact]:
        return [a for d in self.documents for a in d.artifacts]


# ---------------------------------------------------------------------------
# Wejście
# ---------------------------------------------------------------------------

def scan_documents(pages_dir: Path) -> list[Path]:
    """Wszystkie *.mdx pod pages_dir (rekurencyjnie), w stałej kolejności."""
    if not pages_dir.is_dir():
        raise ConfigError(f"Katalog stron nie istnieje: {pages_dir}")
    return sorted(pages_dir.rglob("*.mdx"))


def load_document(pages_dir: Path, path: Path) -> Document:
    rel = path.relative_to(pages_dir)
    category = rel.parent.as_posix()     # "." dla korzenia, jak ROOT_CATEGORY
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise PipelineIOError(path, "Odczyt", e) from e
    return Document(
        path=path,
        text=text,
        category=category,
        basename=path.stem,
    )


# ---------------------------------------------------------------------------
# Zapis
# ---------------------------------------------------------------------------

def _write(path: Path, content: str) -> None:
    try:
        path.write_text(content, encoding="utf-8")
    except OSError as e:
        raise PipelineIOError(path, "Zapis", e) from e


def process_document(
    document: Document,
    snippets_dir: Path,
    *,
    dry_run: bool = False,
    console: Console = _QUIET,
) -> DocumentResult:
    blocks = extract_blocks(document.text)

    if is_rewritten(document.text):
        if blocks:
            console.print(
                f"  [yellow]pominięto:[/yellow] {document.path} — dokument już przepisany,"
                f" a zawiera {len(blocks)} nowych bloków"
            )
        return DocumentResult(
            path=document.path,
            category=document.category,
            status=DocumentStatus.REWRITTEN,
            pending_blocks=len(blocks),
        )

    if not blocks:
        return DocumentResult(path=document.path, category=document.category, status=DocumentStatus.NO_BLOCKS)

    artifacts = plan_artifacts(document, blocks)
    updated = rewrite_document(document.text, document.category, artifacts, blocks)

    if dry_run:
        for a in artifacts:
            console.print(f"  [dim]utworzyłbym:[/dim] {a.category_prefix}{a.filename}")
        return DocumentResult(
            path=document.path,
            category=document.category,
            status=DocumentStatus.PLANNED,
            artifacts=artifacts,
        )

    target_dir = snippets_dir if document.is_root else snippets_dir / document.category
    try:
        target_dir.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise PipelineIOError(target_dir, "Tworzenie katalogu", e) from e

    for a in artifacts:
        _write(target_dir / a.filename, a.code + "\n")
        console.print(f"  [green]utworzono:[/green] {snippets_dir.name}/{a.category_prefix}{a.filename}")

    _write(document.path, updated)
    document.text = updated
    console.print(f"  [green]zaktualizowano:[/green] {document.path}")

    return DocumentResult(
        path=document.path,
        category=document.category,
        status=DocumentStatus.UPDATED,
        artifacts=artifacts,
    )


def extract_all(
    pages_dir: Path,
    snippets_dir: Path,
    *,
    dry_run: bool = False,
    console: Console = _QUIET,
) -> ExtractionReport:
    """Przebieg 1 dla wszystkich dokumentów. Pierwszy błąd I/O przerywa batch."""
    paths = scan_documents(pages_dir)
    console.print(f"Przetwarzanie [bold]{len(paths)}[/bold] plików MDX…")

    report = ExtractionReport()
    for path in paths:
        document = load_document(pages_dir, path)
        report.documents.append(
            process_document(document, snippets_dir, dry_run=dry_run, console=console)
        )
    return report
