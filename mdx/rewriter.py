"""
mdx/rewriter.py — nazewnictwo artefaktów i przepisywanie dokumentu (czyste funkcje).

Kolejność podmian jest obowiązkowa: od ostatniego bloku do pierwszego.
Offsety wcześniejszych bloków pochodzą z jednego skanu niezmienionego tekstu,
więc podmiana "od przodu" przesunęłaby wszystkie kolejne.

Publiczne API:
  identifier_for(index)                              -> str
  artifact_filename(basename, index, heading, taken) -> str
  plan_artifacts(document, blocks)                   -> list[Artifact]
  import_prefix(category)                            -> str
  replace_spans(text, spans)                         -> str
  rewrite_document(text, category, artifacts, blocks) -> str
  is_rewritten(text)                                 -> bool
"""

from __future__ import annotations

from collections.abc import Collection, Sequence
from pathlib import PurePosixPath

from data_model.documents import ROOT_CATEGORY, Artifact, Document, ExtractionBlock
from mdx.dialect import (
    ARTIFACT_EXT,
    artifact_import,
    component_import,
    component_reference,
    has_component_import,
)
from mdx.slug import derive_slug


# ---------------------------------------------------------------------------
# Nazewnictwo
# ---------------------------------------------------------------------------

def identifier_for(index: int) -> str:
    return "snippet" if index == 0 else f"snippet{index + 1}"


def artifact_filename(
    basename: str,
    index: int,
    heading: str | None,
    taken: Collection[str] = (),
) -> str:
    """
    Nazwa pliku artefaktu dla bloku `index` dokumentu `basename`.

      index 0          → <base>.js
      index ≥ 1, slug  → <base>-<slug>.js
      index ≥ 1, brak  → <base>-<index+1>.js

    Gdy nazwa jest już zajęta przez wcześniejszy blok tego samego dokumentu
    (`taken`), używamy formy numerycznej; gdy i ona jest zajęta, dokładamy
    najmniejszy wolny sufiks -N.
    """
    if index == 0:
        name = f"{basename}{ARTIFACT_EXT}"
    else:
        slug = derive_slug(heading, basename)
        name = f"{basename}-{slug or index + 1}{ARTIFACT_EXT}"
    if name not in taken:
        return name

    numeric = f"{basename}-{index + 1}"
    if f"{numeric}{ARTIFACT_EXT}" not in taken:
        return f"{numeric}{ARTIFACT_EXT}"
    n = 2
    while f"{numeric}-{n}{ARTIFACT_EXT}" in taken:
        n += 1
    return f"{numeric}-{n}{ARTIFACT_EXT}"


def plan_artifacts(document: Document, blocks: Sequence[ExtractionBlock]) -> list[Artifact]:
    """Przypisuje każdemu blokowi nazwę pliku i identyfikator (bez zapisu)."""
    artifacts: list[Artifact] = []
    taken: set[str] = set()
    for i, block in enumerate(blocks):
        filename = artifact_filename(document.basename, i, block.heading, taken)
        taken.add(filename)
        artifacts.append(Artifact(
            category=document.category,
            filename=filename,
            code=block.code,
            origin=document.path,
            heading=block.heading,
            index=i,
            identifier=identifier_for(i),
        ))
    return artifacts


# ---------------------------------------------------------------------------
# Przepisywanie
# ---------------------------------------------------------------------------

def import_prefix(category: str) -> str:
    """'../' powtórzone tyle razy, ile poziomów dzieli dokument od korzenia projektu."""
    if category in (ROOT_CATEGORY, ""):
        return "../"
    return "../" * (1 + len(PurePosixPath(category).parts))


def replace_spans(text: str, spans: Sequence[tuple[int, int, str]]) -> str:
    """
    Podmienia spany (start, end, zamiennik), od najwyższego offsetu.

    Spany muszą pochodzić z jednego skanu `text` i nie mogą na siebie
    nachodzić.
    """
    ordered = sorted(spans, key=lambda s: s[0], reverse=True)
    for (start, end, _), (next_start, _, _) in zip(ordered[1:], ordered):
        if end > next_start:
            raise ValueError(f"Nachodzące spany: ({start}, {end}) i początek {next_start}")

    updated = text
    for start, end, replacement in ordered:
        updated = updated[:start] + replacement + updated[end:]
    return updated


def rewrite_document(
    text: str,
    category: str,
    artifacts: Sequence[Artifact],
    blocks: Sequence[ExtractionBlock],
) -> str:
    """
    Zastępuje bloki odwołaniami <Snippet code={id} /> i dokleja na początek
    importy: jeden na artefakt + jeden wspólny import komponentu.
    """
    if len(artifacts) != len(blocks):
        raise ValueError(f"{len(artifacts)} artefaktów dla {len(blocks)} bloków")
    if not blocks:
        return text

    updated = replace_spans(text, [
        (block.start, block.end, component_reference(artifact.identifier))
        for block, artifact in zip(blocks, artifacts)
    ])

    prefix = import_prefix(category)
    lines = [
        artifact_import(a.identifier, prefix, a.category_prefix, a.filename)
        for a in artifacts
    ]
    lines.append(component_import(prefix))
    return "\n".join(lines) + "\n\n" + updated


def is_rewritten(text: str) -> bool:
    """Czy dokument ma już wygenerowany import komponentu (po przebiegu 1)."""
    return has_component_import(text)
