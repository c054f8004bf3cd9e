"""
wps/generation.py — przebieg 2 na dysku: metadane artefaktów → manifesty SKILL.md.

Kroki:
  1. walidacja frontmatter WSZYSTKICH manifestów (kategorie + zbiorczy);
     jakikolwiek błąd → ManifestValidationError, nic nie jest zapisane
  2. dla każdej kategorii: snippets/<key>/*.js → lokalizator → miner
     → ArtifactDescriptor (odczyty, bez zapisu)
  3. zapis: skills/<skill>/scripts/*.js (katalog odtwarzany od zera)
     + skills/<skill>/SKILL.md, na końcu skills/<toolkit>/SKILL.md

Kategorie bez artefaktów nie dostają manifestu (ale liczą się w zbiorczym
jako 0). Wynik jest generowany w całości przy każdym uruchomieniu.
"""

from __future__ import annotations

import shutil
from dataclasses import dataclass, field
from pathlib import Path

from rich.console import Console

from data_model.documents import ArtifactDescriptor
from data_model.errors import ManifestValidationError, PipelineIOError
from manifest import (
    MANIFEST_FILENAME,
    SCRIPTS_DIR,
    CategoryConfig,
    ToolkitConfig,
    render_category_manifest,
    render_umbrella_manifest,
)
from mdx.dialect import ARTIFACT_EXT
from miner import category_documents, fallback_metadata, locate_import, mine_metadata
from validator import validate_frontmatter

_QUIET = Console(quiet=True)


@dataclass(slots=True)
class CategoryResult:
    config: CategoryConfig
    files: list[Path] = field(default_factory=list)
    descriptors: list[ArtifactDescriptor] = field(default_factory=list)
    orphans: list[str] = field(default_factory=list)   # artefakty bez dokumentu
    manifest_path: Path | None = None


@dataclass(slots=True)
class GenerationReport:
    categories: list[CategoryResult] = field(default_factory=list)
    umbrella_path: Path | None = None

    @property
    def total_artifacts(self) -> int:
        return sum(len(c.files) for c in self.categories)


# ---------------------------------------------------------------------------
# Odczyt
# ---------------------------------------------------------------------------

def artifact_files(snippets_dir: Path, category: str) -> list[Path]:
    directory = snippets_dir / category
    if not directory.is_dir():
        return []
    return sorted(p for p in directory.iterdir() if p.is_file() and p.suffix == ARTIFACT_EXT)


def describe_category(pages_dir: Path, snippets_dir: Path, config: CategoryConfig) -> CategoryResult:
    result = CategoryResult(config=config, files=artifact_files(snippets_dir, config.key))
    if not result.files:
        return result

    documents = category_documents(pages_dir, config.key)
    for path in result.files:
        located = locate_import(path.name, documents)
        if located is None:
            result.orphans.append(path.name)
            meta = fallback_metadata(path.stem)
        else:
            meta = mine_metadata(located, path.stem)
        result.descriptors.append(ArtifactDescriptor(
            filename=path.name,
            title=meta.title,
            description=meta.description,
            thresholds=meta.thresholds,
        ))
    return result


# ---------------------------------------------------------------------------
# Zapis
# ---------------------------------------------------------------------------

def _write(path: Path, content: str) -> None:
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
    except OSError as e:
        raise PipelineIOError(path, "Zapis", e) from e


def _replace_scripts(scripts_dir: Path, files: list[Path]) -> None:
    try:
        if scripts_dir.exists():
            shutil.rmtree(scripts_dir)
        scripts_dir.mkdir(parents=True)
        for src in files:
            shutil.copyfile(src, scripts_dir / src.name)
    except OSError as e:
        raise PipelineIOError(scripts_dir, "Kopiowanie skryptów do", e) from e


def generate_manifests(
    pages_dir: Path,
    snippets_dir: Path,
    skills_dir: Path,
    toolkit: ToolkitConfig,
    *,
    console: Console = _QUIET,
) -> GenerationReport:
    validation = validate_frontmatter(toolkit.frontmatter_entries())
    if not validation.is_valid:
        raise ManifestValidationError(validation.errors)

    report = GenerationReport(
        categories=[describe_category(pages_dir, snippets_dir, c) for c in toolkit.categories],
    )

    for result in report.categories:
        if not result.files:
            continue
        skill_dir = skills_dir / result.config.skill
        console.print(
            f"\nGeneruję [bold]{result.config.skill}/[/bold] ({len(result.files)} snippetów)…"
        )
        _replace_scripts(skill_dir / SCRIPTS_DIR, result.files)
        console.print(f"  skopiowano {len(result.files)} skryptów do {SCRIPTS_DIR}/")

        content = render_category_manifest(result.config, result.descriptors, toolkit.heading_prefix)
        result.manifest_path = skill_dir / MANIFEST_FILENAME
        _write(result.manifest_path, content)
        console.print(
            f"  [green]zapisano:[/green] {MANIFEST_FILENAME} ({round(len(content) / 1024)}KB)"
        )
        for name in result.orphans:
            console.print(f"  [yellow]brak dokumentu dla[/yellow] {name} — tytuł z nazwy pliku")

    counts = {r.config.key: len(r.files) for r in report.categories}
    report.umbrella_path = skills_dir / toolkit.skill / MANIFEST_FILENAME
    console.print(f"\nGeneruję manifest zbiorczy [bold]{toolkit.skill}/[/bold]…")
    _write(report.umbrella_path, render_umbrella_manifest(toolkit, counts))
    console.print(f"  [green]zapisano:[/green] {MANIFEST_FILENAME}")

    return report
