"""Konfiguracja katalogów potoku — zmienne środowiskowe (opcjonalnie plik .env)."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

_PROJECT_ROOT = Path(__file__).resolve().parent.parent

load_dotenv(_PROJECT_ROOT / ".env")


@dataclass(frozen=True, slots=True)
class Settings:
    root: Path
    pages_dir: Path        # dokumenty MDX (wejście przebiegu 1 i 2)
    snippets_dir: Path     # artefakty (wyjście przebiegu 1)
    skills_dir: Path       # manifesty (wyjście przebiegu 2)
    categories_file: Path | None


def _path(env: str, default: Path) -> Path:
    value = os.getenv(env)
    return Path(value) if value else default


def get_settings(
    root: str | Path | None = None,
    pages_dir: str | Path | None = None,
    snippets_dir: str | Path | None = None,
    skills_dir: str | Path | None = None,
    categories_file: str | Path | None = None,
) -> Settings:
    """Argumenty (np. z CLI) mają pierwszeństwo przed WPS_* ze środowiska."""
    base = Path(root) if root else _path("WPS_ROOT", Path.cwd())
    categories = categories_file or os.getenv("WPS_CATEGORIES")
    return Settings(
        root=base,
        pages_dir=Path(pages_dir) if pages_dir else _path("WPS_PAGES_DIR", base / "pages"),
        snippets_dir=Path(snippets_dir) if snippets_dir else _path("WPS_SNIPPETS_DIR", base / "snippets"),
        skills_dir=Path(skills_dir) if skills_dir else _path("WPS_SKILLS_DIR", base / "skills"),
        categories_file=Path(categories) if categories else None,
    )
