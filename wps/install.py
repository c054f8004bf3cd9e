"""
wps/install.py — kopiowanie wygenerowanych manifestów do katalogu docelowego.

Każdy katalog skills/<skill>/ zastępuje (usuń + kopiuj) odpowiednik w `dest`.
Opcjonalnie zapisuje plik ustawień z listą zarejestrowanych manifestów:

  {"skills": [{"path": "./skills/webperf"}, ...]}
"""

from __future__ import annotations

import json
import shutil
from pathlib import Path

from rich.console import Console

from data_model.errors import ConfigError, PipelineIOError

_QUIET = Console(quiet=True)

LOCAL_DEST = Path(".claude") / "skills"
LOCAL_SETTINGS = Path(".claude") / "settings.json"


def global_dest() -> Path:
    return Path.home() / ".claude" / "skills"


def skill_dirs(skills_dir: Path) -> list[Path]:
    if not skills_dir.is_dir():
        raise ConfigError(f"Katalog manifestów nie istnieje: {skills_dir}")
    return sorted(p for p in skills_dir.iterdir() if p.is_dir())


def install_skills(
    skills_dir: Path,
    dest: Path,
    *,
    settings_file: Path | None = None,
    console: Console = _QUIET,
) -> list[str]:
    """Zwraca nazwy zainstalowanych manifestów (w kolejności alfabetycznej)."""
    sources = skill_dirs(skills_dir)
    try:
        dest.mkdir(parents=True, exist_ok=True)
        for src in sources:
            target = dest / src.name
            if target.exists():
                shutil.rmtree(target)
            shutil.copytree(src, target)
            console.print(f"   [green]✓[/green] {src.name}")
    except OSError as e:
        raise PipelineIOError(dest, "Instalacja do", e) from e

    names = [s.name for s in sources]
    if settings_file is not None:
        settings = {"skills": [{"path": f"./skills/{name}"} for name in names]}
        try:
            settings_file.parent.mkdir(parents=True, exist_ok=True)
            settings_file.write_text(json.dumps(settings, indent=2) + "\n", encoding="utf-8")
        except OSError as e:
            raise PipelineIOError(settings_file, "Zapis", e) from e
        console.print(f"   [green]✓[/green] Zarejestrowano {len(names)} manifestów w {settings_file}")
    return names
