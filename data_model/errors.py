"""
data_model/errors.py — wyjątki potoku.

Klasy błędów:
  PipelineError            — baza; komendy CLI łapią ją i kończą z kodem 1
  PipelineIOError          — nieczytelny dokument / niezapisywalny katalog
  ManifestValidationError  — pola frontmatter przekraczają limity (cały batch)
  ConfigError              — błędny plik kategorii lub ustawień

Braki strukturalne (nagłówek bez bloku kodu, artefakt bez dokumentu)
nie są wyjątkami; obsługuje je lokalnie wywołujący.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from validator.types import ValidationError


class PipelineError(Exception):
    """Błąd przerywający cały przebieg."""


class PipelineIOError(PipelineError):
    def __init__(self, path: Path, operation: str, cause: OSError) -> None:
        self.path = path
        self.operation = operation
        self.cause = cause
        super().__init__(f"{operation} {path}: {cause.strerror or cause}")


class ManifestValidationError(PipelineError):
    def __init__(self, errors: list[ValidationError]) -> None:
        self.errors = errors
        lines = [f"  {e.manifest}: {e.message}" for e in errors]
        super().__init__("Błędy walidacji frontmatter:\n" + "\n".join(lines))


class ConfigError(PipelineError):
    """Niepoprawna konfiguracja (plik kategorii, ścieżki)."""
