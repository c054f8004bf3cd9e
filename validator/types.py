"""
validator/types.py — kody błędów i struktury raportu walidacji manifestów.

ValidationError — pojedyncze naruszenie: który manifest, które pole,
    zmierzona długość i limit.
ValidationReport — wynik walidacji całego batcha (wszystkie manifesty).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
from typing import Any


class ErrorCode(StrEnum):
    """Stałe kody błędów walidatora frontmatter."""

    SCHEMA_VIOLATION     = "E_SCHEMA_VIOLATION"
    NAME_TOO_LONG        = "E_NAME_TOO_LONG"
    DESCRIPTION_TOO_LONG = "E_DESCRIPTION_TOO_LONG"


@dataclass(slots=True)
class ValidationError:
    """
    Pojedynczy błąd walidacji.

    - code:         stały identyfikator klasy błędu (ErrorCode)
    - manifest:     identyfikator manifestu (np. "webperf-loading")
    - path:         JSON Pointer do pola, np. "/description"
    - message:      czytelny opis błędu
    - expected_fix: krótka instrukcja naprawy
    - details:      np. {"length": 70, "limit": 64}
    """

    code: ErrorCode
    manifest: str
    path: str
    message: str
    expected_fix: str
    details: dict[str, Any] | None = None


@dataclass(slots=True)
class ValidationReport:
    """
    Wynik walidacji batcha.

    - is_valid: True gdy brak błędów
    - errors:   lista błędów ze wszystkich manifestów
    - checked:  identyfikatory sprawdzonych manifestów (w kolejności)
    """

    is_valid: bool
    errors: list[ValidationError] = field(default_factory=list)
    checked: list[str] = field(default_factory=list)
