"""
validator/frontmatter.py — walidacja pól frontmatter manifestów (JSON Schema).

Limity:
  name         ≤ 64 znaków
  description  ≤ 1024 znaków

validate_frontmatter() sprawdza wszystkie manifesty batcha naraz i zwraca
raport ze WSZYSTKIMI naruszeniami; decyzję o przerwaniu podejmuje
wywołujący (przebieg 2 nie zapisuje wtedy niczego).
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

import jsonschema

from .types import ErrorCode, ValidationError, ValidationReport

MAX_NAME_LENGTH        = 64
MAX_DESCRIPTION_LENGTH = 1024

FRONTMATTER_SCHEMA: dict[str, Any] = {
    "$schema": "https://json-schema.org/draft/2020-12/schema",
    "type": "object",
    "required": ["name", "description"],
    "properties": {
        "name":        {"type": "string", "minLength": 1, "maxLength": MAX_NAME_LENGTH},
        "description": {"type": "string", "minLength": 1, "maxLength": MAX_DESCRIPTION_LENGTH},
    },
}

_LENGTH_CODES: dict[str, ErrorCode] = {
    "name":        ErrorCode.NAME_TOO_LONG,
    "description": ErrorCode.DESCRIPTION_TOO_LONG,
}


def _to_error(manifest: str, e: jsonschema.ValidationError) -> ValidationError:
    path = "/" + "/".join(str(p) for p in e.absolute_path) if e.absolute_path else "/"
    field_name = str(e.absolute_path[-1]) if e.absolute_path else ""

    if e.validator == "maxLength" and field_name in _LENGTH_CODES:
        length, limit = len(e.instance), e.validator_value
        return ValidationError(
            code=_LENGTH_CODES[field_name],
            manifest=manifest,
            path=path,
            message=f"{field_name} too long: {length} chars (max {limit})",
            expected_fix=f"Skróć pole {field_name} do {limit} znaków.",
            details={"length": length, "limit": limit},
        )

    return ValidationError(
        code=ErrorCode.SCHEMA_VIOLATION,
        manifest=manifest,
        path=path,
        message=e.message,
        expected_fix=f"Popraw naruszenie schematu na ścieżce {path}.",
    )


def validate_frontmatter(entries: Iterable[tuple[str, dict[str, Any]]]) -> ValidationReport:
    """
    Waliduje frontmatter wielu manifestów.

    Args:
        entries: pary (identyfikator manifestu, {"name": ..., "description": ...})
    """
    validator = jsonschema.Draft202012Validator(FRONTMATTER_SCHEMA)
    errors: list[ValidationError] = []
    checked: list[str] = []

    for manifest, frontmatter in entries:
        checked.append(manifest)
        found = sorted(validator.iter_errors(frontmatter), key=lambda e: list(e.absolute_path))
        errors.extend(_to_error(manifest, e) for e in found)

    return ValidationReport(is_valid=not errors, errors=errors, checked=checked)
