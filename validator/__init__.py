"""
validator — walidacja frontmatter manifestów przed zapisem.

Interfejs publiczny:
    validate_frontmatter — walidacja batcha (JSON Schema, limity długości)
    ValidationReport, ValidationError, ErrorCode — typy raportu

Typowe użycie:
    from validator import validate_frontmatter

    report = validate_frontmatter([
        ("webperf-loading", {"name": "webperf-loading", "description": "..."}),
    ])
    if not report.is_valid:
        for e in report.errors:
            print(e.manifest, e.path, e.message)
"""

from .types import ErrorCode, ValidationError, ValidationReport
from .frontmatter import (
    FRONTMATTER_SCHEMA,
    MAX_DESCRIPTION_LENGTH,
    MAX_NAME_LENGTH,
    validate_frontmatter,
)

__all__ = [
    "ErrorCode",
    "ValidationError",
    "ValidationReport",
    "FRONTMATTER_SCHEMA",
    "MAX_DESCRIPTION_LENGTH",
    "MAX_NAME_LENGTH",
    "validate_frontmatter",
]
