"""Formatowanie tabel markdown."""

from __future__ import annotations

from typing import Sequence


def format_table(
    headers: Sequence[str],
    rows: Sequence[Sequence[str]],
    *,
    divider: Sequence[str] | None = None,
) -> list[str]:
    if divider is None:
        divider = ["-" * (len(h) + 2) for h in headers]
    lines = [
        "| " + " | ".join(headers) + " |",
        "|" + "|".join(divider) + "|",
    ]
    lines.extend("| " + " | ".join(str(cell) for cell in row) + " |" for row in rows)
    return lines
