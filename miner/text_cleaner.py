"""
miner/text_cleaner.py — wybór akapitu opisu i tabeli progów z tekstu MDX.

Co pomijamy przy szukaniu opisu (akapit = blok oddzielony pustą linią):
  - nagłówki (#), linie importu, płotki ```
  - tabele (|), cytaty (>), komponenty/JSX (<)
  - puste akapity i etykiety pogrubione zakończone dwukropkiem (**Uwaga:**)

Z wybranego akapitu usuwamy markup inline: linki [tekst](url) → tekst,
`kod` → kod, **pogrubienie** → pogrubienie; nowe linie → spacje.
"""

from __future__ import annotations

import re

# ---------------------------------------------------------------------------
# Stałe
# ---------------------------------------------------------------------------

_PARAGRAPH_SPLIT_RE = re.compile(r"\n\n+")

_SKIP_PATTERNS: tuple[re.Pattern[str], ...] = (
    re.compile(r"^#"),
    re.compile(r"^import "),
    re.compile(r"^```"),
    re.compile(r"^\|"),
    re.compile(r"^>"),
    re.compile(r"^<"),
    re.compile(r"^\s*$"),
    re.compile(r"^\*\*[^*]*:\*\*"),
)

_LINK_RE = re.compile(r"\[([^\]]+)\]\([^)]+\)")
_CODE_RE = re.compile(r"`([^`]+)`")
_BOLD_RE = re.compile(r"\*\*([^*]+)\*\*")

# Etykieta "**... threshold ...**" + pusta linia + tabela.
_THRESHOLD_SECTION_RE = re.compile(
    r"\*\*[^*]*[Tt]hreshold[^*]*\*\*[:\s]*\n\n((?:\|.+(?:\n|\Z))+)"
)
_TABLE_RE = re.compile(r"((?:\|.+(?:\n|\Z))+)")

# Glif najlepszego progu w tabelach ocen.
RATING_MARKER = "🟢"


# ---------------------------------------------------------------------------
# Publiczne API
# ---------------------------------------------------------------------------

def is_structural(paragraph: str) -> bool:
    return any(p.search(paragraph) for p in _SKIP_PATTERNS)


def strip_inline(text: str) -> str:
    text = _LINK_RE.sub(r"\1", text)
    text = _CODE_RE.sub(r"\1", text)
    text = _BOLD_RE.sub(r"\1", text)
    return text.replace("\n", " ").strip()


def first_paragraph(region: str) -> str:
    """Pierwszy akapit prozy w `region` jako plain text lub ""."""
    for para in _PARAGRAPH_SPLIT_RE.split(region):
        trimmed = para.strip()
        if not trimmed or is_structural(trimmed):
            continue
        return strip_inline(trimmed)
    return ""


def find_thresholds(region: str) -> str:
    """
    Tabela progów: najpierw tabela pod etykietą z "threshold",
    potem pierwsza tabela z RATING_MARKER. Brak → "".
    """
    m = _THRESHOLD_SECTION_RE.search(region)
    if m:
        return m.group(1).rstrip()
    for m in _TABLE_RE.finditer(region):
        if RATING_MARKER in m.group(1):
            return m.group(1).rstrip()
    return ""
