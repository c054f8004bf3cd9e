"""
manifest/assembler.py — renderowanie manifestów SKILL.md (czyste funkcje).

Manifest kategorii:
  frontmatter (name, description)
  → tabela "Available Snippets" (tytuł | pierwsze zdanie opisu | ścieżka)
  → sekcja wykonania
  → po jednej sekcji "## <tytuł>" na artefakt (opis, skrypt, progi)

Manifest zbiorczy:
  frontmatter → liczba snippetów → tabela kategorii → szybka ściąga → workflow

Wynik zależy wyłącznie od wejścia: ponowne uruchomienie na tych samych
danych daje identyczne bajty.
"""

from __future__ import annotations

import re
from collections.abc import Mapping, Sequence

from data_model.documents import ArtifactDescriptor
from manifest.categories import CategoryConfig, ToolkitConfig
from manifest.markdown import format_table

SCRIPTS_DIR = "scripts"
MANIFEST_FILENAME = "SKILL.md"

_SENTENCE_END_RE = re.compile(r"[.!?]")
_SHORT_DESCRIPTION_MAX = 100

_EVALUATE = "mcp__chrome-devtools__evaluate_script"
_CONSOLE = "mcp__chrome-devtools__get_console_message"
_NAVIGATE = "mcp__chrome-devtools__navigate_page"


# ---------------------------------------------------------------------------
# Pomocnicze
# ---------------------------------------------------------------------------

def _frontmatter(frontmatter: Mapping[str, str]) -> list[str]:
    return ["---", *(f"{k}: {v}" for k, v in frontmatter.items()), "---", ""]


def short_description(descriptor: ArtifactDescriptor) -> str:
    """Pierwsze zdanie opisu (max 100 znaków) albo tytuł, gdy opisu brak."""
    if not descriptor.description:
        return descriptor.title
    return _SENTENCE_END_RE.split(descriptor.description)[0][:_SHORT_DESCRIPTION_MAX]


def script_path(descriptor: ArtifactDescriptor) -> str:
    return f"{SCRIPTS_DIR}/{descriptor.filename}"


# ---------------------------------------------------------------------------
# Manifest kategorii
# ---------------------------------------------------------------------------

def render_category_manifest(
    config: CategoryConfig,
    descriptors: Sequence[ArtifactDescriptor],
    heading_prefix: str = "WebPerf",
) -> str:
    lines = _frontmatter(config.frontmatter())
    lines += [
        f"# {heading_prefix}: {config.name}",
        "",
        "JavaScript snippets for measuring web performance in Chrome DevTools. "
        f"Execute with `{_EVALUATE}`, capture output with `{_CONSOLE}`.",
        "",
        "## Available Snippets",
        "",
    ]
    lines += format_table(
        ["Snippet", "Description", "File"],
        [(d.title, short_description(d), script_path(d)) for d in descriptors],
    )
    lines += [
        "",
        "## Execution with Chrome DevTools MCP",
        "",
        "```",
        f"1. {_NAVIGATE}  → navigate to target URL",
        f"2. {_EVALUATE} → run snippet code (read from {SCRIPTS_DIR}/ file)",
        f"3. {_CONSOLE} → capture console output",
        "4. Interpret results using thresholds below, provide recommendations",
        "```",
        "",
    ]

    for d in descriptors:
        lines += ["---", "", f"## {d.title}", ""]
        if d.description:
            lines += [d.description, ""]
        lines += [f"**Script:** `{script_path(d)}`", ""]
        if d.thresholds:
            lines += ["**Thresholds:**", "", d.thresholds, ""]

    return "\n".join(lines)


# ---------------------------------------------------------------------------
# Manifest zbiorczy
# ---------------------------------------------------------------------------

def render_umbrella_manifest(toolkit: ToolkitConfig, counts: Mapping[str, int]) -> str:
    """`counts`: klucz kategorii → liczba artefaktów (brak klucza = 0)."""
    total = sum(counts.get(c.key, 0) for c in toolkit.categories)

    lines = _frontmatter(toolkit.frontmatter())
    lines += [
        f"# {toolkit.title}",
        "",
        f"A collection of {total} JavaScript snippets for measuring and debugging web performance "
        "in Chrome DevTools. Each snippet runs in the browser console and outputs structured, "
        "color-coded results.",
        "",
        "## Skills by Category",
        "",
    ]
    lines += format_table(
        ["Skill", "Snippets", "Use when"],
        [
            (c.skill, str(counts.get(c.key, 0)), c.description.split(".")[0])
            for c in toolkit.categories
        ],
    )
    lines += ["", "## Quick Reference", ""]
    lines += format_table(
        ["User says", "Skill to use"],
        [(", ".join(row), c.skill) for c in toolkit.categories for row in c.triggers],
    )
    lines += [
        "",
        "## Workflow",
        "",
        "1. Identify the relevant skill based on the user's question (use Quick Reference above)",
        f"2. Load the skill's {MANIFEST_FILENAME} to see available snippets and thresholds",
        "3. Execute with Chrome DevTools MCP:",
        f"   - `{_NAVIGATE}` → navigate to target URL",
        f"   - `{_EVALUATE}` → run the snippet",
        f"   - `{_CONSOLE}` → read results",
        "4. Interpret results using the thresholds defined in the skill",
        "5. Provide actionable recommendations based on findings",
        "",
    ]
    return "\n".join(lines)
