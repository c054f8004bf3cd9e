"""
manifest/categories.py — konfiguracja kategorii i manifestu zbiorczego.

Kategoria = podkatalog stron/snippetów (np. "Loading") → manifest
(np. "webperf-loading"). Domyślna konfiguracja jest wbudowana; można ją
zastąpić plikiem JSON (walidowanym JSON Schema):

  {
    "toolkit":    {"skill": "webperf", "title": "...", "description": "..."},
    "categories": [
      {"key": "Loading", "skill": "webperf-loading", "name": "Loading Performance",
       "description": "...", "triggers": [["TTFB", "slow server"]]}
    ]
  }
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import jsonschema

from data_model.errors import ConfigError

_MCP_SUFFIX = " Compatible with Chrome DevTools MCP."


# ---------------------------------------------------------------------------
# Typy
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class CategoryConfig:
    """
    - key:         katalog kategorii (pages/<key>, snippets/<key>)
    - skill:       identyfikator manifestu (frontmatter name, katalog wyjściowy)
    - name:        nazwa do nagłówka "# WebPerf: <name>"
    - description: frontmatter description (limit długości!)
    - triggers:    wiersze szybkiej ściągi: frazy użytkownika → ten manifest
    """

    key: str
    skill: str
    name: str
    description: str
    triggers: tuple[tuple[str, ...], ...] = ()

    def frontmatter(self) -> dict[str, str]:
        return {"name": self.skill, "description": self.description}


@dataclass(frozen=True, slots=True)
class ToolkitConfig:
    skill: str
    title: str
    description: str
    categories: tuple[CategoryConfig, ...] = field(default_factory=tuple)
    heading_prefix: str = "WebPerf"

    def frontmatter(self) -> dict[str, str]:
        return {"name": self.skill, "description": self.description}

    def frontmatter_entries(self) -> list[tuple[str, dict[str, str]]]:
        """Wszystkie frontmattery batcha: kategorie + manifest zbiorczy."""
        entries = [(c.skill, c.frontmatter()) for c in self.categories]
        entries.append((self.skill, self.frontmatter()))
        return entries


# ---------------------------------------------------------------------------
# Konfiguracja domyślna
# ---------------------------------------------------------------------------

DEFAULT_CATEGORIES: tuple[CategoryConfig, ...] = (
    CategoryConfig(
        key="CoreWebVitals",
        skill="webperf-core-web-vitals",
        name="Core Web Vitals",
        description=(
            "Measure and debug Core Web Vitals (LCP, CLS, INP). Use when the user asks about LCP, "
            "CLS, INP, page loading performance, or wants to analyze Core Web Vitals on a URL or "
            "current page." + _MCP_SUFFIX
        ),
        triggers=(
            ('"debug LCP"', '"slow LCP"', '"largest contentful paint"'),
            ('"check CLS"', '"layout shifts"', '"visual stability"'),
            ('"INP"', '"interaction latency"', '"responsiveness"'),
        ),
    ),
    CategoryConfig(
        key="Loading",
        skill="webperf-loading",
        name="Loading Performance",
        description=(
            "Analyze loading performance (TTFB, FCP, render-blocking resources, scripts, fonts, "
            "resource hints, service workers). Use when the user asks about loading time, TTFB, "
            "FCP, render-blocking, font loading, script analysis, or prefetching." + _MCP_SUFFIX
        ),
        triggers=(
            ('"TTFB"', '"slow server"', '"time to first byte"'),
            ('"FCP"', '"first contentful paint"', '"render blocking"'),
            ('"font loading"', '"script loading"', '"resource hints"', '"service worker"'),
        ),
    ),
    CategoryConfig(
        key="Interaction",
        skill="webperf-interaction",
        name="Interaction & Animation",
        description=(
            "Measure interaction and animation performance (Long Animation Frames, Long Tasks, "
            "scroll jank, layout shifts). Use when the user asks about interaction latency, jank, "
            "animation frames, long tasks, or scroll performance." + _MCP_SUFFIX
        ),
        triggers=(
            ('"jank"', '"scroll performance"', '"long tasks"', '"animation frames"', '"INP debug"'),
        ),
    ),
    CategoryConfig(
        key="Media",
        skill="webperf-media",
        name="Media Performance",
        description=(
            "Audit images, videos, and SVGs for performance issues. Use when the user asks about "
            "image optimization, video performance, lazy loading, image formats, or SVG analysis."
            + _MCP_SUFFIX
        ),
        triggers=(
            ('"image audit"', '"lazy loading"', '"image optimization"', '"video audit"'),
        ),
    ),
    CategoryConfig(
        key="Resources",
        skill="webperf-resources",
        name="Resources & Network",
        description=(
            "Analyze network and resource performance (bandwidth, connection quality, effective "
            "connection type). Use when the user asks about network performance, bandwidth, "
            "connection quality, or adaptive loading." + _MCP_SUFFIX
        ),
        triggers=(
            ('"network quality"', '"bandwidth"', '"connection type"', '"save-data"'),
        ),
    ),
)

DEFAULT_TOOLKIT = ToolkitConfig(
    skill="webperf",
    title="WebPerf Snippets Toolkit",
    description=(
        "Web performance measurement and debugging toolkit. Use when the user asks about web "
        'performance, wants to audit a page, or says "analyze performance", "debug lcp", '
        '"check ttfb", "measure core web vitals", "audit images", or similar.'
    ),
    categories=DEFAULT_CATEGORIES,
)


# ---------------------------------------------------------------------------
# Wczytywanie z JSON
# ---------------------------------------------------------------------------

_CONFIG_SCHEMA: dict[str, Any] = {
    "$schema": "https://json-schema.org/draft/2020-12/schema",
    "type": "object",
    "required": ["categories"],
    "properties": {
        "toolkit": {
            "type": "object",
            "properties": {
                "skill":          {"type": "string"},
                "title":          {"type": "string"},
                "description":    {"type": "string"},
                "heading_prefix": {"type": "string"},
            },
            "additionalProperties": False,
        },
        "categories": {
            "type": "array",
            "items": {
                "type": "object",
                "required": ["key", "skill", "name", "description"],
                "properties": {
                    "key":         {"type": "string", "minLength": 1},
                    "skill":       {"type": "string", "minLength": 1},
                    "name":        {"type": "string"},
                    "description": {"type": "string"},
                    "triggers": {
                        "type": "array",
                        "items": {"type": "array", "items": {"type": "string"}},
                    },
                },
                "additionalProperties": False,
            },
        },
    },
}


def toolkit_from_dict(raw: dict[str, Any]) -> ToolkitConfig:
    errors = sorted(
        jsonschema.Draft202012Validator(_CONFIG_SCHEMA).iter_errors(raw),
        key=lambda e: list(map(str, e.absolute_path)),
    )
    if errors:
        details = "; ".join(
            f"/{'/'.join(map(str, e.absolute_path))}: {e.message}" for e in errors
        )
        raise ConfigError(f"Niepoprawna konfiguracja kategorii: {details}")

    categories = tuple(
        CategoryConfig(
            key=c["key"],
            skill=c["skill"],
            name=c["name"],
            description=c["description"],
            triggers=tuple(tuple(row) for row in c.get("triggers", [])),
        )
        for c in raw["categories"]
    )
    tk = raw.get("toolkit", {})
    return ToolkitConfig(
        skill=tk.get("skill", DEFAULT_TOOLKIT.skill),
        title=tk.get("title", DEFAULT_TOOLKIT.title),
        description=tk.get("description", DEFAULT_TOOLKIT.description),
        categories=categories,
        heading_prefix=tk.get("heading_prefix", DEFAULT_TOOLKIT.heading_prefix),
    )


def load_toolkit(path: str | Path | None) -> ToolkitConfig:
    """Konfiguracja z pliku JSON lub domyślna, gdy path=None."""
    if path is None:
        return DEFAULT_TOOLKIT
    p = Path(path)
    try:
        raw = json.loads(p.read_text(encoding="utf-8"))
    except OSError as e:
        raise ConfigError(f"Nie można odczytać pliku kategorii {p}: {e}") from e
    except json.JSONDecodeError as e:
        raise ConfigError(f"Błędny JSON w {p}: {e}") from e
    if not isinstance(raw, dict):
        raise ConfigError(f"Plik kategorii {p} musi zawierać obiekt JSON.")
    return toolkit_from_dict(raw)
