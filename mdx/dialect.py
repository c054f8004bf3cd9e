"""
mdx/dialect.py — stałe i wzorce regex dialektu dokumentów MDX.

Rozpoznajemy wąski, stały dialekt (to nie jest parser markdown):
  - nagłówek ekstrakcji  : linia dokładnie "### Snippet"
  - płotek bloku         : "```js copy" + \n ... \n```
  - sekcje               : linie "## Tytuł"
  - tytuł dokumentu      : pierwsza linia "# Tytuł"
  - import snippetu      : import <id> from '<prefiks>snippets/<kat/><plik>?raw'
  - odwołanie komponentu : <Snippet code={<id>} />
"""

from __future__ import annotations

import re

# -------------------------------------------------------------------------
# Nagłówki
# -------------------------------------------------------------------------

EXTRACTION_HEADING = "### Snippet"

# -------------------------------------------------------------------------
# Płotki bloku kodu
# -------------------------------------------------------------------------

FENCE_OPEN = "```js copy\n"
FENCE_CLOSE = "\n```"

ARTIFACT_EXT = ".js"

# -------------------------------------------------------------------------
# Importy i komponent
# -------------------------------------------------------------------------

SNIPPETS_SEGMENT = "snippets"
COMPONENT_NAME = "Snippet"
COMPONENT_PATH = "components/Snippet"
RAW_QUERY = "?raw"

# Linia importu artefaktu; grupa 1 = identyfikator, grupa 2 = nazwa pliku.
ARTIFACT_IMPORT_RE = re.compile(
    r"^import (snippet\w*) from '[^']*/([^/']+)" + re.escape(RAW_QUERY) + "'", re.MULTILINE
)

_COMPONENT_IMPORT_RE = re.compile(
    r"^import \{ " + COMPONENT_NAME + r" \} from '[^']*" + re.escape(COMPONENT_PATH) + r"'$",
    re.MULTILINE,
)


def import_pattern(filename: str) -> re.Pattern[str]:
    """Wzorzec linii importu dla danego pliku; grupa 1 = identyfikator."""
    return re.compile(
        r"import (\w+) from '[^']*/" + re.escape(filename) + re.escape(RAW_QUERY) + "'"
    )


def component_reference(identifier: str) -> str:
    return f"<{COMPONENT_NAME} code={{{identifier}}} />"


def artifact_import(identifier: str, prefix: str, category_prefix: str, filename: str) -> str:
    return (
        f"import {identifier} from "
        f"'{prefix}{SNIPPETS_SEGMENT}/{category_prefix}{filename}{RAW_QUERY}'"
    )


def component_import(prefix: str) -> str:
    return f"import {{ {COMPONENT_NAME} }} from '{prefix}{COMPONENT_PATH}'"


def has_component_import(text: str) -> bool:
    return _COMPONENT_IMPORT_RE.search(text) is not None
