"""
mdx — przebieg 1: ekstrakcja snippetów z dokumentów MDX (czyste funkcje).

Publiczne API:
  extract_blocks(text)                                -> list[ExtractionBlock]
  derive_slug(heading, basename)                      -> str
  plan_artifacts(document, blocks)                    -> list[Artifact]
  rewrite_document(text, category, artifacts, blocks) -> str
  is_rewritten(text)                                  -> bool
  LineIndex                                           indeks linii/nagłówków
"""

from .line_index import Heading, LineIndex
from .extractor import extract_blocks
from .slug import STOP_WORDS, derive_slug
from .rewriter import (
    artifact_filename,
    identifier_for,
    import_prefix,
    is_rewritten,
    plan_artifacts,
    replace_spans,
    rewrite_document,
)

__all__ = [
    "Heading",
    "LineIndex",
    "extract_blocks",
    "STOP_WORDS",
    "derive_slug",
    "artifact_filename",
    "identifier_for",
    "import_prefix",
    "is_rewritten",
    "plan_artifacts",
    "replace_spans",
    "rewrite_document",
]
