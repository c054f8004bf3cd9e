"""
miner — przebieg 2: odtwarzanie pochodzenia artefaktów i metadanych sekcji.

Publiczne API:
  locate_import(filename, documents)                     -> LocatedImport | None
  find_document_for_artifact(pages_dir, category, file)  -> LocatedImport | None
  category_documents(pages_dir, category)                -> list[(Path, str)]
  classify_scope(text)                                   -> DocumentScope
  import_bindings(text)                                  -> ImportBinding
  mine_metadata(located, basename)                       -> SectionMetadata
  fallback_metadata(basename)                            -> SectionMetadata
"""

from .locator import (
    category_documents,
    classify_scope,
    find_document_for_artifact,
    import_bindings,
    locate_import,
)
from .metadata import fallback_metadata, mine_metadata, title_from_filename
from .text_cleaner import RATING_MARKER, find_thresholds, first_paragraph, strip_inline

__all__ = [
    "category_documents",
    "classify_scope",
    "find_document_for_artifact",
    "import_bindings",
    "locate_import",
    "fallback_metadata",
    "mine_metadata",
    "title_from_filename",
    "RATING_MARKER",
    "find_thresholds",
    "first_paragraph",
    "strip_inline",
]
