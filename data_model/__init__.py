"""
data_model — struktury danych potoku snippetów.

Użycie:
  from data_model import Document, ExtractionBlock, Artifact, ...

Moduły:
  documents — Document, ExtractionBlock, Artifact, ImportBinding,
              DocumentScope, LocatedImport, SectionMetadata,
              ArtifactDescriptor
  errors    — PipelineError, PipelineIOError, ManifestValidationError,
              ConfigError
"""

from .documents import (
    ROOT_CATEGORY,
    Document,
    ExtractionBlock,
    Artifact,
    ImportBinding,
    DocumentScope,
    LocatedImport,
    SectionMetadata,
    ArtifactDescriptor,
)
from .errors import (
    PipelineError,
    PipelineIOError,
    ManifestValidationError,
    ConfigError,
)

__all__ = [
    # documents
    "ROOT_CATEGORY",
    "Document",
    "ExtractionBlock",
    "Artifact",
    "ImportBinding",
    "DocumentScope",
    "LocatedImport",
    "SectionMetadata",
    "ArtifactDescriptor",
    # errors
    "PipelineError",
    "PipelineIOError",
    "ManifestValidationError",
    "ConfigError",
]
