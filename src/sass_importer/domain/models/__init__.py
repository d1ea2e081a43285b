"""Domain models — public API.

Provides convenient imports for the most commonly used domain entities.
"""

from sass_importer.domain.models.asset import ImportDirective, ImportSet, SourceAsset
from sass_importer.domain.models.enums import (
    ArtifactKind,
    CompilerErrorPolicy,
    FallbackReason,
    PipelineState,
)
from sass_importer.domain.models.pipeline import AdapterResult, CompilerRun, ImportOutcome
from sass_importer.domain.models.stylesheet import (
    ImportedAsset,
    RawText,
    StructuredStylesheet,
    StyleRule,
)

__all__ = [
    # Source
    "ImportDirective",
    "ImportSet",
    "SourceAsset",
    # Enums
    "ArtifactKind",
    "CompilerErrorPolicy",
    "FallbackReason",
    "PipelineState",
    # Pipeline
    "AdapterResult",
    "CompilerRun",
    "ImportOutcome",
    # Artifacts
    "ImportedAsset",
    "RawText",
    "StructuredStylesheet",
    "StyleRule",
]
