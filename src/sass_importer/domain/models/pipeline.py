"""Pipeline result models.

The compiler invocation and the conversion step report their results as
data (:class:`CompilerRun`, :class:`AdapterResult`).  The orchestrator reads
these results and picks a branch.  Nothing is signalled by a swallowed
exception.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from pydantic import BaseModel, Field

from sass_importer.domain.models.asset import ImportSet
from sass_importer.domain.models.enums import ArtifactKind, FallbackReason, PipelineState
from sass_importer.domain.models.stylesheet import ImportedAsset


class CompilerRun(BaseModel):
    """One external compiler invocation."""

    argv: list[str]
    exit_status: int
    stdout: str = ""
    stderr: str = ""
    output_text: str = ""

    @property
    def succeeded(self) -> bool:
        return self.exit_status == 0


class AdapterResult(BaseModel):
    """Outcome of populating a structured stylesheet."""

    ok: bool = True
    skipped: bool = Field(False, description="No-op: capability missing or empty input")
    error: Optional[str] = None
    error_type: Optional[str] = Field(None, description="Exception class behind *error*")
    rule_count: int = 0

    @classmethod
    def skip(cls) -> AdapterResult:
        return cls(ok=True, skipped=True)

    @classmethod
    def failure(cls, error: str, error_type: Optional[str] = None) -> AdapterResult:
        return cls(ok=False, error=error, error_type=error_type)


class ImportOutcome(BaseModel):
    """Everything one pass through the pipeline produced."""

    source: Path
    artifact: ImportedAsset
    states: list[PipelineState] = Field(default_factory=list)
    dependencies: list[Path] = Field(default_factory=list)
    compiler_run: Optional[CompilerRun] = None
    adapter_result: Optional[AdapterResult] = None
    fallback_reason: Optional[FallbackReason] = None
    unresolved_import: Optional[str] = None

    @property
    def kind(self) -> ArtifactKind:
        return ArtifactKind(self.artifact.kind)

    @property
    def import_set(self) -> ImportSet:
        return frozenset(self.dependencies)
