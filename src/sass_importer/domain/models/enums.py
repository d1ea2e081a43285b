"""Enumerations shared across the importer."""

from __future__ import annotations

from enum import Enum


class PipelineState(str, Enum):
    """States of the per-file import pipeline."""

    START = "start"
    RESOLVING_IMPORTS = "resolving_imports"
    CHECKING_PARTIAL = "checking_partial"
    COMPILING = "compiling"
    ADAPTING = "adapting"
    FALLBACK = "fallback"
    DONE = "done"


class ArtifactKind(str, Enum):
    """Kind of the main object produced for one source file."""

    STYLESHEET = "stylesheet"
    TEXT = "text"


class CompilerErrorPolicy(str, Enum):
    """What to do when the compiler exits with a non-zero status."""

    CONTINUE = "continue"  # keep whatever output exists
    FAIL = "fail"


class FallbackReason(str, Enum):
    """Why a file was imported as raw text."""

    UNRESOLVED_IMPORT = "unresolved_import"
    PARTIAL = "partial"
