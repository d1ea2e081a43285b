"""Pydantic models for the importer configuration.

These models validate and type the JSON configuration file that drives the
compiler invocation, import resolution and the stylesheet conversion step.
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field, field_validator

from sass_importer.domain.models.enums import CompilerErrorPolicy


class ImporterConfig(BaseModel):
    """Complete importer configuration."""

    compiler_executable: str = Field(
        default="sass",
        min_length=1,
        description="Sass CLI executable (name on PATH or absolute path).",
    )
    compiler_timeout_s: Optional[float] = Field(
        default=None,
        gt=0,
        description="Bounded wait for the compiler; None waits indefinitely.",
    )
    on_compiler_error: CompilerErrorPolicy = Field(
        default=CompilerErrorPolicy.CONTINUE,
        description="Handling of a non-zero compiler exit status.",
    )
    stylesheet_extensions: list[str] = Field(
        default_factory=lambda: [".scss", ".sass"],
        min_length=1,
        description="Extensions tried, in order, for extensionless imports.",
    )
    partial_prefix: str = Field(default="_", min_length=1)
    encoding: str = "utf-8"
    populator_module: str = Field(
        default="cssutils",
        description="Module looked up at runtime to parse compiled CSS.",
    )

    @field_validator("stylesheet_extensions")
    @classmethod
    def _extensions_start_with_dot(cls, value: list[str]) -> list[str]:
        for ext in value:
            if not ext.startswith(".") or len(ext) < 2:
                raise ValueError(f"Invalid stylesheet extension: {ext!r}")
        return value

    def is_stylesheet(self, filename: str) -> bool:
        """True if *filename* has one of the supported extensions."""
        lowered = filename.lower()
        return any(lowered.endswith(ext) for ext in self.stylesheet_extensions)
