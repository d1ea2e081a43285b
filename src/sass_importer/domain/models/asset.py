"""Source-side models: the file being imported and its import directives."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field

from sass_importer.domain.errors import SourceReadError

ImportSet = frozenset[Path]
"""Unique resolved dependency paths of one source file."""


class SourceAsset(BaseModel):
    """A stylesheet source file and its text content (read-only)."""

    model_config = ConfigDict(frozen=True)

    path: Path
    text: str

    @classmethod
    def read(cls, path: Path, encoding: str = "utf-8") -> SourceAsset:
        """Read *path* from disk.

        Raises:
            OSError: The file cannot be opened.
            SourceReadError: The bytes do not decode with *encoding*, or
                *encoding* is not a known codec.
        """
        try:
            text = path.read_text(encoding=encoding)
        except UnicodeDecodeError as exc:
            raise SourceReadError(f"{path} is not valid {encoding}: {exc.reason}") from exc
        except LookupError as exc:
            raise SourceReadError(f"Unknown source encoding: {encoding}") from exc
        return cls(path=path, text=text)

    @property
    def directory(self) -> Path:
        """Directory every relative import is resolved against."""
        return self.path.parent

    @property
    def filename(self) -> str:
        return self.path.name

    def is_partial(self, prefix: str = "_") -> bool:
        """True for include-only files (``_name.scss``)."""
        return self.filename.startswith(prefix)


class ImportDirective(BaseModel):
    """Raw filename token taken from one ``@import`` line."""

    model_config = ConfigDict(frozen=True)

    name: str
    line_number: int = Field(..., ge=1)
