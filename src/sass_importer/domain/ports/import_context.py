"""Port: Import context — the host's registration callbacks for one import."""

from abc import ABC, abstractmethod
from pathlib import Path

from sass_importer.domain.models.stylesheet import ImportedAsset


class ImportContextPort(ABC):
    """Contract for the host side of a single file import.

    One context is created per source file.  It is never shared between
    concurrent imports.
    """

    @property
    @abstractmethod
    def asset_path(self) -> Path:
        """The source file being imported."""
        ...

    @abstractmethod
    def depends_on_source(self, path: Path) -> None:
        """Declare *path* as a content dependency of the current import."""
        ...

    @abstractmethod
    def add_object(self, identifier: str, obj: ImportedAsset) -> None:
        """Attach a named sub-object to the import result."""
        ...

    @abstractmethod
    def set_main_object(self, obj: ImportedAsset) -> None:
        """Designate a previously added object as the primary result.

        Raises:
            ValueError: If *obj* was never added.
        """
        ...
