"""In-memory import context — implements ImportContextPort.

Records what a host would be told during one import.  Used by the CLI and
by tests; a real asset database would implement the same port.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Optional

from sass_importer.domain.models.stylesheet import ImportedAsset
from sass_importer.domain.ports.import_context import ImportContextPort


class InMemoryImportContext(ImportContextPort):
    """Collect dependencies and result objects for a single source file."""

    def __init__(self, asset_path: Path) -> None:
        self._asset_path = asset_path
        self._dependencies: list[Path] = []
        self._objects: dict[str, ImportedAsset] = {}
        self._main_object: Optional[ImportedAsset] = None

    @property
    def asset_path(self) -> Path:
        return self._asset_path

    @property
    def dependencies(self) -> list[Path]:
        return list(self._dependencies)

    @property
    def objects(self) -> dict[str, ImportedAsset]:
        return dict(self._objects)

    @property
    def main_object(self) -> Optional[ImportedAsset]:
        return self._main_object

    def depends_on_source(self, path: Path) -> None:
        if path not in self._dependencies:
            self._dependencies.append(path)

    def add_object(self, identifier: str, obj: ImportedAsset) -> None:
        self._objects[identifier] = obj

    def set_main_object(self, obj: ImportedAsset) -> None:
        if not any(existing is obj for existing in self._objects.values()):
            raise ValueError("Main object must be added to the import first")
        self._main_object = obj

    def to_manifest(self) -> dict[str, Any]:
        """JSON-serializable summary of the import."""
        main_id = next(
            (name for name, obj in self._objects.items() if obj is self._main_object),
            None,
        )
        return {
            "asset": str(self._asset_path),
            "dependencies": [str(p) for p in self._dependencies],
            "main": main_id,
            "objects": {
                name: obj.model_dump(mode="json") for name, obj in self._objects.items()
            },
        }
