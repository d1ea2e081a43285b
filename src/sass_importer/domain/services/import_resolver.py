"""Import graph resolution for Sass sources.

Only the simple form ``@import 'name';`` is understood: a line qualifies when
it *starts* with ``@import`` and the first single-quoted token on it is the
import name.  Any further targets on the same line are ignored.

Resolution order for a name, relative to the importing file's directory:

1. the name exactly as written;
2. ``name.scss`` then ``name.sass`` when the name has no extension,
   otherwise the name itself;
3. for every candidate of step 2, the partial ``_name`` before ``name``.

The first existing file wins.  One unresolved name fails the whole file.
"""

from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Optional, Sequence

from sass_importer.domain.errors import UnresolvedImportError
from sass_importer.domain.models.asset import ImportDirective, ImportSet, SourceAsset

logger = logging.getLogger(__name__)

IMPORT_KEYWORD = "@import"
DEFAULT_EXTENSIONS: tuple[str, ...] = (".scss", ".sass")

_QUOTED_NAME = re.compile(r"'([^']*)'", re.DOTALL)
# Only CR, LF and CRLF end a line; form feeds and Unicode separators do not
_LINE_BREAK = re.compile(r"\r\n|\r|\n")


class ImportGraphResolver:
    """Find the files a stylesheet source imports.

    Parameters
    ----------
    extensions:
        Stylesheet extensions tried, in order, for names given without one.
    partial_prefix:
        Filename prefix marking include-only files.
    """

    def __init__(
        self,
        extensions: Sequence[str] = DEFAULT_EXTENSIONS,
        partial_prefix: str = "_",
    ) -> None:
        self._extensions = tuple(extensions)
        self._partial_prefix = partial_prefix

    # -- Parsing -------------------------------------------------------------

    def parse_directives(self, text: str) -> list[ImportDirective]:
        """Return one directive per qualifying ``@import`` line."""
        directives: list[ImportDirective] = []
        for line_number, line in enumerate(_LINE_BREAK.split(text), start=1):
            if not line.startswith(IMPORT_KEYWORD):
                continue
            match = _QUOTED_NAME.search(line)
            # No quoted token: the empty name never resolves
            name = match.group(1) if match else ""
            directives.append(ImportDirective(name=name, line_number=line_number))
        return directives

    # -- Resolution ----------------------------------------------------------

    def candidates(self, directory: Path, name: str) -> list[Path]:
        """All paths tried for *name*, in search order."""
        paths = [directory / name]

        if Path(name).suffix:
            names = [name]
        else:
            names = [f"{name}{ext}" for ext in self._extensions]

        for candidate in names:
            relative = Path(candidate)
            partial = relative.with_name(f"{self._partial_prefix}{relative.name}")
            paths.append(directory / partial)
            paths.append(directory / relative)
        return paths

    def resolve_import_path(self, directory: Path, name: str) -> Optional[Path]:
        """Return the first existing candidate for *name*, or ``None``."""
        for path in self.candidates(directory, name):
            if path.is_file():
                return path
        return None

    def resolve(self, asset: SourceAsset) -> ImportSet:
        """Resolve every directive of *asset* into a set of existing files.

        Raises:
            UnresolvedImportError: On the first directive with no match.
                No partial result is returned.
        """
        resolved: set[Path] = set()
        for directive in self.parse_directives(asset.text):
            path = self.resolve_import_path(asset.directory, directive.name)
            if path is None:
                logger.debug(
                    "%s:%d: no file for import '%s'",
                    asset.path,
                    directive.line_number,
                    directive.name,
                )
                raise UnresolvedImportError(directive.name)
            resolved.add(path)
        return frozenset(resolved)
