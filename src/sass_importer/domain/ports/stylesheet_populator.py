"""Port: Stylesheet populator — the optional CSS-to-structure capability."""

from abc import ABC, abstractmethod

from sass_importer.domain.models.stylesheet import StructuredStylesheet


class StylesheetPopulatorPort(ABC):
    """Contract for filling a :class:`StructuredStylesheet` from CSS text.

    Implementations may depend on a capability that is only looked up at
    runtime.  ``is_available`` must be checked before ``populate``.
    """

    @abstractmethod
    def is_available(self) -> bool:
        """True if the underlying capability can be used."""
        ...

    @abstractmethod
    def populate(self, sheet: StructuredStylesheet, css_text: str) -> None:
        """Parse *css_text* and append its rules to *sheet*.

        Raises:
            Exception: Any parser error.  The caller handles it.
        """
        ...
