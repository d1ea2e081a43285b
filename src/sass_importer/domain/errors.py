"""Domain errors — custom exceptions for the Sass importer.

These exceptions are raised by domain services and infrastructure adapters
and caught by the application or presentation layers. They carry no
infrastructure dependencies.
"""


class SassImporterError(Exception):
    """Base exception for all Sass importer errors."""


class UnresolvedImportError(SassImporterError):
    """Raised when an ``@import`` directive matches no file on disk."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Could not resolve import '{name}'")
        self.name = name


class CompilerInvocationError(SassImporterError):
    """Raised when the external compiler is missing, times out, or fails under a strict policy."""


class AdapterConversionError(SassImporterError):
    """Raised when compiled CSS cannot be converted into a structured stylesheet."""


class ConfigurationError(SassImporterError):
    """Raised when configuration is invalid or missing."""


class SourceReadError(SassImporterError):
    """Raised when a source file cannot be decoded with the configured encoding."""
