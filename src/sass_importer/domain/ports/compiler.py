"""Port: Stylesheet compiler — turns a Sass source into CSS on disk."""

from abc import ABC, abstractmethod
from pathlib import Path

from sass_importer.domain.models.pipeline import CompilerRun


class CompilerPort(ABC):
    """Contract for a blocking external stylesheet compiler."""

    @abstractmethod
    def compile(self, source: Path, output: Path) -> CompilerRun:
        """Compile *source* into *output* and report the invocation.

        The exit status is reported, not interpreted.  Callers decide
        whether a non-zero status is fatal.

        Raises:
            CompilerInvocationError: The compiler could not be started or
                did not finish in time.
        """
        ...
