"""Sass CLI compiler — implements CompilerPort using subprocess."""

from __future__ import annotations

import logging
import subprocess
from pathlib import Path
from typing import Optional

from sass_importer.domain.errors import CompilerInvocationError
from sass_importer.domain.models.pipeline import CompilerRun
from sass_importer.domain.ports.compiler import CompilerPort

logger = logging.getLogger(__name__)

# Fixed flags: expanded output, no source maps, no include paths.
_STYLE_FLAGS = ("--style", "expanded", "--no-source-map")


def build_command(executable: str, source: Path, output: Path) -> list[str]:
    """Return the argv for compiling *source* into *output*."""
    return [executable, *_STYLE_FLAGS, str(source), str(output)]


class SassCliCompiler(CompilerPort):
    """Compiler adapter that shells out to the ``sass`` executable.

    Parameters
    ----------
    executable : str
        Name or path of the Sass CLI.
    timeout_s : float | None
        Bounded wait for the subprocess.  ``None`` blocks until it exits.
    encoding : str
        Encoding of the compiled output file.
    """

    def __init__(
        self,
        executable: str = "sass",
        timeout_s: Optional[float] = None,
        encoding: str = "utf-8",
    ) -> None:
        self._executable = executable
        self._timeout_s = timeout_s
        self._encoding = encoding

    @property
    def executable(self) -> str:
        return self._executable

    def compile(self, source: Path, output: Path) -> CompilerRun:
        """Run the compiler to completion and report what happened."""
        argv = build_command(self._executable, source, output)
        logger.debug("Running %s", " ".join(argv))

        try:
            # Both pipes are drained by run(); a full stdout buffer would stall the child.
            completed = subprocess.run(
                argv,
                capture_output=True,
                text=True,
                check=False,
                timeout=self._timeout_s,
            )
        except FileNotFoundError as exc:
            raise CompilerInvocationError(
                f"Sass compiler not found: {self._executable}"
            ) from exc
        except subprocess.TimeoutExpired as exc:
            raise CompilerInvocationError(
                f"Sass compiler timed out after {self._timeout_s}s on {source}"
            ) from exc

        output_text = ""
        if output.exists():
            output_text = output.read_text(encoding=self._encoding)

        return CompilerRun(
            argv=argv,
            exit_status=completed.returncode,
            stdout=completed.stdout or "",
            stderr=completed.stderr or "",
            output_text=output_text,
        )
