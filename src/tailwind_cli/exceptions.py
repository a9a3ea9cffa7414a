"""Exception hierarchy for running the packaged Tailwind CLI.

All wrapper exceptions inherit from :class:`TailwindCliError` so that callers
can catch a single base class when they do not care about the specific
failure mode.  :class:`ToolFailedError` is the only one that describes the
wrapped tool rather than the wrapper itself: it means ``tailwindcss`` ran and
rejected its input.
"""

from __future__ import annotations

import os
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .runtime import TailwindCliOutput


class TailwindCliError(Exception):
    """Base exception for all Tailwind CLI wrapper operations."""


class UnsupportedPlatformError(TailwindCliError):
    """Raised when no packaged binary exists for the OS/architecture pair.

    This is raised before anything touches the filesystem.
    """

    def __init__(
        self,
        message: str,
        *,
        target_os: str | None = None,
        target_arch: str | None = None,
    ) -> None:
        super().__init__(message)
        self.target_os = target_os
        self.target_arch = target_arch


class BinaryNotFoundError(UnsupportedPlatformError):
    """Raised when the platform is known but its binary is missing from the install."""

    def __init__(
        self,
        message: str,
        *,
        target_os: str | None = None,
        target_arch: str | None = None,
        binary_name: str | None = None,
    ) -> None:
        super().__init__(message, target_os=target_os, target_arch=target_arch)
        self.binary_name = binary_name


class TemporaryFileError(TailwindCliError):
    """Raised when the executable could not be written to a temporary file.

    Covers creating, writing, syncing and marking the file executable.  The
    underlying :class:`OSError` is available as ``__cause__``.
    """

    def __init__(self, message: str, *, path: str | os.PathLike[str] | None = None) -> None:
        super().__init__(message)
        self.path = path


class SpawnError(TailwindCliError):
    """Raised when the operating system could not start the executable."""

    def __init__(self, message: str, *, path: str | os.PathLike[str] | None = None) -> None:
        super().__init__(message)
        self.path = path


class ToolFailedError(TailwindCliError):
    """Raised when ``tailwindcss`` started and exited with a non-zero status.

    Both output streams are kept (trimmed) so callers can tell the user what
    was wrong with their input.
    """

    def __init__(self, *, stdout: str, stderr: str, returncode: int) -> None:
        super().__init__(
            f"Tailwind CLI returned an error (exit status {returncode}):\n\n"
            f"stdout:\n{stdout}\n\n"
            f"stderr:\n{stderr}\n"
        )
        self.stdout = stdout
        self.stderr = stderr
        self.returncode = returncode


class CleanupError(TailwindCliError):
    """Raised when the temporary executable could not be deleted after use.

    ``output`` holds the result the invocation produced, so a leaked file
    never hides whether the tool itself succeeded.
    """

    def __init__(
        self,
        message: str,
        *,
        path: str | os.PathLike[str],
        output: TailwindCliOutput,
    ) -> None:
        super().__init__(message)
        self.path = path
        self.output = output
