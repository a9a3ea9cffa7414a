"""Run the standalone Tailwind CSS CLI without installing it.

The package distributes the prebuilt ``tailwindcss`` executable for each
supported platform and exposes :func:`run`, which writes the right one to a
temporary file, executes it and cleans up afterwards.
"""

from __future__ import annotations

import logging

__version__ = "3.4.1.0"

from .exceptions import (  # noqa: E402
    BinaryNotFoundError,
    CleanupError,
    SpawnError,
    TailwindCliError,
    TemporaryFileError,
    ToolFailedError,
    UnsupportedPlatformError,
)
from .platforms import Platform, resolve_platform  # noqa: E402
from .runtime import TailwindCliOutput, run, tailwind_version  # noqa: E402

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "BinaryNotFoundError",
    "CleanupError",
    "Platform",
    "SpawnError",
    "TailwindCliError",
    "TailwindCliOutput",
    "TemporaryFileError",
    "ToolFailedError",
    "UnsupportedPlatformError",
    "resolve_platform",
    "run",
    "tailwind_version",
]
