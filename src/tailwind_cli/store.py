"""Access to the ``tailwindcss`` executables shipped inside the package."""

from __future__ import annotations

from importlib import resources

from .exceptions import BinaryNotFoundError
from .platforms import Platform

PACKAGE_BIN_DIR = "bin"
BINARY_NAME = "tailwindcss"


def binary_file_name(platform: Platform) -> str:
    """Return the file name of the packaged binary for ``platform``."""
    return f"{BINARY_NAME}-{platform.value}{platform.executable_suffix}"


def _resource(platform: Platform):
    return resources.files(__package__).joinpath(PACKAGE_BIN_DIR, binary_file_name(platform))


def read_embedded_binary(platform: Platform) -> bytes:
    """Return the raw bytes of the packaged executable for ``platform``.

    The bytes are read from package data, so no network access is needed.

    Raises:
        BinaryNotFoundError: If the install does not contain the binary.
    """

    candidate = _resource(platform)
    if not candidate.is_file():
        raise BinaryNotFoundError(
            "Packaged binary not found for the detected platform.",
            target_os=platform.os_name,
            target_arch=platform.arch,
            binary_name=binary_file_name(platform),
        )
    return candidate.read_bytes()


def missing_binaries() -> list[Platform]:
    """Return the platforms whose packaged binary is absent or empty.

    A distributable build has to return an empty list here.
    """

    missing = []
    for platform in Platform:
        candidate = _resource(platform)
        if not candidate.is_file():
            missing.append(platform)
            continue
        with candidate.open("rb") as handle:
            if not handle.read(1):
                missing.append(platform)
    return missing
