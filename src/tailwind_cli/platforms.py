"""Detection of the platform the packaged binary has to match."""

from __future__ import annotations

import enum
import platform

from .exceptions import UnsupportedPlatformError


class Platform(enum.Enum):
    """Every (OS, architecture) pair a ``tailwindcss`` binary is shipped for."""

    MACOS_ARM64 = "macos-arm64"
    MACOS_X64 = "macos-x64"
    LINUX_ARM64 = "linux-arm64"
    LINUX_ARMV7 = "linux-armv7"
    LINUX_X64 = "linux-x64"
    WINDOWS_ARM64 = "windows-arm64"
    WINDOWS_X64 = "windows-x64"

    @property
    def os_name(self) -> str:
        return self.value.split("-", 1)[0]

    @property
    def arch(self) -> str:
        return self.value.split("-", 1)[1]

    @property
    def executable_suffix(self) -> str:
        """File suffix the OS needs to recognise the file as a program."""
        return ".exe" if self.os_name == "windows" else ""

    def __str__(self) -> str:
        return self.value


_PLATFORMS: dict[tuple[str, str], Platform] = {
    (member.os_name, member.arch): member for member in Platform
}


def _normalize_os(value: str) -> str:
    normalized = value.lower()
    if normalized.startswith("linux"):
        return "linux"
    if normalized.startswith("darwin") or normalized.startswith("mac"):
        return "macos"
    if normalized in {"windows", "win32"} or normalized.startswith(("cygwin", "msys")):
        return "windows"
    raise UnsupportedPlatformError(
        f"Unsupported operating system '{value}'.",
        target_os=value,
    )


def _normalize_arch(value: str) -> str:
    normalized = value.lower()
    if normalized in {"x86_64", "amd64", "x64"}:
        return "x64"
    if normalized in {"aarch64", "arm64"}:
        return "arm64"
    if normalized in {"armv7", "armv7l"}:
        return "armv7"
    raise UnsupportedPlatformError(
        f"Unsupported CPU architecture '{value}'.",
        target_arch=value,
    )


def resolve_platform(
    target_os: str | None = None,
    target_arch: str | None = None,
) -> Platform:
    """Map an OS and CPU architecture to a supported :class:`Platform`.

    ``target_os`` and ``target_arch`` accept either canonical identifiers
    (``macos``/``linux``/``windows`` and ``x64``/``arm64``/``armv7``) or raw
    results from :func:`platform.system` and :func:`platform.machine`, which
    are consulted when the arguments are omitted.

    Raises:
        UnsupportedPlatformError: If no binary is shipped for the pair.
    """

    raw_os = platform.system() if target_os is None else target_os
    raw_arch = platform.machine() if target_arch is None else target_arch
    os_value = _normalize_os(raw_os)
    arch_value = _normalize_arch(raw_arch)

    try:
        return _PLATFORMS[(os_value, arch_value)]
    except KeyError:
        raise UnsupportedPlatformError(
            f"No Tailwind CLI binary is available for {os_value}/{arch_value}.",
            target_os=raw_os,
            target_arch=raw_arch,
        ) from None
