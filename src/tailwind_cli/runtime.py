"""Runtime helpers for executing the packaged ``tailwindcss`` binary."""

from __future__ import annotations

import logging
import os
import subprocess
from dataclasses import dataclass
from typing import Iterable

from . import __version__
from .exceptions import CleanupError, SpawnError, ToolFailedError
from .materialize import SPAWN_LOCK, materialize
from .platforms import resolve_platform
from .store import read_embedded_binary

logger = logging.getLogger(__name__)

Argument = str | os.PathLike[str]


@dataclass(frozen=True)
class TailwindCliOutput:
    """Decoded, whitespace-trimmed output of one ``tailwindcss`` run."""

    stdout: str
    stderr: str
    returncode: int = 0

    @property
    def success(self) -> bool:
        return self.returncode == 0


def tailwind_version(version: str = __version__) -> str:
    """Return the Tailwind release bundled with this package.

    The package version is the Tailwind version plus one extra component
    for wrapper-only releases, e.g. ``3.4.1.0`` ships Tailwind ``3.4.1``.
    """
    return ".".join(version.split(".")[:3])


def _check_arguments(arguments: Iterable[Argument]) -> None:
    if isinstance(arguments, (str, bytes)):
        raise TypeError(
            "arguments must be a sequence of strings, not a single "
            f"{type(arguments).__name__}; wrap it in a list"
        )


def invoke(
    path: Argument,
    arguments: Iterable[Argument] = (),
) -> subprocess.CompletedProcess[bytes]:
    """Run the executable at ``path`` and wait for it to exit.

    ``arguments`` are passed through verbatim.  Standard input is not
    inherited; standard output and standard error are captured separately
    and in full.  There is no timeout.

    Only process creation happens under :data:`SPAWN_LOCK`; waiting for the
    child runs concurrently with other invocations.

    Raises:
        SpawnError: If the process could not be started.
    """

    _check_arguments(arguments)
    exec_args: list[str] = [os.fspath(path), *(os.fspath(arg) for arg in arguments)]
    logger.debug("Executing %s", exec_args)
    try:
        with SPAWN_LOCK:
            child = subprocess.Popen(
                exec_args,
                stdin=subprocess.DEVNULL,
                stdout=subprocess.PIPE,
                stderr=subprocess.PIPE,
            )
    except OSError as exc:
        raise SpawnError(f"Couldn't invoke Tailwind CLI: {exc}", path=path) from exc

    with child:
        try:
            stdout, stderr = child.communicate()
        except BaseException:
            child.kill()
            raise
    logger.debug("Tailwind CLI exited with status %d", child.returncode)
    return subprocess.CompletedProcess(exec_args, child.returncode, stdout, stderr)


def classify(process: subprocess.CompletedProcess[bytes]) -> TailwindCliOutput:
    """Decode and trim the captured streams of a finished process.

    Undecodable bytes are replaced rather than treated as an error.
    """

    stdout = (process.stdout or b"").decode("utf-8", errors="replace").strip()
    stderr = (process.stderr or b"").decode("utf-8", errors="replace").strip()
    return TailwindCliOutput(stdout=stdout, stderr=stderr, returncode=process.returncode)


def run(
    arguments: Iterable[Argument] = (),
    *,
    target_os: str | None = None,
    target_arch: str | None = None,
    directory: str | os.PathLike[str] | None = None,
) -> TailwindCliOutput:
    """Run the packaged Tailwind CLI with the given arguments.

    The binary for the current platform (or ``target_os``/``target_arch``)
    is written to a temporary executable in ``directory`` (the system
    temporary directory by default), run, and deleted again before this
    function returns or raises.

    Example::

        run(["--input", "src/main.css", "--output", "build/built.css"])

    Raises:
        UnsupportedPlatformError: If no binary is shipped for the platform.
        TemporaryFileError: If the temporary executable could not be written.
        SpawnError: If the executable could not be started.
        ToolFailedError: If ``tailwindcss`` exited with a non-zero status.
        CleanupError: If the temporary executable could not be deleted.
        TypeError: If ``arguments`` is a single string instead of a sequence.
    """

    _check_arguments(arguments)
    arguments = list(arguments)
    logger.debug("Running Tailwind CLI with args: %s", arguments)

    platform = resolve_platform(target_os, target_arch)
    logger.debug("Resolved platform: %s", platform)
    data = read_embedded_binary(platform)
    logger.debug("Got CLI executable bytes: %d bytes", len(data))

    with materialize(data, platform, __version__, directory=directory) as executable:
        output = classify(invoke(executable.path, arguments))
        try:
            executable.remove()
        except OSError as exc:
            raise CleanupError(
                f"Couldn't delete Tailwind CLI executable temporary file {executable.path}: {exc}",
                path=executable.path,
                output=output,
            ) from exc

    if not output.success:
        logger.debug("Tailwind CLI returned an error")
        raise ToolFailedError(
            stdout=output.stdout,
            stderr=output.stderr,
            returncode=output.returncode,
        )
    return output
