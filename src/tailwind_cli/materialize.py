"""Writing a packaged binary out as a temporary executable file.

Every invocation gets its own file.  The name carries the platform, the
package version and a random UUID, so concurrent builds never collide and a
leftover file can be traced back to the release that created it::

    tailwindcss-linux-x64-v3.4.1.0-6f1c0e0d9d5b4c51a1f0b2a7c3e4d5f6
"""

from __future__ import annotations

import logging
import os
import tempfile
import threading
import uuid
from pathlib import Path
from types import TracebackType

from .exceptions import TemporaryFileError
from .platforms import Platform
from .store import BINARY_NAME

logger = logging.getLogger(__name__)

# Owner rwx, group/others r-x.
EXECUTABLE_MODE = 0o755
_CREATE_FLAGS = os.O_WRONLY | os.O_CREAT | os.O_EXCL | getattr(os, "O_BINARY", 0)

# Held while a temporary executable is open for writing and while a child
# process is being created, so no child inherits a write handle to a file
# another thread is about to exec (which fails with ETXTBSY).
SPAWN_LOCK = threading.Lock()


def temporary_file_name(platform: Platform, version: str, token: str) -> str:
    return f"{BINARY_NAME}-{platform.value}-v{version}-{token}{platform.executable_suffix}"


class MaterializedExecutable:
    """Exclusive ownership of one temporary executable on disk.

    The file is deleted at most once: either by an explicit :meth:`remove`
    or, on an exception path, when the ``with`` block is left.
    """

    def __init__(self, path: Path, platform: Platform) -> None:
        self.path = path
        self.platform = platform
        self._removed = False

    @property
    def removed(self) -> bool:
        return self._removed

    def remove(self) -> None:
        """Delete the file.

        Raises:
            OSError: If the file could not be deleted.  The deletion is not
                attempted again.
        """
        if self._removed:
            return
        self._removed = True
        self.path.unlink()
        logger.debug("Deleted temporary file %s", self.path)

    def __enter__(self) -> MaterializedExecutable:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        if exc_type is None:
            self.remove()
            return
        try:
            self.remove()
        except OSError as err:
            logger.warning("Couldn't delete temporary file %s: %s", self.path, err)

    def __repr__(self) -> str:
        return f"MaterializedExecutable(path={str(self.path)!r}, platform={self.platform.value!r})"


def _discard_partial(path: Path) -> None:
    try:
        path.unlink()
    except FileNotFoundError:
        pass
    except OSError as err:
        logger.warning("Couldn't delete incomplete temporary file %s: %s", path, err)


def materialize(
    data: bytes,
    platform: Platform,
    version: str,
    directory: str | os.PathLike[str] | None = None,
) -> MaterializedExecutable:
    """Write ``data`` to a new, uniquely named executable file.

    ``directory`` defaults to the system temporary directory.  The file is
    opened exclusively, so an existing path is never reused, and it is only
    marked executable once its contents are synced to disk.  On Windows the
    permission step is skipped; the ``.exe`` suffix is what makes the file
    runnable there.

    Raises:
        TemporaryFileError: If any step fails.  No file is left behind.
    """

    base = Path(directory) if directory is not None else Path(tempfile.gettempdir())
    path = base / temporary_file_name(platform, version, uuid.uuid4().hex)

    with SPAWN_LOCK:
        try:
            fd = os.open(path, _CREATE_FLAGS, 0o600)
        except OSError as exc:
            raise TemporaryFileError(
                f"Couldn't create temporary file {path}: {exc}", path=path
            ) from exc
        logger.debug("Created temporary file %s", path)

        try:
            try:
                handle = os.fdopen(fd, "wb")
            except BaseException:
                os.close(fd)
                raise
            with handle:
                handle.write(data)
                handle.flush()
                os.fsync(handle.fileno())
                if os.name != "nt":
                    os.fchmod(handle.fileno(), EXECUTABLE_MODE)
                    logger.debug("Made temporary file executable")
        except OSError as exc:
            _discard_partial(path)
            raise TemporaryFileError(
                f"Couldn't save Tailwind CLI executable to temporary file {path}: {exc}",
                path=path,
            ) from exc

    logger.debug("Wrote %d bytes to %s", len(data), path)
    return MaterializedExecutable(path, platform)
