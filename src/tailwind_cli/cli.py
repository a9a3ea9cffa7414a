"""Console entry point for invoking the packaged ``tailwindcss`` binary."""

from __future__ import annotations

import logging
import os
import sys

from colored import fg, stylize

from .exceptions import CleanupError, SpawnError, TailwindCliError, ToolFailedError
from .runtime import TailwindCliOutput, run

LOG_LEVEL_ENV = "TAILWIND_CLI_LOG_LEVEL"

# Exit status shells use for a command that could not be executed.
SPAWN_FAILURE_EXIT_CODE = 127


def _configure_logging() -> logging.Logger:
    level_name = os.environ.get(LOG_LEVEL_ENV, "WARNING").upper()
    level = logging.getLevelName(level_name)
    if not isinstance(level, int):
        level = logging.WARNING

    logger = logging.getLogger("tailwind_cli")
    logger.setLevel(level)

    handler = logging.StreamHandler(stream=sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter("%(message)s"))

    logger.handlers.clear()
    logger.addHandler(handler)
    return logger


def _echo(output: TailwindCliOutput) -> None:
    if output.stdout:
        print(output.stdout)
    if output.stderr:
        print(output.stderr, file=sys.stderr)


def _error(message: str) -> None:
    print(stylize(message, fg("red")), file=sys.stderr)


def main(argv: list[str] | None = None) -> int:
    """Execute the packaged binary passing through any CLI arguments."""

    _configure_logging()
    args = argv if argv is not None else sys.argv[1:]
    try:
        output = run(args)
    except ToolFailedError as exc:
        _echo(TailwindCliOutput(exc.stdout, exc.stderr, exc.returncode))
        return exc.returncode
    except CleanupError as exc:
        _echo(exc.output)
        print(stylize(f"warning: {exc}", fg("yellow")), file=sys.stderr)
        return exc.output.returncode
    except SpawnError as exc:
        _error(str(exc))
        return SPAWN_FAILURE_EXIT_CODE
    except TailwindCliError as exc:
        _error(str(exc))
        return 1

    _echo(output)
    return 0


if __name__ == "__main__":  # pragma: no cover - CLI passthrough only
    sys.exit(main())
