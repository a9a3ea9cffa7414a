#!/usr/bin/env python3
# fetch_binaries.py [<output-bin-dir>]
#
# Downloads the standalone tailwindcss release binaries matching the package
# version into src/tailwind_cli/bin/ so they ship as package data.

import sys
import urllib.error
import urllib.request
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(ROOT / "src"))

from tailwind_cli import Platform, tailwind_version  # noqa: E402
from tailwind_cli.store import binary_file_name, missing_binaries  # noqa: E402

RELEASE_URL = "https://github.com/tailwindlabs/tailwindcss/releases/download/v{version}/{name}"
DEFAULT_BIN_DIR = ROOT / "src" / "tailwind_cli" / "bin"


def fetch(platform: Platform, bin_dir: Path, timeout_s: int = 120) -> Path:
    name = binary_file_name(platform)
    url = RELEASE_URL.format(version=tailwind_version(), name=name)
    target = bin_dir / name
    print(f"downloading {url}")
    try:
        with urllib.request.urlopen(url, timeout=timeout_s) as resp:
            data = resp.read()
    except urllib.error.HTTPError as e:
        raise RuntimeError(f"download failed: {e.code}: {url}") from e
    if not data:
        raise RuntimeError(f"download returned no data: {url}")
    target.write_bytes(data)
    print(f"  -> {target} ({len(data)} bytes)")
    return target


def run():
    bin_dir = Path(sys.argv[1]) if len(sys.argv) > 1 else DEFAULT_BIN_DIR
    bin_dir.mkdir(parents=True, exist_ok=True)
    for platform in Platform:
        fetch(platform, bin_dir)

    # only meaningful for the in-tree package directory
    if bin_dir.resolve() == DEFAULT_BIN_DIR.resolve():
        missing = missing_binaries()
        if missing:
            print(f"error: binaries still missing for {', '.join(p.value for p in missing)}")
            sys.exit(1)


if __name__ == "__main__":
    run()
