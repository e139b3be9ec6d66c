from __future__ import annotations
import re
from functools import cmp_to_key
from pathlib import Path
from typing import Iterator, Optional, Tuple

Version = Tuple[int, ...]

_VERSION_RE = re.compile(r"[0-9]+(?:\.[0-9]+)*")

# ---------- Core helpers -----------------------------------------------------
def parse_version(name: str) -> Optional[Version]:
    """
    Parse a dotted numeric directory name such as ``25.0.3``.

    Returns ``None`` for anything else ("latest", "30.0.0-rc1", ".DS_Store"),
    so callers can skip those entries.
    """
    if not _VERSION_RE.fullmatch(name):
        return None
    return tuple(int(part) for part in name.split("."))


def compare_versions(a: Version, b: Version) -> int:
    """Compare component-wise; the shorter version is padded with zeros."""
    width = max(len(a), len(b))
    pa = a + (0,) * (width - len(a))
    pb = b + (0,) * (width - len(b))
    return (pa > pb) - (pa < pb)


def version_dirs(parent: Path) -> Iterator[tuple[Version, Path]]:
    """Yield ``(version, path)`` for every version-named subdirectory of *parent*."""
    for child in parent.iterdir():
        if not child.is_dir():
            continue
        version = parse_version(child.name)
        if version is None:
            continue
        yield version, child


def latest_version_dir(parent: Path) -> Optional[Path]:
    """
    Return the subdirectory of *parent* with the greatest version name.

    ``None`` when *parent* is not a directory or holds no version-named
    subdirectory. Equal versions ("25.0" vs "25.0.0") fall back to the greater
    name so the pick does not depend on listing order.
    """
    if not parent.is_dir():
        return None

    candidates = sorted(version_dirs(parent), key=lambda c: c[1].name)
    if not candidates:
        return None
    # stable sort keeps the name order among equal versions
    candidates.sort(key=cmp_to_key(lambda x, y: compare_versions(x[0], y[0])))
    return candidates[-1][1]
