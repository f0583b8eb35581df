"""Locating files that external tools wrote under names of their own choosing."""

from __future__ import annotations

import re
from pathlib import Path
from typing import Iterable, Sequence

from ..domain.errors import ArtifactAmbiguityError, ArtifactNotFoundError
from .fs__shared_util import list_file_names, rename_into_place

# yt-dlp leaves per-format pieces as "<name>.f137.mp4" and scratch files with "_temp".
_FRAGMENT = re.compile(r"\.f\d+\.|_temp")


def is_fragment(name: str) -> bool:
    return bool(_FRAGMENT.search(name))


def find_candidates(names: Iterable[str], extensions: Sequence[str]) -> list[str]:
    exts = tuple(e.lower() for e in extensions)
    return [n for n in names if n.lower().endswith(exts) and not is_fragment(n)]


def locate_artifact(
    directory: Path,
    target: Path,
    *,
    preferred: Sequence[str],
    fallback: Sequence[str],
    label: str,
    producer: str,
) -> Path:
    """Find the single finished file of a tool run and move it to ``target``.

    Extensions in ``preferred`` are tried first and ``fallback`` only when the
    first tier has no match. A file already carrying the target name wins its
    tier; otherwise more than one match is an error rather than a guess.
    """
    names = list_file_names(directory)
    for extensions in (preferred, fallback):
        candidates = find_candidates(names, extensions)
        if not candidates:
            continue
        if target.name in candidates and target.parent == directory:
            chosen = target.name
        elif len(candidates) > 1:
            raise ArtifactAmbiguityError(directory, candidates)
        else:
            chosen = candidates[0]
        return rename_into_place(directory / chosen, target)

    listing = ", ".join(names) if names else "(empty)"
    raise ArtifactNotFoundError(
        f"{producer} succeeded but no {label} file found in {directory}. Files: {listing}"
    )
