from __future__ import annotations

import os
import shutil
from pathlib import Path


def ensure_directory(path: Path) -> Path:
    path.mkdir(parents=True, exist_ok=True)
    return path


def list_file_names(directory: Path) -> list[str]:
    return sorted(entry.name for entry in directory.iterdir() if entry.is_file())


def rename_into_place(source: Path, target: Path) -> Path:
    if source == target:
        return target
    os.replace(source, target)
    return target


def which(cmd: str) -> str | None:
    return shutil.which(cmd)


def remove_tree(path: Path) -> None:
    shutil.rmtree(path, ignore_errors=True)
