"""File system helpers for writing and copying build output."""

from __future__ import annotations

import logging
import os
import shutil
from collections.abc import Iterable
from pathlib import Path, PurePath
from typing import BinaryIO

logger = logging.getLogger(__name__)

_SEPARATORS = {os.sep, os.altsep} - {None}


def normalize_path(path: str) -> str:
    """Replace every path separator with a forward slash."""
    return "".join("/" if ch in _SEPARATORS else ch for ch in path)


def create_file(path: str | os.PathLike[str]) -> BinaryIO:
    """Open ``path`` for binary writing, creating missing parent directories."""
    path = Path(path)
    logger.debug("Creating %s", path)
    if path.parent != path:
        path.parent.mkdir(parents=True, exist_ok=True)
    return path.open("wb")


def write_file(
    build_dir: str | os.PathLike[str],
    filename: str | os.PathLike[str],
    content: bytes,
) -> None:
    """Write ``content`` to ``build_dir / filename``, creating directories as needed."""
    with create_file(Path(build_dir) / filename) as handle:
        handle.write(content)


def path_to_root(path: str | os.PathLike[str]) -> str:
    """Return enough ``../`` segments to climb from ``path``'s directory to its root.

    >>> path_to_root("some/relative/path")
    '../../'
    """
    parent = PurePath(path).parent
    parts = parent.parts[1:] if parent.anchor else parent.parts
    return "".join("../" for part in parts if part not in (".", ".."))


def remove_dir_content(directory: str | os.PathLike[str]) -> None:
    """Remove everything inside ``directory`` but keep the directory itself."""
    for item in Path(directory).iterdir():
        if item.is_dir() and not item.is_symlink():
            shutil.rmtree(item)
        else:
            item.unlink()


def copy_files_except_ext(
    source: str | os.PathLike[str],
    destination: str | os.PathLike[str],
    recursive: bool,
    avoid_dir: str | os.PathLike[str] | None = None,
    ext_blacklist: Iterable[str] = (),
) -> None:
    """Copy files from ``source`` to ``destination``, skipping blacklisted extensions.

    Subdirectories are copied when ``recursive`` is true, except the
    destination itself and ``avoid_dir``.
    """
    source = Path(source)
    destination = Path(destination)
    avoid = Path(avoid_dir) if avoid_dir is not None else None
    blacklist = set(ext_blacklist)
    logger.debug(
        "Copying all files from %s to %s (blacklist: %s), avoiding %s",
        source,
        destination,
        sorted(blacklist),
        avoid,
    )

    if source == destination:
        return

    for entry in sorted(source.iterdir()):
        try:
            info = entry.stat()
        except OSError as exc:
            raise OSError(f"Failed to read {entry}") from exc

        target = destination / entry.name
        if entry.is_dir() and recursive:
            if entry == destination or (avoid is not None and entry == avoid):
                continue
            if not target.exists():
                target.mkdir()
            copy_files_except_ext(entry, target, True, avoid, blacklist)
        elif not entry.is_dir() and os.path.isfile(entry):
            extension = entry.suffix[1:] if entry.suffix else None
            if extension is not None and extension in blacklist:
                continue
            logger.debug("Copying %s to %s (%d bytes)", entry, target, info.st_size)
            try:
                shutil.copy(entry, target)
            except OSError as exc:
                raise OSError(f"failed to copy `{entry}` to `{target}`") from exc


def get_404_output_file(input_404: str | None) -> str:
    """Return the output file name for the configured 404 page."""
    name = "404.md" if input_404 is None else input_404
    return name.replace(".md", ".html")