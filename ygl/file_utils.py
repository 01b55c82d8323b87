"""Helpers for files, directories and path strings."""

from __future__ import annotations

import os
import shutil
from typing import Iterator


def read_file(path: str | os.PathLike) -> str:
    """Return the whole text of ``path`` with line endings left untouched."""
    with open(path, encoding="utf-8", newline="") as handle:
        return handle.read()


def write_file(path: str | os.PathLike, content: str) -> None:
    """Write ``content`` to ``path``, replacing anything already there."""
    with open(path, "w", encoding="utf-8", newline="") as handle:
        handle.write(content)


def exists(path: str | os.PathLike) -> bool:
    return os.path.exists(path)


def is_directory(path: str | os.PathLike) -> bool:
    return os.path.isdir(path)


def create_directory(path: str | os.PathLike) -> bool:
    """Create ``path`` and its parents; False if the directory already existed."""
    if os.path.isdir(path):
        return False
    os.makedirs(path)
    return True


def get_directory(path: str) -> str:
    """The parent part of ``path``; empty when there is none."""
    return os.path.dirname(os.fspath(path))


def get_filename(path: str) -> str:
    return os.path.basename(os.fspath(path))


def _split_name(path: str) -> tuple[str, str]:
    name = get_filename(path)
    dot = name.rfind(".")
    if name in (".", "..") or dot <= 0:
        return name, ""
    return name[:dot], name[dot:]


def get_filename_without_extension(path: str) -> str:
    return _split_name(path)[0]


def get_extension(path: str) -> str:
    """The extension including its leading dot, or an empty string."""
    return _split_name(path)[1]


def _walk(directory: str, recursive: bool) -> Iterator[os.DirEntry]:
    with os.scandir(directory) as entries:
        children = sorted(entries, key=lambda e: e.name)
    for entry in children:
        yield entry
        if recursive and entry.is_dir(follow_symlinks=False):
            yield from _walk(entry.path, recursive)


def files_in_directory(directory: str | os.PathLike, recursive: bool = False) -> list[str]:
    """Paths of the regular files in ``directory``, optionally at every depth."""
    return [e.path for e in _walk(os.fspath(directory), recursive) if e.is_file()]


def directories_in_directory(directory: str | os.PathLike,
                             recursive: bool = False) -> list[str]:
    """Paths of the directories in ``directory``, optionally at every depth."""
    return [e.path for e in _walk(os.fspath(directory), recursive) if e.is_dir()]


def join_paths(*args: str | os.PathLike) -> str:
    """Join path parts; an absolute part discards those before it."""
    if not args:
        return ""
    return os.path.join(*(os.fspath(a) for a in args))


def normalize_path(path: str | os.PathLike) -> str:
    """Resolve ``.``, ``..`` and links as far as the path exists."""
    return os.path.realpath(path)


def absolute_path(path: str | os.PathLike) -> str:
    """``path`` made absolute against the working directory, not normalised."""
    text = os.fspath(path)
    if os.path.isabs(text):
        return text
    return os.path.join(os.getcwd(), text)


def relative_path(path: str | os.PathLike, base: str | os.PathLike) -> str:
    return os.path.relpath(path, base)


def file_size(path: str | os.PathLike) -> int:
    return os.path.getsize(path)


def modification_time(path: str | os.PathLike) -> float:
    """Last modification time as seconds since the epoch."""
    return os.path.getmtime(path)


def copy_file(source: str | os.PathLike, destination: str | os.PathLike) -> None:
    """Copy a file, overwriting ``destination`` if it exists."""
    shutil.copyfile(source, destination)


def move_file(source: str | os.PathLike, destination: str | os.PathLike) -> None:
    """Rename ``source`` to ``destination``, replacing an existing file."""
    os.replace(source, destination)


def delete_file(path: str | os.PathLike) -> None:
    """Remove a file or an empty directory; a missing path is ignored."""
    if os.path.isdir(path) and not os.path.islink(path):
        os.rmdir(path)
    elif os.path.lexists(path):
        os.remove(path)


def delete_directory(path: str | os.PathLike, recursive: bool = False) -> None:
    """Remove a directory, with its contents when ``recursive``; missing is ignored."""
    if not os.path.lexists(path):
        return
    if recursive:
        if os.path.isdir(path) and not os.path.islink(path):
            shutil.rmtree(path)
        else:
            os.remove(path)
    else:
        delete_file(path)