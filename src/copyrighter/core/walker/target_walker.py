# -----------------------------------------------------------------------------
# /*
#  * Copyright (C) 2025 CodeStory
#  *
#  * This program is free software; you can redistribute it and/or modify
#  * it under the terms of the GNU General Public License as published by
#  * the Free Software Foundation; Version 2.
#  *
#  * This program is distributed in the hope that it will be useful,
#  * but WITHOUT ANY WARRANTY; without even the implied warranty of
#  * MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE. See the
#  * GNU General Public License for more details.
#  *
#  * You should have received a copy of the GNU General Public License
#  * along with this program; if not, you can contact us at support@codestory.build
#  */
# -----------------------------------------------------------------------------

import errno
import os
from collections.abc import Callable, Iterator

from copyrighter.core.exceptions import FileSystemError, file_operation_failed


def normalize_extension(ext: str) -> str:
    ext = ext.strip()
    if ext and not ext.startswith("."):
        ext = "." + ext
    return ext


def parse_extensions(extensions: str | list[str]) -> frozenset[str]:
    """
    Build the extension set from a comma-separated list.

    Entries may be given with or without the leading dot; empty entries are
    ignored. Returns an empty set if nothing usable was given.
    """
    if isinstance(extensions, str):
        extensions = extensions.split(",")
    normalized = (normalize_extension(ext) for ext in extensions)
    return frozenset(ext for ext in normalized if ext)


def file_extension(path: str) -> str:
    """Extension of the base name, starting at its last dot ('' if none)."""
    name = os.path.basename(path)
    index = name.rfind(".")
    if index < 0:
        return ""
    return name[index:]


def is_hidden_dir(path: str) -> bool:
    name = os.path.basename(os.path.normpath(path))
    return name not in (".", "..") and name.startswith(".")


def iter_target_files(
    target: str,
    extensions: frozenset[str],
    onerror: Callable[[FileSystemError], None] | None = None,
) -> Iterator[str]:
    """
    Yield every regular file under target whose extension is in the set.

    Directories are visited depth first in lexical order. Hidden directories
    (base name starting with a dot) are skipped, including a hidden target.

    If onerror is given it is called with the error for a missing target or
    an unreadable directory and the walk carries on without it, otherwise
    the error is raised.

    Raises:
        FileSystemError: if the target or a directory under it cannot be read
    """
    target = os.fspath(target)
    if not os.path.lexists(target):
        missing = FileNotFoundError(errno.ENOENT, os.strerror(errno.ENOENT), target)
        _fail(file_operation_failed("access", target, missing), onerror)
        return

    if not os.path.isdir(target):
        if os.path.isfile(target) and file_extension(target) in extensions:
            yield target
        return

    if is_hidden_dir(target):
        return

    try:
        names = sorted(os.listdir(target))
    except OSError as e:
        _fail(file_operation_failed("list", target, e), onerror)
        return

    for name in names:
        path = os.path.join(target, name)
        # symlinked directories are not followed
        if os.path.isdir(path) and not os.path.islink(path):
            yield from iter_target_files(path, extensions, onerror)
        elif os.path.isfile(path) and file_extension(path) in extensions:
            yield path


def _fail(error: FileSystemError, onerror) -> None:
    if onerror is None:
        raise error
    onerror(error)
