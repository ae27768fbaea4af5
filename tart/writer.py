"""
Copyright 2025 DNAi inc.

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at

    http://www.apache.org/licenses/LICENSE-2.0

Unless required by applicable law or agreed to in writing, software
distributed under the License is distributed on an "AS IS" BASIS,
WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
See the License for the specific language governing permissions and
limitations under the License.
"""

"""
Archive writing: the compress and add operations.

Both operations layer the same three streams: a raw file handle, a
``gzip.GzipFile`` compressor and a ``tarfile`` writer. Compress starts them on
a freshly truncated file; add starts a new pair at the end of an existing
archive, producing a second gzip member holding a second tar segment.
"""

import gzip
import os
import tarfile
from typing import Callable, Iterable, Optional

from .constants import (
    ADD_ENTRY_MODE,
    ADD_ENTRY_MTIME,
    ARCHIVE_FORMAT,
    DEFAULT_COMPRESSION_LEVEL,
)
from .structures import ArchiveEntry, CompressResult
from .utils import normalize_entry_name

PathCallback = Callable[[str], None]


def _check_compression_level(level: int) -> None:
    if not 0 <= level <= 9:
        raise ValueError(f"Invalid compression level: {level} (must be 0-9)")


def compress_files(
    inputs: Iterable[str | os.PathLike],
    output: str | os.PathLike,
    compression_level: int = DEFAULT_COMPRESSION_LEVEL,
    missing_callback: Optional[PathCallback] = None,
    excluded_callback: Optional[PathCallback] = None,
) -> CompressResult:
    """Write *inputs* into a new gzip-compressed tar archive at *output*.

    An existing file at *output* is overwritten. Inputs that do not exist are
    skipped and reported through *missing_callback*; an input that is the
    destination archive itself is left out and reported through
    *excluded_callback*. Every other input is added in order with its
    filesystem metadata. Directories become a single directory entry (their
    contents are not walked).

    Entry names are checked before *output* is opened, so an input that would
    be stored with a ``..`` component aborts without creating anything.

    Args:
        inputs: Paths to archive, in order. May be empty.
        output: Destination archive path.
        compression_level: gzip level (0-9).
        missing_callback: Called with each path that does not exist.
        excluded_callback: Called with each path that is the destination.

    Returns:
        CompressResult describing which inputs were written and skipped.

    Raises:
        UnsafeEntryNameError: If an existing input has a ``..`` component.
        OSError: If the destination cannot be created or an input cannot be
            read. Partial output is left on disk.
    """
    _check_compression_level(compression_level)
    result = CompressResult(
        output=os.fspath(output),
        requested=[os.fspath(p) for p in inputs],
    )
    # None marks a missing input
    names = [
        normalize_entry_name(path) if os.path.exists(path) else None
        for path in result.requested
    ]

    with open(output, "wb") as raw, gzip.GzipFile(
        fileobj=raw, mode="wb", compresslevel=compression_level
    ) as gz:
        # The end-of-archive blocks are only written when the block exits
        # cleanly.
        with tarfile.open(fileobj=gz, mode="w", format=ARCHIVE_FORMAT) as tar:
            for path, name in zip(result.requested, names):
                if name is None:
                    result.skipped.append(path)
                    if missing_callback is not None:
                        missing_callback(path)
                    continue
                if os.path.samefile(path, output):
                    result.excluded.append(path)
                    if excluded_callback is not None:
                        excluded_callback(path)
                    continue
                tar.add(path, arcname=name, recursive=False)
                result.written.append(path)

    return result


def add_file(
    archive: str | os.PathLike,
    file_path: str | os.PathLike,
    compression_level: int = DEFAULT_COMPRESSION_LEVEL,
) -> ArchiveEntry:
    """Append *file_path* to an existing archive as one new entry.

    The archive is opened for reading and writing without truncation and a new
    gzip member is started at its end. The entry is named after *file_path*,
    gets mode ``0o755`` and a zero modification time regardless of the file's
    own metadata.

    Args:
        archive: Existing archive to append to.
        file_path: File whose bytes become the new entry.
        compression_level: gzip level (0-9) for the new member.

    Returns:
        ArchiveEntry describing the appended entry.

    Raises:
        UnsafeEntryNameError: If the entry name would contain ``..``; checked
            before the archive is opened.
        FileNotFoundError: If *archive* or *file_path* does not exist.
        OSError: On any other read or write failure. Bytes preceding the
            append point are never modified.
    """
    _check_compression_level(compression_level)
    name = normalize_entry_name(file_path)

    with open(archive, "r+b") as raw:
        raw.seek(0, os.SEEK_END)

        # Open the source before starting the new member so a missing file
        # leaves the archive untouched.
        with open(file_path, "rb") as src:
            info = tarfile.TarInfo(name)
            info.size = os.fstat(src.fileno()).st_size
            info.mode = ADD_ENTRY_MODE
            info.mtime = ADD_ENTRY_MTIME

            with gzip.GzipFile(
                fileobj=raw, mode="wb", compresslevel=compression_level
            ) as gz:
                with tarfile.open(fileobj=gz, mode="w", format=ARCHIVE_FORMAT) as tar:
                    tar.addfile(info, src)

    return ArchiveEntry.from_tarinfo(info)
