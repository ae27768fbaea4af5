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
Archive reading: the decompress operation and entry listing.

Archives written by :func:`tart.writer.add_file` are several gzip members
back to back, each holding its own tar segment with its own end-of-archive
blocks. ``gzip`` decodes every member in sequence; the tar reader is opened
with ``ignore_zeros`` so it keeps reading past the blocks that end each
segment and sees the union of all entries.

The cost of ``ignore_zeros`` is that it also skips invalid headers. Only the
first header is checked strictly; a corrupt header further in is passed over
block by block, so a damaged segment shows up as missing entries rather than
as a TartFormatError. Corrupt or truncated compressed data is still reported,
since gzip verifies each member's CRC and length.
"""

import gzip
import os
import tarfile
import zlib
from pathlib import Path

from .constants import EXTRACTION_FILTER
from .errors import TartFormatError
from .structures import ArchiveEntry

# Errors the codecs raise for data that is not, or is no longer, a valid
# gzip-compressed tar stream
_CODEC_ERRORS = (tarfile.TarError, gzip.BadGzipFile, EOFError, zlib.error)


def _check_archive(archive: str | os.PathLike) -> None:
    """Read the first header of *archive* strictly.

    ``ignore_zeros`` would skip an invalid first header instead of failing,
    which would make any gzip file look like an empty archive.
    """
    try:
        with tarfile.open(archive, "r:gz"):
            pass
    except _CODEC_ERRORS as e:
        raise TartFormatError(f"Not a valid tar.gz archive: {archive} ({e})") from e


def list_entries(archive: str | os.PathLike) -> list[ArchiveEntry]:
    """Return every entry stored in *archive*, across all segments, in order.

    Raises:
        FileNotFoundError: If *archive* does not exist.
        TartFormatError: If the archive cannot be decoded.
    """
    _check_archive(archive)
    try:
        with tarfile.open(archive, "r:gz", ignore_zeros=True) as tar:
            return [ArchiveEntry.from_tarinfo(info) for info in tar]
    except _CODEC_ERRORS as e:
        raise TartFormatError(f"Failed to read {archive}: {e}") from e


def decompress_files(
    archive: str | os.PathLike, output_dir: str | os.PathLike
) -> list[ArchiveEntry]:
    """Extract every entry of *archive* into *output_dir*.

    *output_dir* is created (with parents) only after the archive has been
    opened and its first header decoded, so a missing or non-archive input
    produces no output. Entries are extracted in stored order with their
    relative paths, modes and modification times; members that would land
    outside *output_dir* are refused by the extraction filter.

    Args:
        archive: Path to the gzip-compressed tar archive.
        output_dir: Destination directory.

    Returns:
        List of extracted entries.

    Raises:
        FileNotFoundError: If *archive* does not exist.
        TartFormatError: If the archive is corrupt or truncated. Entries
            extracted before the failure remain on disk.
        OSError: On any other I/O failure.
    """
    _check_archive(archive)
    try:
        with tarfile.open(archive, "r:gz", ignore_zeros=True) as tar:
            Path(output_dir).mkdir(parents=True, exist_ok=True)
            tar.extractall(output_dir, filter=EXTRACTION_FILTER)
            return [ArchiveEntry.from_tarinfo(info) for info in tar.getmembers()]
    except _CODEC_ERRORS as e:
        raise TartFormatError(f"Failed to extract {archive}: {e}") from e
