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
Archive entry and operation result definitions.

This module defines dataclasses describing entries stored in a tart archive
and the outcome of a compress operation.
"""

import tarfile
from dataclasses import dataclass, field
from datetime import datetime, timezone


@dataclass
class ArchiveEntry:
    """One logical file stored in an archive.

    Holds the metadata carried by the entry's tar header; the content bytes
    stay in the archive.
    """

    name: str
    size: int
    mode: int
    mtime: int
    is_dir: bool = False

    @property
    def date_time(self) -> datetime:
        """Get modification time as a UTC datetime object."""
        return datetime.fromtimestamp(self.mtime, tz=timezone.utc)

    @classmethod
    def from_tarinfo(cls, info: tarfile.TarInfo) -> "ArchiveEntry":
        """Build an entry from a parsed tar header."""
        return cls(
            name=info.name,
            size=info.size,
            mode=info.mode,
            mtime=int(info.mtime),
            is_dir=info.isdir(),
        )


@dataclass
class CompressResult:
    """Outcome of compressing a list of paths into one archive.

    ``requested`` keeps the paths exactly as given; ``written``, ``skipped``
    (missing inputs) and ``excluded`` (the destination archive itself)
    partition them in input order.
    """

    output: str
    requested: list[str] = field(default_factory=list)
    written: list[str] = field(default_factory=list)
    skipped: list[str] = field(default_factory=list)
    excluded: list[str] = field(default_factory=list)

    @property
    def count(self) -> int:
        """Number of entries actually written to the archive."""
        return len(self.written)
