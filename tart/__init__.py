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
TART - bundle files into gzip-compressed tar archives, extract them, or
append a file to an existing archive.

The archive and compression codecs are the standard library's ``tarfile`` and
``gzip`` modules; this package only orchestrates them.
"""

from .errors import TartError, TartFormatError
from .reader import decompress_files, list_entries
from .structures import ArchiveEntry, CompressResult
from .writer import add_file, compress_files

__all__ = [
    "compress_files",
    "decompress_files",
    "add_file",
    "list_entries",
    "ArchiveEntry",
    "CompressResult",
    "TartError",
    "TartFormatError",
]

__version__ = "1.0.0"
