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
Constants used throughout tart: codec settings, entry defaults and exit codes.
"""

import tarfile

PROG_NAME = "tart"

# Compression level used for every new gzip member (zlib's standard level)
DEFAULT_COMPRESSION_LEVEL = 6

# Tar header format for written entries
ARCHIVE_FORMAT = tarfile.GNU_FORMAT

# Fixed metadata for entries appended with --add
ADD_ENTRY_MODE = 0o755  # rwxr-xr-x
ADD_ENTRY_MTIME = 0

# Extraction filter passed to TarFile.extractall (keeps mode and mtime,
# refuses members that would land outside the destination)
EXTRACTION_FILTER = "tar"

# Process exit codes
EXIT_FAILURE = 1
EXIT_USAGE = 2
EXIT_INTERRUPTED = 130
