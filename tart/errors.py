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
Exception classes for tart.

The handlers raise these for conditions that abort an operation. Plain
``OSError`` subclasses (``FileNotFoundError``, ``PermissionError``) are left to
propagate unchanged so the CLI can name the underlying cause.
"""


class TartError(Exception):
    """Base exception class for all tart errors."""

    pass


class TartUsageError(TartError):
    """Raised when the command line cannot be turned into a runnable operation."""

    pass


class MissingArgumentError(TartUsageError):
    """Raised when an operation is missing a required option.

    This exception is raised when:
    - ``--output`` is absent for any operation
    - ``--input`` is absent for decompress or add
    - more than one ``--input`` value is given where exactly one is expected
    """

    pass


class UnspecifiedOperationError(TartUsageError):
    """Raised when none of ``--compress``, ``--decompress`` or ``--add`` is given."""

    pass


class TartFormatError(TartError):
    """Raised when an archive or its compressed stream cannot be decoded.

    This exception is raised when:
    - The file is not gzip data
    - The gzip stream is corrupted or truncated
    - A tar header is malformed
    """

    pass


class UnsafeEntryNameError(TartError):
    """Raised when a path would be stored under a name that escapes the archive root.

    Names containing a ``..`` component cannot be extracted back into a
    destination directory, so they are refused before anything is written.
    """

    pass
