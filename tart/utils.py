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
Utility functions for tart.
"""

import os

from .errors import UnsafeEntryNameError


def normalize_entry_name(path: str | os.PathLike) -> str:
    """Turn a filesystem path into the name stored in a tar header.

    Drive letters are dropped, OS separators become ``/`` and leading slashes
    are stripped, matching the names ``tarfile`` produces for the compress
    operation.

    Args:
        path: Path as given on the command line.

    Returns:
        Relative entry name.

    Raises:
        UnsafeEntryNameError: If the name contains a ``..`` component.
    """
    _, name = os.path.splitdrive(os.fspath(path))
    name = name.replace(os.sep, "/")
    if os.altsep:
        name = name.replace(os.altsep, "/")
    name = name.lstrip("/")
    if ".." in name.split("/"):
        raise UnsafeEntryNameError(
            f"Refusing to store '{os.fspath(path)}': entry names may not contain '..'"
        )
    return name
