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

from __future__ import annotations

"""
Command-line interface for TART (``tart``).

Exactly one operation runs per invocation:

- ``-c/--compress``   : bundle the ``-i`` files into the ``-o`` archive
- ``-d/--decompress`` : extract the ``-i`` archive into the ``-o`` directory
- ``-a/--add``        : append the ``-o`` file to the ``-i`` archive

Example usages:

    python -m tart -c -i file1.txt file2.txt -o archive.tar.gz
    python -m tart -d -i archive.tar.gz -o extracted_dir/
    python -m tart -a -i archive.tar.gz -o newfile.txt
"""

import argparse
import sys
from enum import Enum
from typing import List, Optional

from . import __version__
from .constants import EXIT_FAILURE, EXIT_INTERRUPTED, EXIT_USAGE, PROG_NAME
from .errors import (
    MissingArgumentError,
    TartError,
    TartUsageError,
    UnspecifiedOperationError,
)
from .reader import decompress_files
from .writer import add_file, compress_files

USAGE = r"""
NAME
    tart - Compress and decompress files using Gzip and Tar

SYNOPSIS
    tart [OPTIONS] -i <INPUT> -o <OUTPUT>

DESCRIPTION
    Tart is a command-line utility to compress multiple files into a
    single .tar.gz archive, extract .tar.gz archives, or append a file to an
    existing .tar.gz archive.

OPTIONS
    -c, --compress
        Compress multiple files into a single .tar.gz archive.

    -d, --decompress
        Extract files from a .tar.gz archive.

    -a, --add
        Add a file to an existing .tar.gz archive. The archive is given
        with -i and the file to add with -o. The file is stored as a new
        gzip member appended to the archive, with mode 755 and a zero
        modification time.

    -i, --input <INPUT>
        Input file(s) for compression, or archive file for decompression
        and add. Accepts multiple files when compressing.

    -o, --output <OUTPUT>
        Output archive file (.tar.gz), extraction directory, or the file
        to add.

    -V, --version
        Display the version and exit.

    -h, --help
        Display this help message.

EXAMPLES
    Compress files into an archive:
        tart -c -i file1.txt file2.txt -o archive.tar.gz

    Decompress an archive:
        tart -d -i archive.tar.gz -o extracted_dir/

    Add a file to an existing archive:
        tart -a -i archive.tar.gz -o newfile.txt
"""


class Operation(Enum):
    """The single action an invocation performs."""

    COMPRESS = "compress"
    DECOMPRESS = "decompress"
    ADD = "add"
    HELP = "help"
    VERSION = "version"
    UNSPECIFIED = "unspecified"


def _print_error(message: str, exit_code: int = EXIT_FAILURE, suggestion: Optional[str] = None) -> None:
    """Print an error message to stderr and exit with the given code.

    Args:
        message: Error message to display.
        exit_code: Exit code to use.
        suggestion: Optional suggestion to help the user resolve the error.
    """
    sys.stderr.write(f"{PROG_NAME}: error: {message}\n")
    if suggestion:
        sys.stderr.write(f"{PROG_NAME}: suggestion: {suggestion}\n")
    sys.exit(exit_code)


def _print_warning(message: str) -> None:
    """Print a non-fatal warning to stderr."""
    sys.stderr.write(f"{PROG_NAME}: warning: {message}\n")


def _build_parser() -> argparse.ArgumentParser:
    """Create and configure the argument parser.

    ``add_help`` is disabled so that ``-h`` is an ordinary flag resolved to
    :attr:`Operation.HELP` and answered with the full usage page. Prefix
    abbreviations are disabled so the help check in :func:`main` sees every
    spelling of the help flag.
    """
    parser = argparse.ArgumentParser(
        prog=PROG_NAME,
        description="Compress and decompress multiple files into a single Gzip archive",
        add_help=False,
        allow_abbrev=False,
    )
    parser.add_argument(
        "-c", "--compress",
        action="store_true",
        help="Compress multiple files into a single .tar.gz file",
    )
    parser.add_argument(
        "-d", "--decompress",
        action="store_true",
        help="Extract files from a .tar.gz archive",
    )
    parser.add_argument(
        "-a", "--add",
        action="store_true",
        help="Add a file to an existing .tar.gz archive",
    )
    parser.add_argument(
        "-h", "--help",
        action="store_true",
        help="Display the help page",
    )
    parser.add_argument(
        "-V", "--version",
        action="store_true",
        help="Display the version",
    )
    parser.add_argument(
        "-i", "--input",
        nargs="+",
        default=None,
        metavar="INPUT",
        help="Input files (for compression) or archive (for decompression and add)",
    )
    parser.add_argument(
        "-o", "--output",
        default=None,
        metavar="OUTPUT",
        help="Output archive file (.tar.gz), extraction directory, or file to add",
    )
    return parser


def _resolve_operation(args: argparse.Namespace) -> Operation:
    """Pick the operation for *args*; earlier flags in this order win."""
    if args.help:
        return Operation.HELP
    if args.version:
        return Operation.VERSION
    if args.compress:
        return Operation.COMPRESS
    if args.decompress:
        return Operation.DECOMPRESS
    if args.add:
        return Operation.ADD
    return Operation.UNSPECIFIED


def _require_output(args: argparse.Namespace, operation: Operation) -> str:
    if args.output is None:
        raise MissingArgumentError(f"--{operation.value} requires -o/--output")
    return args.output


def _require_single_input(args: argparse.Namespace, operation: Operation) -> str:
    if not args.input:
        raise MissingArgumentError(f"--{operation.value} requires -i/--input")
    if len(args.input) > 1:
        raise MissingArgumentError(
            f"--{operation.value} takes exactly one -i/--input value, got {len(args.input)}"
        )
    return args.input[0]


def _cmd_compress(inputs: List[str], output: str) -> None:
    """Compress *inputs* into *output*, warning about each missing input."""
    result = compress_files(
        inputs,
        output,
        missing_callback=lambda path: _print_warning(f"Skipping missing file: {path}"),
        excluded_callback=lambda path: _print_warning(f"Skipping the output archive itself: {path}"),
    )
    line = f"Compressed {result.count} file(s) into {result.output}"
    skipped = len(result.skipped) + len(result.excluded)
    if skipped:
        line += f" ({skipped} skipped)"
    print(line)


def _cmd_decompress(archive: str, output_dir: str) -> None:
    """Extract *archive* into *output_dir*."""
    decompress_files(archive, output_dir)
    print(f"Extracted contents of {archive} to {output_dir}")


def _cmd_add(archive: str, file_path: str) -> None:
    """Append *file_path* to *archive*."""
    add_file(archive, file_path)
    print(f"Added {file_path} to {archive}")


def main(argv: Optional[List[str]] = None) -> None:
    """
    Entry point for the TART CLI.

    This function is invoked when running:

        python -m tart ...

    or, via the console script:

        tart ...
    """
    if argv is None:
        argv = sys.argv[1:]

    # Help wins over everything else, including flags argparse would reject.
    if "-h" in argv or "--help" in argv:
        print(USAGE)
        return

    parser = _build_parser()
    args = parser.parse_args(argv)
    operation = _resolve_operation(args)

    try:
        if operation is Operation.HELP:
            print(USAGE)
        elif operation is Operation.VERSION:
            print(f"{PROG_NAME} {__version__}")
        elif operation is Operation.COMPRESS:
            output = _require_output(args, operation)
            _cmd_compress(args.input or [], output)
        elif operation is Operation.DECOMPRESS:
            archive = _require_single_input(args, operation)
            _cmd_decompress(archive, _require_output(args, operation))
        elif operation is Operation.ADD:
            # -i names the archive, -o names the file to add.
            archive = _require_single_input(args, operation)
            _cmd_add(archive, _require_output(args, operation))
        elif operation is Operation.UNSPECIFIED:
            raise UnspecifiedOperationError(
                "An operation must be specified: use -c/--compress, -d/--decompress or -a/--add"
            )
    except TartUsageError as e:
        _print_error(str(e), exit_code=EXIT_USAGE, suggestion=f"Run '{PROG_NAME} --help' for usage.")
    except TartError as e:
        _print_error(str(e), exit_code=EXIT_FAILURE)
    except FileNotFoundError as e:
        file_path = e.filename if e.filename is not None else str(e)
        suggestion = f"Check that the file exists and the path is correct: {file_path}"
        _print_error(f"File not found: {file_path}", exit_code=EXIT_USAGE, suggestion=suggestion)
    except PermissionError as e:
        file_path = e.filename if e.filename is not None else str(e)
        suggestion = "Check file permissions. You may need to run with appropriate permissions or change file permissions."
        _print_error(f"Permission denied: {file_path}", exit_code=EXIT_USAGE, suggestion=suggestion)
    except OSError as e:
        _print_error(f"I/O error: {e}", exit_code=EXIT_FAILURE)
    except KeyboardInterrupt:
        _print_error("Interrupted by user", exit_code=EXIT_INTERRUPTED)


if __name__ == "__main__":
    main()
