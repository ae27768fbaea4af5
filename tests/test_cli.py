from pathlib import Path

import pytest

from conftest import entry_names
from tart import __version__
from tart.__main__ import Operation, _build_parser, _resolve_operation, main
from tart.constants import EXIT_FAILURE, EXIT_USAGE


def _exit_code(argv: list[str]) -> int:
    with pytest.raises(SystemExit) as excinfo:
        main(argv)
    return excinfo.value.code


@pytest.mark.parametrize(
    "argv, expected",
    [
        (["-h", "-c", "-o", "x"], Operation.HELP),
        (["-V", "-c"], Operation.VERSION),
        (["-c", "-d", "-a"], Operation.COMPRESS),
        (["-d", "-a"], Operation.DECOMPRESS),
        (["--add"], Operation.ADD),
        (["-i", "x", "-o", "y"], Operation.UNSPECIFIED),
    ],
)
def test_resolve_operation_precedence(argv, expected):
    args = _build_parser().parse_args(argv)
    assert _resolve_operation(args) is expected


def test_help_prints_usage_without_touching_files(workdir: Path, capsys):
    main(["--help", "-c", "-i", "a.txt", "-o", "out.tar.gz"])

    out = capsys.readouterr().out
    assert "SYNOPSIS" in out
    assert "-a, --add" in out
    assert not (workdir / "out.tar.gz").exists()


def test_help_ignores_flags_argparse_would_reject(workdir: Path, capsys):
    main(["-h", "--bogus"])

    assert "tart - Compress and decompress" in capsys.readouterr().out


def test_version(capsys):
    main(["--version"])

    assert capsys.readouterr().out.strip() == f"tart {__version__}"


def test_no_operation_exits_non_zero(workdir: Path, capsys):
    assert _exit_code(["-i", "a.txt", "-o", "out.tar.gz"]) == EXIT_USAGE

    err = capsys.readouterr().err
    assert "operation must be specified" in err
    assert not (workdir / "out.tar.gz").exists()


def test_no_arguments_at_all_exits_non_zero(capsys):
    assert _exit_code([]) == EXIT_USAGE
    assert "operation must be specified" in capsys.readouterr().err


def test_compress_example_skips_missing_file(workdir: Path, capsys):
    main(["-c", "-i", "a.txt", "missing.txt", "b.txt", "-o", "out.tar.gz"])

    captured = capsys.readouterr()
    assert captured.err.count("tart: warning:") == 1
    assert "missing.txt" in captured.err
    assert "Compressed 2 file(s) into out.tar.gz (1 skipped)" in captured.out
    assert entry_names(workdir / "out.tar.gz") == ["a.txt", "b.txt"]


def test_compress_without_inputs_is_allowed(workdir: Path, capsys):
    main(["--compress", "--output", "empty.tar.gz"])

    assert "Compressed 0 file(s) into empty.tar.gz" in capsys.readouterr().out
    assert entry_names(workdir / "empty.tar.gz") == []


def test_compress_without_output_is_usage_error(workdir: Path, capsys):
    assert _exit_code(["-c", "-i", "a.txt"]) == EXIT_USAGE
    assert "requires -o/--output" in capsys.readouterr().err


@pytest.mark.parametrize("flag", ["-d", "-a"])
def test_single_input_operations_require_input(workdir: Path, capsys, flag):
    assert _exit_code([flag, "-o", "somewhere"]) == EXIT_USAGE
    assert "requires -i/--input" in capsys.readouterr().err


@pytest.mark.parametrize("flag", ["-d", "-a"])
def test_single_input_operations_require_output(workdir: Path, capsys, flag):
    assert _exit_code([flag, "-i", "out.tar.gz"]) == EXIT_USAGE
    assert "requires -o/--output" in capsys.readouterr().err


def test_decompress_rejects_several_inputs(workdir: Path, capsys):
    assert _exit_code(["-d", "-i", "a.tar.gz", "b.tar.gz", "-o", "dir"]) == EXIT_USAGE
    assert "exactly one" in capsys.readouterr().err


def test_decompress_round_trip(workdir: Path, capsys):
    main(["-c", "-i", "a.txt", "sub/c.bin", "-o", "out.tar.gz"])
    main(["-d", "-i", "out.tar.gz", "-o", "extracted"])

    assert "Extracted contents of out.tar.gz to extracted" in capsys.readouterr().out
    assert (workdir / "extracted" / "a.txt").read_bytes() == b"alpha\n"
    assert (workdir / "extracted" / "sub" / "c.bin").read_bytes() == (workdir / "sub" / "c.bin").read_bytes()


def test_decompress_missing_archive_reports_file_not_found(workdir: Path, capsys):
    assert _exit_code(["-d", "-i", "missing.tar.gz", "-o", "extracted"]) == EXIT_USAGE

    err = capsys.readouterr().err
    assert "tart: error: File not found: missing.tar.gz" in err
    assert not (workdir / "extracted").exists()


def test_decompress_non_archive_reports_error(workdir: Path, capsys):
    assert _exit_code(["-d", "-i", "a.txt", "-o", "extracted"]) == EXIT_FAILURE

    assert "tart: error:" in capsys.readouterr().err
    assert not (workdir / "extracted").exists()


def test_add_uses_input_as_archive_and_output_as_file(workdir: Path, capsys):
    main(["-c", "-i", "a.txt", "-o", "out.tar.gz"])
    main(["-a", "-i", "out.tar.gz", "-o", "b.txt"])
    main(["-d", "-i", "out.tar.gz", "-o", "extracted"])

    assert "Added b.txt to out.tar.gz" in capsys.readouterr().out
    assert (workdir / "extracted" / "a.txt").read_bytes() == b"alpha\n"
    assert (workdir / "extracted" / "b.txt").read_bytes() == b"bravo bravo\n"


def test_add_to_missing_archive_reports_file_not_found(workdir: Path, capsys):
    assert _exit_code(["-a", "-i", "missing.tar.gz", "-o", "a.txt"]) == EXIT_USAGE
    assert "File not found: missing.tar.gz" in capsys.readouterr().err


def test_help_abbreviation_is_not_accepted(workdir: Path, capsys):
    assert _exit_code(["--hel", "-c", "-o", "out.tar.gz"]) == EXIT_USAGE

    assert "unrecognized arguments: --hel" in capsys.readouterr().err
    assert not (workdir / "out.tar.gz").exists()


def test_compress_warns_when_output_is_among_inputs(workdir: Path, capsys):
    (workdir / "out.tar.gz").write_bytes(b"old")

    main(["-c", "-i", "a.txt", "out.tar.gz", "-o", "out.tar.gz"])

    captured = capsys.readouterr()
    assert "tart: warning: Skipping the output archive itself: out.tar.gz" in captured.err
    assert "Compressed 1 file(s) into out.tar.gz (1 skipped)" in captured.out
    assert entry_names(workdir / "out.tar.gz") == ["a.txt"]


def test_compress_parent_relative_input_fails(workdir: Path, monkeypatch: pytest.MonkeyPatch, capsys):
    monkeypatch.chdir(workdir / "sub")

    assert _exit_code(["-c", "-i", "../a.txt", "-o", "out.tar.gz"]) == EXIT_FAILURE

    assert "entry names may not contain '..'" in capsys.readouterr().err
    assert not (workdir / "sub" / "out.tar.gz").exists()
