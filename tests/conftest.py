import tarfile
import zlib
from pathlib import Path

import pytest


@pytest.fixture
def workdir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run the test from inside tmp_path so entry names stay relative."""
    monkeypatch.chdir(tmp_path)
    (tmp_path / "a.txt").write_bytes(b"alpha\n")
    (tmp_path / "b.txt").write_bytes(b"bravo bravo\n")
    (tmp_path / "sub").mkdir()
    (tmp_path / "sub" / "c.bin").write_bytes(bytes(range(256)) * 8)
    return tmp_path


def entry_names(archive: Path) -> list[str]:
    with tarfile.open(archive, "r:gz", ignore_zeros=True) as tar:
        return tar.getnames()


def gzip_member_count(archive: Path) -> int:
    """Count gzip members by decompressing them one at a time."""
    data = archive.read_bytes()
    count = 0
    while data:
        d = zlib.decompressobj(wbits=31)
        d.decompress(data)
        count += 1
        data = d.unused_data
    return count
