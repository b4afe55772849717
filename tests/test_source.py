from __future__ import annotations

from pathlib import Path

import pytest

from inidoc import IniFileOpenError, LineSource
from inidoc.ini.source import decode_bytes


def test_lines_are_numbered_and_filtered():
    text = "; header\n\n  [s]  \nk=v\r\n   ; indented comment\n#kept\n"
    with LineSource.from_string(text) as src:
        lines = list(src)
        assert src.lineno == 6
    assert lines == [(3, "[s]"), (4, "k=v"), (6, "#kept")]


def test_close_is_idempotent():
    src = LineSource.from_string("k=v\n")
    src.close()
    src.close()
    assert src.closed


def test_open_missing_file(tmp_path: Path):
    with pytest.raises(IniFileOpenError) as exc:
        LineSource.open(tmp_path / "nope.ini")
    assert exc.value.path.endswith("nope.ini")
    assert isinstance(exc.value, OSError)


def test_open_reads_file(tmp_path: Path):
    path = tmp_path / "a.ini"
    path.write_bytes("[s]\nname=Zoë\n".encode("utf-8"))
    with LineSource.open(path, "utf-8") as src:
        assert str(src) == str(path)
        assert list(src) == [(1, "[s]"), (2, "name=Zoë")]


def test_decode_drops_bom():
    raw = "\ufeff[s]\nk=v\n".encode("utf-8")
    assert decode_bytes(raw).startswith("[s]")
    assert decode_bytes(raw, "utf-8").startswith("[s]")


def test_decode_with_explicit_codec():
    raw = "[s]\nname=中文\n".encode("gbk")
    assert decode_bytes(raw, "gbk") == "[s]\nname=中文\n"


def test_decode_bad_codec_falls_back():
    assert decode_bytes(b"k=v\n", "no-such-codec") == "k=v\n"
