from __future__ import annotations

from pathlib import Path

import pytest

from inidoc import IniDocument, IniFormatError, IniYamlParser, loads


def test_yaml_round_trip(tmp_path: Path):
    path = tmp_path / "doc.yaml"
    doc = loads("top=1\n[net]\nhost=example.org\nflag=yes\nurl=a=b\n[empty]\n")

    assert IniYamlParser(path).write(doc) is True
    loaded = IniYamlParser(path).read()
    assert list(loaded.items()) == list(doc.items())
    assert "empty" not in path.read_text()


def test_yaml_scalars_become_text(tmp_path: Path):
    path = tmp_path / "doc.yaml"
    path.write_text("Net:\n  Port: 8080\n  Debug: yes\n  Ratio: 0.5\n  Note:\nbare:\n")
    doc = IniYamlParser(path).read()
    assert doc.sections() == ["DEFAULT", "net", "bare"]
    assert doc.get_int("net", "port") == (8080, True)
    assert doc.get_value("net", "debug") == ("true", True)
    assert doc.get_float("net", "ratio") == (0.5, True)
    assert doc.get_value("net", "note") == ("", True)


def test_yaml_respects_document_options(tmp_path: Path):
    path = tmp_path / "doc.yaml"
    path.write_text("Net:\n  Port: 1\n")
    doc = IniYamlParser(path).read(IniDocument(case_sensitive=True))
    assert doc.get_value("Net", "Port") == ("1", True)


@pytest.mark.parametrize(
    "text",
    [
        "- a\n- b\n",
        "net: 1\n",
        "net: [\n",
        "net:\n  hosts: [a, b]\n",
        "net:\n  opts: {x: 1}\n",
        "net:\n  url: a=b\n",
    ],
)
def test_yaml_wrong_shape(tmp_path: Path, text: str):
    path = tmp_path / "doc.yaml"
    path.write_text(text)
    with pytest.raises(IniFormatError):
        IniYamlParser(path).read()


def test_empty_yaml(tmp_path: Path):
    path = tmp_path / "doc.yaml"
    path.write_text("")
    assert IniYamlParser(path).read().sections() == ["DEFAULT"]


def test_null_section_and_key_become_empty_text(tmp_path: Path):
    path = tmp_path / "doc.yaml"
    path.write_text("null:\n  null: 1\n")
    doc = IniYamlParser(path).read()
    assert doc.sections() == ["DEFAULT", ""]
    assert doc.get_value("", "") == ("1", True)
