from io import StringIO
from pathlib import Path

import pytest

from pyoxrmc.ini import IniParser, InvalidIniRecord, write_profile_string


def test_readstream_keeps_sections_and_duplicates():
    doc = IniParser.readstream(StringIO(
        "stray=1\n"
        "[Translation]\n"
        "; comment\n"
        "# another comment\n"
        "Enabled = 1 ; inline\n"
        "Enabled=0\n"
        "\n"
        "[ Rotation ]\n"
        "Axis=\n"
    ))

    assert list(doc) == ["Translation", "Rotation"]
    assert doc["Translation"].keys() == ["Enabled", "Enabled"]
    assert [p.value for p in doc["Translation"]] == ["1", "0"]
    assert doc["Translation"][0].lineno == 5
    assert doc["Rotation"][0].value == ""
    assert doc.header.keys() == ["stray"]


def test_readstream_merges_repeated_section_headers():
    doc = IniParser.readstream(StringIO("[A]\nx=1\n[B]\ny=2\n[A]\nz=3\n"))

    assert len(doc) == 2
    assert doc["A"].keys() == ["x", "z"]


@pytest.mark.parametrize("text", ["[Broken\nx=1\n", "[A]\njust words\n", "[A]\n=1\n"])
def test_readstream_rejects_malformed_lines(text):
    with pytest.raises(InvalidIniRecord) as exc:
        IniParser.readstream(StringIO(text))
    assert exc.value.lineno in (1, 2)


def test_read_file_with_bom_and_non_utf8_bytes(tmp_path: Path):
    bom = tmp_path / "bom.ini"
    bom.write_bytes(b"\xef\xbb\xbf[Section]\nkey=value\n")
    assert IniParser(bom).read()["Section"][0] == ("key", "value", 2)

    legacy = tmp_path / "legacy.ini"
    legacy.write_bytes("[Section]\nname=Caf\xe9 d\xe9j\xe0 vu\n".encode("cp1252"))
    doc = IniParser(legacy).read()
    assert doc["Section"].keys() == ["name"]


def test_read_missing_file_raises_oserror(tmp_path: Path):
    with pytest.raises(OSError):
        IniParser(tmp_path / "nope.ini").read()


def test_read_error_names_the_file(tmp_path: Path):
    bad = tmp_path / "bad.ini"
    bad.write_text("[oops\n", encoding="utf-8")
    with pytest.raises(InvalidIniRecord, match="bad.ini") as exc:
        IniParser(bad).read()
    assert exc.value.filename == str(bad)
    assert exc.value.lineno == 1


def test_write_replaces_value_in_place(tmp_path: Path):
    ini = tmp_path / "App.ini"
    ini.write_text(
        "; keep me\n[translation]\nenabled=1\nfactor=2\n\n[Other]\nenabled=5\n",
        encoding="utf-8",
    )

    assert write_profile_string("Translation", "Enabled", "0", ini) != 0

    assert ini.read_text(encoding="utf-8") == (
        "; keep me\n[translation]\nEnabled=0\nfactor=2\n\n[Other]\nenabled=5\n"
    )


def test_write_appends_key_after_last_pair(tmp_path: Path):
    ini = tmp_path / "App.ini"
    ini.write_text("[A]\nx=1\n\n; trailing\n[B]\ny=2", encoding="utf-8")

    assert write_profile_string("A", "z", "3", ini) == 1
    assert write_profile_string("B", "w", "4", ini) == 1

    assert ini.read_text(encoding="utf-8") == (
        "[A]\nx=1\nz=3\n\n; trailing\n[B]\ny=2\nw=4\n"
    )


def test_write_appends_section_and_creates_file(tmp_path: Path):
    ini = tmp_path / "New.ini"

    assert write_profile_string("X", "Y", "5", ini) == 1
    assert write_profile_string("Z", "k", "v", ini) == 1

    assert ini.read_text(encoding="utf-8") == "[X]\nY=5\n[Z]\nk=v\n"
    assert [p.name for p in tmp_path.iterdir()] == ["New.ini"]


def test_write_keeps_crlf_and_bom(tmp_path: Path):
    ini = tmp_path / "App.ini"
    ini.write_bytes(b"\xef\xbb\xbf[A]\r\nx=1\r\n")

    assert write_profile_string("A", "x", "2", ini) == 1

    assert ini.read_bytes() == b"\xef\xbb\xbf[A]\r\nx=2\r\n"


def test_write_into_missing_folder_fails(tmp_path: Path):
    assert write_profile_string("A", "x", "1", tmp_path / "missing" / "App.ini") == 0


def test_writer_matches_keys_case_insensitively_unlike_reader(tmp_path: Path):
    ini = tmp_path / "App.ini"
    ini.write_text("[A]\nX=1\nx=2\n", encoding="utf-8")
    assert IniParser(ini).read()["A"].keys() == ["X", "x"]

    assert write_profile_string("a", "x", "5", ini) == 1

    # like WritePrivateProfileString: the first match is rewritten.
    assert ini.read_text(encoding="utf-8") == "[A]\nx=5\nx=2\n"


def test_semicolon_in_value_is_cut_on_read(tmp_path: Path):
    ini = tmp_path / "App.ini"

    assert write_profile_string("A", "keys", "CTRL;SHIFT", ini) == 1

    assert ini.read_text(encoding="utf-8") == "[A]\nkeys=CTRL;SHIFT\n"
    assert IniParser(ini).read()["A"][0].value == "CTRL"
