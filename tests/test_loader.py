import pytest

from bmfont_lua.core.loader import (
    DescriptorReadError,
    UnsupportedFileType,
    convert_file,
    is_supported_file,
    read_descriptor,
)
from bmfont_lua.i18n import set_language


@pytest.mark.parametrize("name", ["font.xml", "font.fnt", "font.txt", "FONT.FNT", "a.b.Xml"])
def test_supported_extensions(name):
    assert is_supported_file(name)


@pytest.mark.parametrize("name", ["font.png", "font", "font.xml.bak", "fnt"])
def test_unsupported_extensions(name):
    assert not is_supported_file(name)


def test_read_descriptor(tmp_path, scenario_a):
    path = tmp_path / "font.fnt"
    path.write_text(scenario_a, encoding="utf-8")
    assert read_descriptor(str(path)) == scenario_a


def test_read_strips_bom(tmp_path, scenario_a):
    path = tmp_path / "font.xml"
    path.write_bytes(b"\xef\xbb\xbf" + scenario_a.encode("utf-8"))
    assert read_descriptor(str(path)) == scenario_a


def test_rejects_extension_before_reading(tmp_path):
    with pytest.raises(UnsupportedFileType) as exc:
        read_descriptor(str(tmp_path / "missing.png"))
    assert str(exc.value) == "Invalid file type. Select .xml, .fnt, or .txt."


def test_missing_file(tmp_path):
    with pytest.raises(DescriptorReadError) as exc:
        read_descriptor(str(tmp_path / "missing.fnt"))
    assert str(exc.value).startswith("Error reading file: ")


def test_undecodable_file(tmp_path):
    path = tmp_path / "font.txt"
    path.write_bytes(b"<info size=\"\xff\xfe\">")
    with pytest.raises(DescriptorReadError):
        read_descriptor(str(path))


def test_convert_file(tmp_path, arial_xml):
    path = tmp_path / "arial.xml"
    path.write_text(arial_xml, encoding="utf-8")
    result = convert_file(str(path))
    assert result.ok
    assert result.font.size == -24
    assert len(result.font.characters) == 3


def test_localized_file_error(tmp_path):
    set_language("pt_BR")
    with pytest.raises(UnsupportedFileType) as exc:
        read_descriptor(str(tmp_path / "font.png"))
    assert str(exc.value) == "Tipo de arquivo inválido. Selecione .xml, .fnt ou .txt."
