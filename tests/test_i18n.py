from bmfont_lua.core.converter import convert_to_lua
from bmfont_lua.i18n import get_available_languages, get_language, set_language, tr
from bmfont_lua.i18n.translations import TRANSLATIONS


def _keys(table, prefix=""):
    keys = set()
    for key, value in table.items():
        if isinstance(value, dict):
            keys |= _keys(value, f"{prefix}{key}.")
        else:
            keys.add(prefix + key)
    return keys


def test_languages_have_same_keys():
    assert _keys(TRANSLATIONS["pt_BR"]) == _keys(TRANSLATIONS["en"])


def test_available_languages():
    assert set(get_available_languages()) == {"en", "pt_BR"}


def test_set_unknown_language():
    assert not set_language("xx")
    assert get_language() == "en"


def test_format_arguments():
    assert tr("diagnostic.invalid_char_metrics", id=7) == "Character data for 7 is missing or invalid."


def test_unknown_key_returns_key():
    assert tr("nope.missing") == "nope.missing"


def test_section_key_returns_key():
    assert tr("diagnostic") == "diagnostic"


def test_format_value_with_braces_is_kept():
    tag = '<char x="{oops}"/>'
    assert tr("diagnostic.invalid_char_id", tag=tag).endswith(tag)


def test_localized_diagnostic():
    assert set_language("pt_BR")
    assert convert_to_lua("<font/>") == "Elemento <info> ausente."
