"""
Internationalization (i18n) module for the BMFont to Lua Converter.

Every user-visible string goes through here: window text as well as the
conversion diagnostics raised by the core.

Usage:
    from .i18n import tr, set_language, get_available_languages

    # Get translated string
    label = tr("menu.file")  # Returns "&File" or "&Arquivo" based on current language

    # Change language
    set_language("pt_BR")
"""

from typing import Any, Optional

from .translations import TRANSLATIONS, LANGUAGES

# Current language (default: English)
_current_language = "en"


def set_language(lang_code: str) -> bool:
    """
    Set the current language.

    Args:
        lang_code: Language code (e.g., "en", "pt_BR")

    Returns:
        True if language was set successfully, False if not available
    """
    global _current_language
    if lang_code in TRANSLATIONS:
        _current_language = lang_code
        return True
    return False


def get_language() -> str:
    """Get the current language code."""
    return _current_language


def get_available_languages() -> dict:
    """
    Get all available languages.

    Returns:
        Dict of {code: display_name} for each language
    """
    return LANGUAGES.copy()


def _lookup(translations: dict, keys: list) -> Optional[Any]:
    value = translations
    for k in keys:
        if isinstance(value, dict):
            value = value.get(k)
        else:
            return None
    return value


def tr(key: str, **kwargs) -> str:
    """
    Get translated string for a key.

    Args:
        key: Translation key using dot notation (e.g., "menu.file")
        **kwargs: Format arguments for string interpolation

    Returns:
        Translated string, or the key itself if not found

    Example:
        tr("diagnostic.invalid_char_metrics", id=66)
        # Returns "Character data for 66 is missing or invalid."
    """
    keys = key.split(".")
    value = _lookup(TRANSLATIONS.get(_current_language, TRANSLATIONS["en"]), keys)

    # Fallback to English if not found
    if value is None and _current_language != "en":
        value = _lookup(TRANSLATIONS["en"], keys)

    # Return key if still not found
    if not isinstance(value, str):
        return key

    if kwargs:
        try:
            return value.format(**kwargs)
        except (KeyError, ValueError):
            return value

    return value
