"""
BMFont Parser - Bitmap font descriptor parser

Parses BMFont-style descriptors (.xml, .fnt or .txt holding XML-like
markup) into a font record: the font size from <info> and one metrics
entry per <char .../> element.

The document is treated as a flat token stream rather than a tree, so
hand-edited files with odd indentation or line breaks parse the same.
"""

import logging
import re
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Dict, List, Mapping, Optional, Tuple

from ..i18n import tr

logger = logging.getLogger("BMFONT.core")

# Largest id a single 16-bit code unit can hold
CODE_UNIT_MASK = 0xFFFF

_WHITESPACE_RE = re.compile(r"\s+")
_INFO_RE = re.compile(r"<info([^>]+)>")
_INFO_FIELDS_RE = re.compile(r"face=|charset=|padding=|spacing=")
_CHAR_RE = re.compile(r"<char(\s[^>]*)/>")
_CHARS_RE = re.compile(r"<chars([^>]*)>")

# (attribute name in the descriptor, CharacterMetrics field)
METRIC_ATTRIBUTES = (
    ("width", "width"),
    ("height", "height"),
    ("x", "x"),
    ("y", "y"),
    ("xoffset", "x_offset"),
    ("yoffset", "y_offset"),
    ("xadvance", "x_advance"),
)


class ConversionError(ValueError):
    """Base class for descriptor conversion failures.

    The message is looked up from the ``diagnostic`` translation table,
    so ``str(error)`` is already localized.
    """
    key: str = ""

    def __init__(self, **params):
        self.params = params
        super().__init__(tr(self.key, **params))


class MissingInfoElement(ConversionError):
    key = "diagnostic.missing_info"


class MalformedInfoElement(ConversionError):
    key = "diagnostic.malformed_info"


class InvalidSizeAttribute(ConversionError):
    key = "diagnostic.invalid_size"


class InvalidCharacterId(ConversionError):
    key = "diagnostic.invalid_char_id"

    def __init__(self, tag: str):
        self.tag = tag
        super().__init__(tag=tag)


class InvalidCharacterMetrics(ConversionError):
    key = "diagnostic.invalid_char_metrics"

    def __init__(self, char_id: int):
        self.char_id = char_id
        super().__init__(id=char_id)


class CharacterCountMismatch(ConversionError):
    key = "diagnostic.count_mismatch"


class MissingCharsCount(ConversionError):
    key = "diagnostic.missing_chars_count"


class NoCharacterData(ConversionError):
    key = "diagnostic.no_character_data"


class ConversionErrors(ConversionError):
    """Every character entry error found when not failing fast."""
    key = "diagnostic.entry_errors"

    def __init__(self, errors: List[ConversionError]):
        self.errors = list(errors)
        super().__init__(count=len(self.errors), errors="\n".join(str(e) for e in self.errors))


@dataclass(frozen=True)
class CharacterMetrics:
    """Atlas rectangle and layout metrics for one glyph."""
    width: int
    height: int
    x: int
    y: int
    x_offset: int
    y_offset: int
    x_advance: int


@dataclass(frozen=True)
class FontDescriptor:
    """A parsed font: size plus glyph metrics keyed by character."""
    size: int
    characters: Mapping[str, CharacterMetrics] = field(default_factory=dict)

    def __post_init__(self):
        # Read-only view over a private copy
        object.__setattr__(self, "characters", MappingProxyType(dict(self.characters)))


def normalize_text(text: str) -> str:
    """Collapse every whitespace run to one space and trim both ends."""
    return _WHITESPACE_RE.sub(" ", text).strip()


def extract_integer(fragment: str, attribute: str) -> Optional[int]:
    """
    Read a double-quoted signed integer attribute from a markup fragment.

    Only ``fragment`` is searched, so an attribute of the same name on
    another element is never picked up.

    Returns:
        The integer value, or None when the attribute is missing,
        empty or not a plain decimal number.
    """
    match = re.search(re.escape(attribute) + r'\s*=\s*"(-?[0-9]+)"', fragment)
    if match is None:
        return None
    try:
        return int(match.group(1))
    except ValueError:
        # Digit runs past the interpreter's int conversion limit
        return None


def decode_character_id(char_id: int) -> str:
    """Turn a character id into its single 16-bit code unit."""
    return chr(char_id & CODE_UNIT_MASK)


def parse_info(text: str) -> int:
    """Return the font size declared by the first <info> element."""
    match = _INFO_RE.search(text)
    if match is None:
        raise MissingInfoElement()

    attributes = match.group(1)
    size = extract_integer(attributes, "size")
    if size is None:
        # No usual descriptor attribute at all: wrong element, not a bad field
        if not _INFO_FIELDS_RE.search(attributes):
            raise MalformedInfoElement()
        raise InvalidSizeAttribute()
    return size


def _parse_character(match: re.Match) -> Tuple[str, CharacterMetrics]:
    attributes = match.group(1)

    char_id = extract_integer(attributes, "id")
    if char_id is None:
        raise InvalidCharacterId(match.group(0))

    values = {}
    for attribute, name in METRIC_ATTRIBUTES:
        value = extract_integer(attributes, attribute)
        if value is None:
            raise InvalidCharacterMetrics(char_id)
        values[name] = value

    return decode_character_id(char_id), CharacterMetrics(**values)


def parse_characters(text: str, fail_fast: bool = True) -> Dict[str, CharacterMetrics]:
    """
    Parse every <char .../> entry in document order.

    A repeated character keeps the metrics of its last entry and moves to
    that entry's position.

    Args:
        text: Normalized descriptor text
        fail_fast: Stop at the first invalid entry. When False, all entries
            are checked and the errors are raised together as
            ConversionErrors.
    """
    characters: Dict[str, CharacterMetrics] = {}
    errors: List[ConversionError] = []

    for match in _CHAR_RE.finditer(text):
        try:
            char, metrics = _parse_character(match)
        except ConversionError as e:
            if fail_fast:
                raise
            errors.append(e)
            continue

        characters.pop(char, None)
        characters[char] = metrics

    if errors:
        raise ConversionErrors(errors)
    return characters


def validate_character_count(text: str, characters: Dict[str, CharacterMetrics]) -> None:
    """Check the declared <chars count> when no entry could be parsed."""
    if characters:
        return

    match = _CHARS_RE.search(text)
    if match is None:
        raise NoCharacterData()

    count = extract_integer(match.group(1), "count")
    if count is None or count < 0:
        raise MissingCharsCount()
    if count > 0:
        raise CharacterCountMismatch()


def parse_descriptor(text: str, fail_fast: bool = True) -> FontDescriptor:
    """Parse raw descriptor text into a FontDescriptor."""
    text = normalize_text(text)

    size = parse_info(text)
    characters = parse_characters(text, fail_fast=fail_fast)
    validate_character_count(text, characters)

    logger.debug(f"Parsed descriptor: size {size}, {len(characters)} characters")
    return FontDescriptor(size=size, characters=characters)
