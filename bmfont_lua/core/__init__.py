"""
Core module - BMFont descriptor parsing, validation and Lua serialization.
"""

from .parser import (
    CharacterMetrics,
    FontDescriptor,
    ConversionError,
    ConversionErrors,
    MissingInfoElement,
    MalformedInfoElement,
    InvalidSizeAttribute,
    InvalidCharacterId,
    InvalidCharacterMetrics,
    CharacterCountMismatch,
    MissingCharsCount,
    NoCharacterData,
    normalize_text,
    extract_integer,
    decode_character_id,
    parse_info,
    parse_characters,
    validate_character_count,
    parse_descriptor,
)
from .writer import escape_key, format_character_entry, serialize_font
from .converter import ConversionResult, convert, convert_to_lua
from .loader import (
    SUPPORTED_EXTENSIONS,
    DescriptorFileError,
    UnsupportedFileType,
    DescriptorReadError,
    is_supported_file,
    read_descriptor,
    convert_file,
)

__all__ = [
    "CharacterMetrics",
    "FontDescriptor",
    "ConversionError",
    "ConversionErrors",
    "MissingInfoElement",
    "MalformedInfoElement",
    "InvalidSizeAttribute",
    "InvalidCharacterId",
    "InvalidCharacterMetrics",
    "CharacterCountMismatch",
    "MissingCharsCount",
    "NoCharacterData",
    "normalize_text",
    "extract_integer",
    "decode_character_id",
    "parse_info",
    "parse_characters",
    "validate_character_count",
    "parse_descriptor",
    "escape_key",
    "format_character_entry",
    "serialize_font",
    "ConversionResult",
    "convert",
    "convert_to_lua",
    "SUPPORTED_EXTENSIONS",
    "DescriptorFileError",
    "UnsupportedFileType",
    "DescriptorReadError",
    "is_supported_file",
    "read_descriptor",
    "convert_file",
]
