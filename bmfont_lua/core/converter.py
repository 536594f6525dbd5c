"""
Converter - Runs the parse and serialize pipeline and reports the outcome.

``convert`` returns a ConversionResult that is either a font with its Lua
output or the ConversionError that stopped it. ``convert_to_lua`` flattens
that to a single string: the table literal (always starting with "{") or
the diagnostic message (never starting with "{").
"""

import logging
from dataclasses import dataclass
from typing import Optional

from .parser import ConversionError, FontDescriptor, parse_descriptor
from .writer import serialize_font

logger = logging.getLogger("BMFONT.core")


@dataclass(frozen=True)
class ConversionResult:
    """Outcome of one conversion: font and output, or an error."""
    font: Optional[FontDescriptor] = None
    output: str = ""
    error: Optional[ConversionError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def to_text(self) -> str:
        """Text for display: the Lua table on success, else the diagnostic."""
        if self.error is not None:
            return str(self.error)
        return self.output


def convert(text: str, fail_fast: bool = True) -> ConversionResult:
    """Convert descriptor text into a ConversionResult."""
    try:
        font = parse_descriptor(text, fail_fast=fail_fast)
    except ConversionError as e:
        logger.debug(f"Conversion failed: {type(e).__name__}")
        return ConversionResult(error=e)

    return ConversionResult(font=font, output=serialize_font(font))


def convert_to_lua(text: str, fail_fast: bool = True) -> str:
    """Convert descriptor text straight to its display string."""
    return convert(text, fail_fast=fail_fast).to_text()
