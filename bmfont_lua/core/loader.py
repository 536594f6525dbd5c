"""
Descriptor file loading: extension filtering and text decoding.
"""

import logging
import os

from ..i18n import tr
from .converter import ConversionResult, convert

logger = logging.getLogger("BMFONT.core")

SUPPORTED_EXTENSIONS = (".xml", ".fnt", ".txt")


class DescriptorFileError(Exception):
    """A descriptor file could not be used."""


class UnsupportedFileType(DescriptorFileError):
    def __init__(self, path: str):
        self.path = path
        super().__init__(tr("error.invalid_file_type"))


class DescriptorReadError(DescriptorFileError):
    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(tr("error.read_failed", reason=reason))


def is_supported_file(path: str) -> bool:
    """Whether the file name has a descriptor extension (any case)."""
    return os.path.splitext(path)[1].lower() in SUPPORTED_EXTENSIONS


def read_descriptor(path: str) -> str:
    """
    Read a descriptor file as text.

    Args:
        path: Path to a .xml, .fnt or .txt file

    Returns:
        The decoded file contents (UTF-8, BOM removed)

    Raises:
        UnsupportedFileType: Wrong extension
        DescriptorReadError: The file can't be opened or isn't UTF-8 text
    """
    if not is_supported_file(path):
        raise UnsupportedFileType(path)

    try:
        with open(path, "r", encoding="utf-8-sig") as f:
            text = f.read()
    except UnicodeDecodeError as e:
        raise DescriptorReadError(path, str(e)) from e
    except OSError as e:
        raise DescriptorReadError(path, e.strerror or str(e)) from e

    logger.debug(f"Read {len(text)} characters from {path}")
    return text


def convert_file(path: str, fail_fast: bool = True) -> ConversionResult:
    """Read a descriptor file and convert it."""
    return convert(read_descriptor(path), fail_fast=fail_fast)
