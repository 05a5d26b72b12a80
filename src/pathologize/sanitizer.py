"""Filename sanitization pipeline.

Turns arbitrary text into a filename that is safe on Windows, macOS, Linux
and FAT-style filesystems at the same time. Every function here is a pure
string transform: no filesystem access, no shared mutable state, and no
input is ever rejected.

Stage order matters. Trailing dots and spaces must be gone before the
reserved-name checks run, otherwise ``"CON."`` would slip through.
"""

from __future__ import annotations

import logging
import os
from typing import AnyStr

from .constants import (
    CHARACTER_FILTER_REGEX,
    DEFAULT_NAME,
    MAX_LENGTH,
    TRAILING_DOTS_AND_SPACES_REGEX,
    canonical_reserved_name,
)

logger = logging.getLogger(__name__)


def clean(filename: str) -> str:
    """Sanitize a single filename.

    Args:
        filename: Untrusted name, e.g. a title or an attachment name.

    Returns:
        Non-empty name with no forbidden characters and no collision with a
        reserved device or metadata name.
    """
    filename = remove_invalid_characters(filename)
    filename = remove_trailing(filename)
    filename = remove_surrounding_spaces(filename)
    filename = remove_reserved_names(filename)
    filename = remove_reserved_with_extension(filename)
    return filename_not_blank(filename)


def is_clean(filename: str) -> bool:
    """Return True if ``filename`` is already a fixed point of :func:`clean`."""
    return clean(filename) == filename


def clean_path(path: str, sep: str | None = None) -> str:
    """Sanitize every segment of ``path`` independently.

    Segments are split on ``sep`` (the host separator by default) and
    rejoined with the same separator. Empty segments become the default
    name, so ``"/tmp"`` yields ``"file/tmp"`` on POSIX hosts.

    Args:
        path: Path whose components should each be safe filenames.
        sep: Separator to split on. Falls back to ``os.sep`` when empty.

    Returns:
        Path with the same number of segments, each one sanitized.
    """
    sep = sep or os.sep
    return sep.join(clean(part) for part in path.split(sep))


def truncate_filename(filename: AnyStr, max_length: int = MAX_LENGTH) -> AnyStr:
    """Cut ``filename`` down to ``max_length`` units.

    Units are code points for ``str`` and bytes for ``bytes``. No attempt is
    made to respect character or grapheme boundaries, so truncating encoded
    text may split a multi-byte sequence. Not part of :func:`clean`.
    """
    if len(filename) > max_length:
        return filename[:max_length]
    return filename


def remove_invalid_characters(filename: str) -> str:
    """Drop control characters and symbols forbidden on any target filesystem."""
    return CHARACTER_FILTER_REGEX.sub("", filename)


def remove_trailing(filename: str) -> str:
    """Strip a trailing run of dots and whitespace, in any mixture."""
    return TRAILING_DOTS_AND_SPACES_REGEX.sub("", filename)


def remove_surrounding_spaces(filename: str) -> str:
    # Interior runs of whitespace are kept as-is
    return filename.strip()


def remove_reserved_names(filename: str) -> str:
    """Defuse an exact, case-insensitive match against a reserved name.

    The canonical spelling is used for the result, so ``"con"`` becomes
    ``"CON_"``. Anything that is not a full-string match is returned as-is.
    """
    reserved = canonical_reserved_name(filename)
    if reserved is None:
        return filename
    logger.debug("Defused reserved name %r -> %r", filename, reserved + "_")
    return reserved + "_"


def remove_reserved_with_extension(filename: str) -> str:
    """Defuse a reserved name that is followed by an extension.

    ``"$Mft.txt"`` becomes ``"$Mft_.txt"``. The extension is kept verbatim.
    """
    base, extension = os.path.splitext(filename)
    new_base = remove_reserved_names(base)
    if new_base != base:
        return new_base + extension
    return filename


def filename_not_blank(filename: str) -> str:
    if not filename:
        logger.debug("Empty name after sanitization, using %r", DEFAULT_NAME)
        return DEFAULT_NAME
    return filename
