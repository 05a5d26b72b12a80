"""Fixed rule tables shared by every sanitization call.

The rule set is the union of the restrictions imposed by Windows, macOS,
Linux and FAT-style filesystems, so a name that passes here is safe on all
of them. See https://en.wikipedia.org/wiki/Filename#Reserved_characters_and_words
"""

from __future__ import annotations

import re

# Control characters plus symbols rejected by at least one target filesystem.
# Some FAT implementations also reject @ and !.
CHARACTER_FILTER = r'[\x00-\x1F\\/:*?"<>|@!]'
CHARACTER_FILTER_REGEX = re.compile(CHARACTER_FILTER)

# Trailing run of dots and whitespace, which Windows drops silently
TRAILING_DOTS_AND_SPACES_REGEX = re.compile(r"[.\s]+\Z")

DOS_RESERVED_NAMES: tuple[str, ...] = (
    "CON",
    "PRN",
    "AUX",
    "NUL",
    "CLOCK$",
    "CONFIG$",
    "SCREEN$",
    "$IDLE$",
    *(f"COM{i}" for i in range(10)),
    *(f"LPT{i}" for i in range(10)),
)

# NTFS metadata files living in the volume root
NTFS_RESERVED_NAMES: tuple[str, ...] = (
    "$Mft",
    "$MftMirr",
    "$LogFile",
    "$Volume",
    "$AttrDef",
    "$Bitmap",
    "$Boot",
    "$BadClus",
    "$Secure",
    "$Upcase",
    "$Extend",
    "$Quota",
    "$ObjId",
    "$Reparse",
)

RESERVED_NAMES: tuple[str, ...] = DOS_RESERVED_NAMES + NTFS_RESERVED_NAMES

# Case-folded lookup back to the canonical spelling
_RESERVED_LOOKUP: dict[str, str] = {name.casefold(): name for name in RESERVED_NAMES}

DEFAULT_NAME = "file"
MAX_LENGTH = 255


def canonical_reserved_name(name: str) -> str | None:
    """Return the canonical spelling of ``name`` if it is reserved, else None.

    Folding is per character: a name whose folded form changes length, such
    as one containing a ligature or ``ß``, never matches.
    """
    folded = name.casefold()
    if len(folded) != len(name):
        return None
    return _RESERVED_LOOKUP.get(folded)
