"""Cross-platform safe filenames.

Applies the union of Windows, macOS, Linux and FAT filename restrictions so
the result is safe everywhere, not just on the host OS.
"""

from .constants import (
    CHARACTER_FILTER_REGEX,
    DEFAULT_NAME,
    MAX_LENGTH,
    RESERVED_NAMES,
)
from .sanitizer import clean, clean_path, is_clean, truncate_filename
from .version import APP_VERSION

__version__ = APP_VERSION

__all__ = [
    "CHARACTER_FILTER_REGEX",
    "DEFAULT_NAME",
    "MAX_LENGTH",
    "RESERVED_NAMES",
    "clean",
    "clean_path",
    "is_clean",
    "truncate_filename",
]
