"""Supported file types and extension classification."""

from enum import Enum
from pathlib import Path

# BMP, GIF, EXIF, JPG, PNG and TIFF
DEFAULT_SUPPORTED_FILE_TYPES: tuple[str, ...] = (
    ".bmp",
    ".gif",
    ".exif",
    ".jpg",
    ".png",
    ".tiff",
)
EXTENDED_SUPPORTED_FILE_TYPES: tuple[str, ...] = (".webp",)


def concat_types(first: tuple[str, ...], second: tuple[str, ...]) -> tuple[str, ...]:
    """Concatenate two extension sequences, keeping order."""
    return (*first, *second)


SUPPORTED_FILE_TYPES = concat_types(DEFAULT_SUPPORTED_FILE_TYPES, EXTENDED_SUPPORTED_FILE_TYPES)


class FileKind(str, Enum):
    DEFAULT = "default"
    EXTENDED = "extended"
    UNSUPPORTED = "unsupported"


def file_extension(path: str | Path) -> str:
    """Lower-cased suffix of path, or "" when it has none."""
    return Path(path).suffix.lower()


def classify_extension(path: str | Path) -> FileKind:
    extension = file_extension(path)
    if not extension:
        return FileKind.UNSUPPORTED
    if extension in DEFAULT_SUPPORTED_FILE_TYPES:
        return FileKind.DEFAULT
    if extension in EXTENDED_SUPPORTED_FILE_TYPES:
        return FileKind.EXTENDED
    return FileKind.UNSUPPORTED


def is_supported(path: str | Path) -> bool:
    return file_extension(path) in SUPPORTED_FILE_TYPES
