"""Convert a single image file to PNG and remove the original."""

import logging
import os
from collections.abc import Callable
from contextlib import closing
from pathlib import Path

from topng.core.errors import InputFileNotFoundError, UnsupportedFileTypeError
from topng.core.formats import FileKind, classify_extension, file_extension
from topng.core.image.importer import import_image
from topng.core.image.optimize import destination_path, save_png
from topng.core.shapes import ConversionResult

logger = logging.getLogger(__name__)


def validate_input(input_path: str | Path) -> FileKind:
    """Check that input_path is an existing file with a supported extension."""
    if not Path(input_path).is_file():
        raise InputFileNotFoundError(input_path)

    kind = classify_extension(input_path)
    if kind is FileKind.UNSUPPORTED:
        raise UnsupportedFileTypeError(file_extension(input_path))
    return kind


def convert_file(
    input_path: str | Path,
    notify: Callable[[str], None] | None = None,
) -> ConversionResult:
    """Re-encode input_path as a PNG beside it, then delete the original.

    Decode and write errors propagate unchanged and leave the original in place.
    When the destination is the source itself (an existing .png), the file is
    rewritten in place and not deleted.
    """
    source = Path(input_path)
    kind = validate_input(input_path)

    with closing(import_image(source)) as img:
        save_path = destination_path(source)
        if notify is not None:
            notify(f"Saving to {save_path}")
        save_png(img, save_path)

    if source.exists() and os.path.samefile(source, save_path):
        logger.info(f"Source {source} was rewritten in place, keeping it")
        source_deleted = False
    else:
        source.unlink()
        logger.info(f"Removed original {source}")
        source_deleted = True

    return ConversionResult(
        source=source,
        destination=save_path,
        kind=kind,
        source_deleted=source_deleted,
    )
