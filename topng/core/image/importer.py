"""Decode image files into in-memory Pillow images."""

import io
import logging
from pathlib import Path

from PIL import Image

from topng.core.errors import UnexpectedFileTypeError
from topng.core.formats import DEFAULT_SUPPORTED_FILE_TYPES, file_extension

logger = logging.getLogger(__name__)


def import_image(path: str | Path) -> Image.Image:
    """Decode the image at path according to its extension.

    Pixel data is loaded before returning, so corrupt or truncated files fail here
    rather than during save. The returned image does not keep the source file open.
    """
    file_type = file_extension(path)
    if file_type in DEFAULT_SUPPORTED_FILE_TYPES:
        return _decode_default(path)
    elif file_type == ".webp":
        return decode_webp(path)
    else:
        raise UnexpectedFileTypeError(file_type)


def _decode_default(path: str | Path) -> Image.Image:
    data = Path(path).read_bytes()
    image = Image.open(io.BytesIO(data))
    image.load()
    logger.debug(f"Decoded {path} as {image.format} {image.mode} {image.size}")
    return image


def decode_webp(path: str | Path) -> Image.Image:
    """Decode a WebP file from its raw bytes.

    Decoder errors propagate exactly as Pillow raises them.
    """
    raw_webp = Path(path).read_bytes()
    image = Image.open(io.BytesIO(raw_webp), formats=["WEBP"])
    image.load()
    logger.debug(f"Decoded WebP {path}: {image.mode} {image.size}")
    return image
