import logging
import os
import tempfile
from pathlib import Path

from PIL import Image as PILImage
from PIL import ImageCms

logger = logging.getLogger(__name__)

# Pillow is dropping 32-bit "I" PNG output, so wide integer and float data goes to I;16
PNG_MODES = {"1", "L", "LA", "I;16", "P", "RGB", "RGBA"}

# Modes PNG cannot hold, mapped to the closest one it can
_MODE_FALLBACKS = {
    "PA": "RGBA",
    "La": "LA",
    "RGBa": "RGBA",
    "RGBX": "RGB",
    "CMYK": "RGB",
    "YCbCr": "RGB",
    "HSV": "RGB",
    "LAB": "RGB",
    "I": "I;16",
    "F": "I;16",
    "I;16B": "I;16",
    "I;16L": "I;16",
    "I;16N": "I;16",
}


def _lab_to_rgb(image: PILImage.Image) -> PILImage.Image:
    # Image.convert only copies bands for LAB; go through a colour transform
    transform = ImageCms.buildTransform(
        ImageCms.createProfile("LAB"), ImageCms.createProfile("sRGB"), "LAB", "RGB"
    )
    return ImageCms.applyTransform(image, transform)


def to_png_compatible(image: PILImage.Image) -> PILImage.Image:
    """Return image unchanged if PNG can store its mode, else a converted copy."""
    if image.mode in PNG_MODES:
        return image

    target = _MODE_FALLBACKS.get(image.mode, "RGBA" if "A" in image.getbands() else "RGB")
    logger.debug(f"Converting {image.mode} image to {target} for PNG")

    if image.mode == "LAB":
        return _lab_to_rgb(image)
    if target == "I;16":
        # No direct route from F or the byte-swapped 16-bit modes; widen to I first
        if image.mode != "I":
            image = image.convert("I")
        return image.convert("I;16")
    return image.convert(target)


def destination_path(input_path: str | Path) -> Path:
    """Same directory, same stem, .png extension."""
    return Path(input_path).with_suffix(".png")


def save_png(image: PILImage.Image, output_path: str | Path) -> Path:
    """Write image as PNG at output_path.

    The data is written to a temporary file beside the destination, flushed to disk
    and then moved into place, so output_path is never left half written.
    """
    output_file = Path(output_path)
    png_image = to_png_compatible(image)

    fd, tmp_name = tempfile.mkstemp(
        prefix=f".{output_file.stem}_", suffix=".png.tmp", dir=output_file.parent
    )
    try:
        with os.fdopen(fd, "wb") as f:
            png_image.save(f, "PNG")
            f.flush()
            os.fsync(f.fileno())
        # mkstemp creates 0600 files; give the output normal permissions
        umask = os.umask(0)
        os.umask(umask)
        os.chmod(tmp_name, 0o666 & ~umask)
        os.replace(tmp_name, output_file)
    except BaseException:
        Path(tmp_name).unlink(missing_ok=True)
        raise
    finally:
        if png_image is not image:
            png_image.close()

    return output_file
