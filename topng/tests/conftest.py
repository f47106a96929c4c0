from collections.abc import Callable
from pathlib import Path

import pytest
from PIL import Image

from topng.core.bundle import uninstall_resource_loader

# Pillow writer for each extension; ".exif" files are JPEGs carrying EXIF data
SAVE_FORMATS: dict[str, str] = {
    ".bmp": "BMP",
    ".gif": "GIF",
    ".exif": "JPEG",
    ".jpg": "JPEG",
    ".png": "PNG",
    ".tiff": "TIFF",
    ".webp": "WEBP",
}


@pytest.fixture
def make_image(tmp_path: Path) -> Callable[..., Path]:
    """Factory writing a small real image with the given extension into tmp_path."""

    def _make(
        extension: str,
        name: str = "sample",
        size: tuple[int, int] = (4, 3),
        mode: str = "RGB",
    ) -> Path:
        image_path: Path = tmp_path / f"{name}{extension}"
        color = (255, 0, 0, 255)[: len(mode)] if mode in ("RGB", "RGBA") else 0
        img = Image.new(mode, size, color=color)
        img.save(image_path, format=SAVE_FORMATS[extension.lower()])
        return image_path

    return _make


@pytest.fixture
def corrupt_file(tmp_path: Path) -> Callable[[str], Path]:
    def _make(extension: str) -> Path:
        path: Path = tmp_path / f"broken{extension}"
        path.write_bytes(b"this is not image data at all")
        return path

    return _make


@pytest.fixture
def clean_meta_path():
    """Keep the bundle finder from leaking between tests."""
    uninstall_resource_loader()
    yield
    uninstall_resource_loader()


@pytest.fixture
def isolated_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run from tmp_path with no TOPNG_* variables set."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("TOPNG_LOG_LEVEL", raising=False)
    monkeypatch.delenv("TOPNG_PAUSE", raising=False)
    return tmp_path


@pytest.fixture
def assert_valid_png() -> Callable[..., None]:
    def _check(path: Path, size: tuple[int, int] | None = None) -> None:
        assert path.exists()
        with Image.open(path) as img:
            assert img.format == "PNG"
            img.load()
            if size is not None:
                assert img.size == size

    return _check
