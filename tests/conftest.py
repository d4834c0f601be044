"""Pytest configuration and shared fixtures."""

from datetime import date
from pathlib import Path
from typing import Callable, Optional

import pytest

# EXIF tag id for the IFD0 modification timestamp ("Image DateTime")
EXIF_DATETIME = 0x0132


def pytest_configure(config):
    config.addinivalue_line("markers", "integration: tests that write real JPEG files")


@pytest.fixture
def make_jpeg() -> Callable[..., Path]:
    """
    Factory writing a small JPEG, optionally with an EXIF DateTime tag.

    Usage:
        make_jpeg(tmp_path / "a.jpg", "2021:05:04 10:00:00")
    """
    from PIL import Image as PILImage

    def _make(path: Path, datetime_text: Optional[str] = None) -> Path:
        path.parent.mkdir(parents=True, exist_ok=True)
        img = PILImage.new("RGB", (16, 16), color="red")
        if datetime_text is None:
            img.save(path, "JPEG")
        else:
            exif = PILImage.Exif()
            exif[EXIF_DATETIME] = datetime_text
            img.save(path, "JPEG", exif=exif)
        return path

    return _make


@pytest.fixture
def photo_library(tmp_path: Path, make_jpeg) -> Path:
    """
    A small library spanning 2019-2022 with no 2020 photos.

    Layout:
        2019/a.jpg        2019-03-01
        2019/b.JPG        2019-03-01
        2021/c.jpeg       2021-07-15
        2022/d.jpg        2022-12-31
        2022/e.jpg        2022-12-31
        no_exif.jpg       (no EXIF)
        notes.txt         (not an image)
    """
    make_jpeg(tmp_path / "2019" / "b.JPG", "2019:03:01 09:00:00")
    make_jpeg(tmp_path / "2019" / "a.jpg", "2019:03:01 18:30:00")
    make_jpeg(tmp_path / "2021" / "c.jpeg", "2021-07-15 12:00:00")
    make_jpeg(tmp_path / "2022" / "e.jpg", "2022:12:31 23:59:59")
    make_jpeg(tmp_path / "2022" / "d.jpg", "2022:12:31 08:00:00")
    make_jpeg(tmp_path / "no_exif.jpg")
    (tmp_path / "notes.txt").write_text("not a photo")
    return tmp_path


@pytest.fixture
def library_dates() -> dict:
    """Expected capture dates of photo_library, keyed by relative path."""
    return {
        Path("2019/a.jpg"): date(2019, 3, 1),
        Path("2019/b.JPG"): date(2019, 3, 1),
        Path("2021/c.jpeg"): date(2021, 7, 15),
        Path("2022/d.jpg"): date(2022, 12, 31),
        Path("2022/e.jpg"): date(2022, 12, 31),
    }
