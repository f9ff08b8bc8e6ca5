import os
import sys
from pathlib import Path

import pytest
from PIL import ExifTags, Image

# Ensure repo root is on sys.path for test discovery
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

CANON_TAGS = {
    "model": "Canon EOS 5D Mark IV",
    "serial": "025021000537",
    "orientation": 1,
    "modified": "2020:08:14 12:04:00",
    "original": "2019:07:26 13:25:33",
    "digitized": "2019:07:26 13:25:33",
}


def write_exif_jpeg(path: Path, **tags) -> Path:
    """Write a small JPEG carrying the given EXIF tags (keys as in CANON_TAGS)."""
    exif = Image.Exif()
    if tags.get("model") is not None:
        exif[ExifTags.Base.Model] = tags["model"]
    if tags.get("orientation") is not None:
        exif[ExifTags.Base.Orientation] = tags["orientation"]
    if tags.get("modified") is not None:
        exif[ExifTags.Base.DateTime] = tags["modified"]

    sub = {}
    if tags.get("original") is not None:
        sub[ExifTags.Base.DateTimeOriginal] = tags["original"]
    if tags.get("digitized") is not None:
        sub[ExifTags.Base.DateTimeDigitized] = tags["digitized"]
    if tags.get("serial") is not None:
        sub[ExifTags.Base.BodySerialNumber] = tags["serial"]
    if sub:
        exif[ExifTags.IFD.Exif] = sub

    im = Image.new("RGB", (32, 24), color="red")
    im.save(path, "JPEG", exif=exif)
    return path


@pytest.fixture
def data_dir(tmp_path: Path) -> Path:
    path = tmp_path / "data"
    path.mkdir()
    return path


@pytest.fixture
def canon_jpeg(data_dir: Path) -> Path:
    return write_exif_jpeg(data_dir / "JAM19896.jpg", **CANON_TAGS)


@pytest.fixture
def make_jpeg():
    return write_exif_jpeg
