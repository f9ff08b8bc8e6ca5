"""
exif.py

Decode the EXIF block of one image with Pillow and write the handful of
fields we care about to <image directory>/<stem>.json.

  extract_exif_metadata_from_image(Path("data"), "JAM19896.jpg")
  -> data/JAM19896.json
"""

from __future__ import annotations

import datetime as dt
import os
import struct
from pathlib import Path
from typing import Any, BinaryIO, Dict, Optional, Union

from PIL import ExifTags, Image

from export_metadata.core.errors import EmptyStringError, ExifMetadataError, ExportIOError
from export_metadata.core.record import MetadataRecord, output_stem
from export_metadata.utils import console

EXIF_DATETIME_FORMAT = "%Y:%m:%d %H:%M:%S"
DISPLAY_DATETIME_FORMAT = "%Y-%m-%d %H:%M:%S"

# record field -> EXIF tag
TEXT_TAGS = {
    "camera_model": ExifTags.Base.Model,
    "serial_number": ExifTags.Base.BodySerialNumber,
}
DATETIME_TAGS = {
    "created_time": ExifTags.Base.DateTimeDigitized,
    "modified_time": ExifTags.Base.DateTime,
    "capture_time": ExifTags.Base.DateTimeOriginal,
}
ORIENTATION_TAG = ExifTags.Base.Orientation


# ---------- value helpers ----------

def _text(value: Any) -> Optional[str]:
    if value is None:
        return None
    if isinstance(value, (tuple, list)):
        if not value:
            return None
        value = value[0]
    if isinstance(value, bytes):
        value = value.decode("utf-8", errors="replace")
    return str(value).strip(" \x00\t\r\n")


def _datetime_text(value: Any) -> Optional[str]:
    text = _text(value)
    if text is None:
        return None
    try:
        return dt.datetime.strptime(text, EXIF_DATETIME_FORMAT).strftime(DISPLAY_DATETIME_FORMAT)
    except ValueError:
        return text


def _uint(value: Any) -> Optional[int]:
    if isinstance(value, (tuple, list)):
        if not value:
            return None
        value = value[0]
    if value is None or isinstance(value, bool):
        return None
    try:
        number = int(value)
    except (TypeError, ValueError):
        return None
    return number if number >= 0 else None


# ---------- decoding ----------

def read_exif_tags(fh: BinaryIO) -> Dict[int, Any]:
    """
    Primary IFD tags merged over the Exif sub-IFD tags.
    Raises ExifMetadataError when the file is not a readable image or has no EXIF block.
    """
    try:
        with Image.open(fh) as im:
            exif = im.getexif()
            if not exif:
                raise ExifMetadataError("no EXIF block")
            tags: Dict[int, Any] = dict(exif.get_ifd(ExifTags.IFD.Exif))
            tags.update(exif.items())
    except ExifMetadataError:
        raise
    except (OSError, SyntaxError, ValueError, EOFError, struct.error, Image.DecompressionBombError) as exc:
        raise ExifMetadataError(str(exc)) from exc
    return tags


def parse_metadata(tags: Dict[int, Any]) -> Dict[str, Any]:
    """Project the six known tags; anything missing becomes None."""
    fields: Dict[str, Any] = {}
    for key, tag in TEXT_TAGS.items():
        fields[key] = _text(tags.get(tag))
    for key, tag in DATETIME_TAGS.items():
        fields[key] = _datetime_text(tags.get(tag))
    fields["orientation"] = _uint(tags.get(ORIENTATION_TAG))
    return fields


def _file_size(fh: BinaryIO, file_name: str) -> Optional[int]:
    try:
        return os.fstat(fh.fileno()).st_size
    except OSError as exc:
        console.warn(f"Can not get image {file_name} size due to metadata error: {exc}")
        return None


# ---------- output ----------

def export_json(directory: Union[str, Path], stem: str, record: MetadataRecord) -> Path:
    json_name = f"{stem}.json"
    json_path = Path(directory) / json_name
    # Serialize first so a failure never truncates an existing file.
    payload = record.to_json()

    try:
        f_out = json_path.open("w", encoding="utf-8")
    except OSError as exc:
        console.warn(f"Can not create file: {json_name}")
        raise ExportIOError(json_name) from exc

    try:
        with f_out:
            f_out.write(payload)
    except OSError as exc:
        console.warn(f"Can not write file: {json_name}")
        raise ExportIOError(json_name) from exc
    return json_path


def extract_exif_metadata_from_image(directory: Union[str, Path], file_name: str) -> MetadataRecord:
    console.info(f"File processing: {file_name}")
    if not file_name:
        console.error("Empty name\n")
        raise EmptyStringError()

    directory = Path(directory)
    image_path = directory / file_name
    try:
        fh = image_path.open("rb")
    except OSError as exc:
        console.warn(f"Can not open file: {file_name}\n")
        raise ExportIOError(file_name) from exc

    with fh:
        try:
            tags = read_exif_tags(fh)
        except ExifMetadataError:
            console.error(f"Can not read exif from image: {file_name}\n")
            raise
        size = _file_size(fh, file_name)

    stem = output_stem(file_name)
    record = MetadataRecord(file_name=stem, size=size, **parse_metadata(tags))
    export_json(directory, stem, record)

    console.ok(f"File succeed {file_name}")
    return record
