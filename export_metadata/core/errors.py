from __future__ import annotations


class ExportMetadataError(Exception):
    """Base class for every error this package raises."""

    message = "Export metadata error!"

    def __init__(self, detail: str = "") -> None:
        self.detail = detail
        super().__init__(f"{self.message} {detail}".strip())


class ExportIOError(ExportMetadataError):
    """A file could not be opened, created, read or written."""

    message = "File I/O error!"


class EmptyStringError(ExportMetadataError):
    """An empty image file name reached the extractor."""

    message = "Empty string found!"


class EmptyArgumentError(ExportMetadataError):
    """An empty or blank path was passed on the command line."""

    message = "Argument value is empty!"


class ExifMetadataError(ExportMetadataError):
    """The image has no EXIF block or it could not be decoded."""

    message = "Can not read exif metadata!"


class SerializationError(ExportMetadataError):
    message = "Can not serialize metadata!"
