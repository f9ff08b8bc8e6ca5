from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, Iterator, List, Optional, Union

from export_metadata.core.errors import EmptyArgumentError, ExportIOError, ExportMetadataError
from export_metadata.core.exif import extract_exif_metadata_from_image
from export_metadata.utils import console
from export_metadata.utils.paths import resolve_data_dir, split_image_path


@dataclass(frozen=True)
class ItemOutcome:
    name: str
    ok: bool
    reason: Optional[str] = None


@dataclass
class BatchReport:
    outcomes: List[ItemOutcome] = field(default_factory=list)

    def add_success(self, name: str) -> None:
        self.outcomes.append(ItemOutcome(name=name, ok=True))

    def add_failure(self, name: str, reason: str) -> None:
        self.outcomes.append(ItemOutcome(name=name, ok=False, reason=reason))

    @property
    def succeeded(self) -> List[str]:
        return [o.name for o in self.outcomes if o.ok]

    @property
    def failed(self) -> List[ItemOutcome]:
        return [o for o in self.outcomes if not o.ok]


def read_text_lines(path: Union[str, Path]) -> Iterator[str]:
    """
    Open the list file eagerly (so a bad path fails here, not on first next())
    and yield its lines without the "\n" or "\r\n" terminator.
    Bytes that are not UTF-8 come through as surrogate escapes; see _is_utf8.
    """
    f_in = open(path, "r", encoding="utf-8", errors="surrogateescape", newline="\n")

    def _lines() -> Iterator[str]:
        with f_in:
            for line in f_in:
                if line.endswith("\n"):
                    line = line[:-1]
                    if line.endswith("\r"):
                        line = line[:-1]
                yield line

    return _lines()


def _is_utf8(line: str) -> bool:
    try:
        line.encode("utf-8")
    except UnicodeEncodeError:
        return False
    return True


def _extract_into(report: BatchReport, directory: Path, name: str) -> None:
    try:
        extract_exif_metadata_from_image(directory, name)
    except ExportMetadataError as exc:
        report.add_failure(name, str(exc))
    else:
        report.add_success(name)


def handle_arg_text_file(arg_text_file: str, data_dir: Optional[Path] = None) -> BatchReport:
    """
    Process every image named in a newline-delimited list file.

    Names are resolved against data_dir (<cwd>/data when not given). Blank lines
    are skipped. Per-image failures end up in the report; only problems with the
    list file itself are raised.
    """
    if not arg_text_file.strip():
        raise EmptyArgumentError()

    directory = Path(data_dir) if data_dir is not None else resolve_data_dir()

    try:
        lines = read_text_lines(arg_text_file)
    except OSError as exc:
        raise ExportIOError(arg_text_file) from exc

    report = BatchReport()
    try:
        for image_name in lines:
            if not image_name.strip():
                continue
            if not _is_utf8(image_name):
                console.warn(f"Line is not valid UTF-8: {image_name!r}. SKIPPED!")
                report.add_failure(image_name, "invalid UTF-8")
                continue
            _extract_into(report, directory, image_name)
    except OSError as exc:
        raise ExportIOError(arg_text_file) from exc
    return report


def handle_image_files(arg_image_paths: Iterable[str]) -> BatchReport:
    """Process up to a few direct image paths; never raises for a bad entry."""
    report = BatchReport()

    for image_path in arg_image_paths:
        if not image_path:
            console.warn("An image path is empty string! SKIPPED.")
            report.add_failure(image_path, "empty path")
            continue

        parts = split_image_path(image_path)
        if parts is None:
            console.warn(f'Something\'s wrong with the image path: "{image_path}". SKIPPED!')
            report.add_failure(image_path, "no directory or file name in path")
            continue

        directory, image_name = parts
        _extract_into(report, directory, image_name)
    return report
