from __future__ import annotations

import json
from dataclasses import asdict, dataclass
from typing import Any, Dict, Optional

from export_metadata.core.errors import SerializationError

RECORD_KEYS = (
    "camera_model",
    "serial_number",
    "created_time",
    "modified_time",
    "orientation",
    "capture_time",
    "file_name",
    "size",
)


def output_stem(file_name: str) -> str:
    # Everything before the first dot: "photo.v2.jpg" -> "photo".
    return file_name.split(".")[0]


@dataclass(frozen=True)
class MetadataRecord:
    file_name: str
    size: Optional[int] = None
    camera_model: Optional[str] = None
    serial_number: Optional[str] = None
    created_time: Optional[str] = None
    modified_time: Optional[str] = None
    orientation: Optional[int] = None
    capture_time: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    def to_json(self) -> str:
        """
        Compact JSON with sorted keys, so the same record always serializes
        to the same bytes.
        """
        try:
            return json.dumps(self.to_dict(), ensure_ascii=False, sort_keys=True, separators=(",", ":"))
        except (TypeError, ValueError) as exc:
            raise SerializationError(self.file_name) from exc
