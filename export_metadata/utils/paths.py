from __future__ import annotations

import os
from pathlib import Path
from typing import Optional, Tuple

DATA_DIR_NAME = "data"


def resolve_data_dir(path_str: Optional[str] = None, *, cwd: Optional[Path] = None) -> Path:
    """
    Directory that image names from a list file are resolved against.
    Defaults to <cwd>/data; a relative path_str is taken relative to cwd.
    """
    base = Path(cwd) if cwd is not None else Path.cwd()
    if not path_str:
        return base / DATA_DIR_NAME

    raw = Path(path_str).expanduser()
    if raw.is_absolute():
        return raw
    return base / raw


def split_image_path(path_str: str) -> Optional[Tuple[Path, str]]:
    """
    Split a direct image path into (directory, file name).
    Returns None for paths that have no usable file name, e.g. "/" or "..".
    """
    raw = Path(path_str)
    name = raw.name
    if not name or name == os.pardir:
        return None
    if raw.parent == raw:
        return None
    return raw.parent, name
