"""
cli.py

Export a few EXIF fields of images to one JSON file per image.

Examples:
  python -m export_metadata --file text.txt
  python -m export_metadata --file text.txt --data-dir /photos/2019
  python -m export_metadata --image /photos/a.jpg /photos/b.jpg

Notes:
- Names listed in --file are image file names, not paths. They are looked up in
  --data-dir (default: ./data).
- --image takes up to 3 paths. The JSON lands next to each image; an existing
  <stem>.json is overwritten.
"""

from __future__ import annotations

import argparse
from importlib import metadata
from typing import List, Optional

from export_metadata.utils import console
from export_metadata.utils.paths import resolve_data_dir

MAX_IMAGES = 3


def _package_version() -> str:
    try:
        return metadata.version("export-metadata")
    except metadata.PackageNotFoundError:
        return ""


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="export_metadata", add_help=True)
    p.add_argument("-V", "--version", action="version", version=_package_version())
    p.add_argument("-f", "--file", dest="text_file", default=None, help="Export image metadata from text file")
    p.add_argument(
        "-i",
        "--image",
        dest="images",
        nargs="+",
        default=None,
        metavar="PATH",
        help=f"Export metadata from specific image (up to {MAX_IMAGES})",
    )
    p.add_argument(
        "-d",
        "--data-dir",
        dest="data_dir",
        default="",
        help="Directory the names in --file are resolved against (default: ./data)",
    )
    return p


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.text_file is None and args.images is None:
        parser.print_help()
        return 0
    if args.images is not None and len(args.images) > MAX_IMAGES:
        parser.error(f"argument -i/--image: at most {MAX_IMAGES} paths are allowed")

    # Import lazily so this file can show help even if Pillow is missing.
    from export_metadata.core.batch import handle_arg_text_file, handle_image_files
    from export_metadata.core.errors import ExportMetadataError

    if args.text_file is not None:
        try:
            report = handle_arg_text_file(args.text_file, resolve_data_dir(args.data_dir))
        except ExportMetadataError as exc:
            console.error(str(exc))
            return 1
        console.info(f"Exported {len(report.succeeded)} of {len(report.outcomes)} image(s) from {args.text_file}")

    if args.images is not None:
        report = handle_image_files(args.images)
        console.info(f"Exported {len(report.succeeded)} of {len(report.outcomes)} image(s)")

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
