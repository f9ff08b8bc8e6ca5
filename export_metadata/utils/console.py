from __future__ import annotations

import sys


def info(message: str) -> None:
    print(f"INFO:  {message}")


def ok(message: str) -> None:
    print(f"OK:    {message}\n")


def warn(message: str) -> None:
    print(f"WARN:  {message}", file=sys.stderr)


def error(message: str) -> None:
    print(f"ERROR: {message}", file=sys.stderr)
