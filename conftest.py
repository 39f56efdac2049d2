"""Pytest configuration: puts the project root on sys.path so the tests can
import the top-level modules without installing the project."""

import sys
from pathlib import Path


def _ensure_root_on_syspath() -> None:
    root = str(Path(__file__).resolve().parent)
    if root not in sys.path:
        sys.path.insert(0, root)


_ensure_root_on_syspath()
