"""Test configuration.

These tests run both when the project is installed (`pip install -e .`) and
directly from a source checkout.
"""

from __future__ import annotations

import sys
from pathlib import Path

import pytest


def _ensure_src_on_path() -> None:
    root = Path(__file__).resolve().parents[1]
    src = root / "src"
    if src.is_dir():
        src_str = str(src)
        if src_str not in sys.path:
            sys.path.insert(0, src_str)


_ensure_src_on_path()


@pytest.fixture
def fresh_default():
    """Rebuild the shared default vocabulary around a test."""
    from collection_inflector.vocabularies import _reset_default_vocabulary

    _reset_default_vocabulary()
    yield
    _reset_default_vocabulary()
