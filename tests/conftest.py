"""
Pytest configuration to ensure paths are set up correctly for tests.

This allows imports like `from cinema_tickets.services import ...` to work
when running tests from a fresh checkout without an editable install.
"""

import sys
from pathlib import Path


def _ensure_src_on_sys_path() -> None:
    """Add src/ to sys.path if missing."""
    src_root = Path(__file__).resolve().parents[1] / "src"

    src_str = str(src_root)
    if src_str not in sys.path:
        sys.path.insert(0, src_str)


_ensure_src_on_sys_path()
