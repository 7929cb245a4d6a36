"""Test package for spartan_zkp.

Pytest discovers tests via file patterns; this module exists so the test
modules can share helpers from ``conftest`` with relative imports.
"""

from __future__ import annotations

__all__: list[str] = []
