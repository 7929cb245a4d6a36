"""
Version metadata for the Spartan ZKP service.

``__version__`` is reported by the health endpoints and used for packaging.
"""

from __future__ import annotations

# Bump this when making a release; use semver (MAJOR.MINOR.PATCH)
__version__ = "0.1.0"

SERVICE_NAME = "spartan-zkp"


__all__ = ["__version__", "SERVICE_NAME"]
