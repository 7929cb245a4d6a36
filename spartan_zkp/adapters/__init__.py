"""
Outbound adapters.

- spartan_client : async httpx client for a running Spartan ZKP service.
"""

from __future__ import annotations

from .spartan_client import (ServiceError, ServiceTransportError, SpartanClient,
                             SpartanClientConfig, SpartanClientError, from_env)

__all__ = [
    "SpartanClient",
    "SpartanClientConfig",
    "SpartanClientError",
    "ServiceError",
    "ServiceTransportError",
    "from_env",
]
