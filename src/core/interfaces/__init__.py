"""Core interfaces.

Contracts (Protocol) implemented by the adapters; API functions depend on
these, not on a concrete HTTP client.
"""

from core.interfaces.client import APIClient

__all__ = ["APIClient"]
