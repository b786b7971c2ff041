"""Core interfaces.

Structural contracts (Protocol) implemented by adapters, so the executor
depends on abstractions instead of concrete session or blob stores.
"""

from remote_data.core.interfaces.credentials import CredentialProvider
from remote_data.core.interfaces.object_urls import ObjectUrlFactory

__all__ = ["CredentialProvider", "ObjectUrlFactory"]
