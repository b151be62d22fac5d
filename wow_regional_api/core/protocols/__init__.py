"""
Core Protocol Definitions

This module defines the interfaces that the client's collaborators follow.
"""

from .store_protocol import JSONStoreProtocol
from .auth_protocol import AuthProtocol

__all__ = [
    "JSONStoreProtocol",
    "AuthProtocol",
]
