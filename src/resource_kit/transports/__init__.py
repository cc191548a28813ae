"""
Transports - backing stores for resources

A transport performs the actual CRUD operation, either over HTTP
(RemoteTransport) or against an in-memory list (LocalTransport).

Pattern: Strategy
"""

from .base import BaseTransport
from .local import LocalTransport
from .remote import RemoteTransport

__all__ = ["BaseTransport", "LocalTransport", "RemoteTransport"]
