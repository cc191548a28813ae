"""
resource-kit - named resources with CRUD operations over pluggable transports

    kit = ResourceKit("https://api.example.com/v1")
    books = kit.resource("books")
    books.get(7, {"load": print, "error": print})
"""

from .codecs import Codec, JsonCodec
from .exceptions import (
    ConfigurationError,
    DataNotFoundError,
    PreconditionError,
    RemoteTransportError,
    RequestTimeoutError,
    ResourceKitError,
    UnsupportedOperationError,
)
from .kit import ResourceKit
from .resource import Resource
from .schemas import OperationArgs
from .transports import BaseTransport, LocalTransport, RemoteTransport

__all__ = [
    "Codec",
    "JsonCodec",
    "ConfigurationError",
    "DataNotFoundError",
    "PreconditionError",
    "RemoteTransportError",
    "RequestTimeoutError",
    "ResourceKitError",
    "UnsupportedOperationError",
    "ResourceKit",
    "Resource",
    "OperationArgs",
    "BaseTransport",
    "LocalTransport",
    "RemoteTransport",
]
