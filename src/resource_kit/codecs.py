"""
Wire codecs - serialization strategies for remote transports

A RemoteTransport holds one Codec and never touches the wire format directly,
so an alternate format only needs a new Codec subclass.
"""

import json
from abc import ABC, abstractmethod
from typing import Any, Optional


class Codec(ABC):
    """Abstract serializer/deserializer pair for request and response bodies"""

    @property
    @abstractmethod
    def content_type(self) -> str:
        """Media type sent in Accept and Content-Type headers."""
        pass

    @abstractmethod
    def serialize(self, data: Any) -> bytes:
        """
        Encode an Item for a request body.

        Args:
            data: Item (or any serializable value)

        Returns:
            Encoded request body
        """
        pass

    @abstractmethod
    def deserialize(self, body: bytes) -> Any:
        """
        Decode a response body.

        Args:
            body: raw response content

        Returns:
            A single Item or a list of Items

        Raises:
            ValueError: If the body cannot be decoded
        """
        pass


class JsonCodec(Codec):
    """UTF-8 JSON codec, the default for remote transports"""

    def __init__(self, content_type: Optional[str] = None):
        self._content_type = content_type or "application/json"

    @property
    def content_type(self) -> str:
        return self._content_type

    def serialize(self, data: Any) -> bytes:
        return json.dumps(data, separators=(",", ":")).encode("utf-8")

    def deserialize(self, body: bytes) -> Any:
        return json.loads(body.decode("utf-8"))
