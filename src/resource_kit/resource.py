"""A named handle that forwards CRUD verbs to one transport."""

from concurrent.futures import Future
from typing import Any, Dict, Optional

from resource_kit.transports.base import ArgsLike, BaseTransport, Item


class Resource:
    """Represents a group of Items served by one transport"""

    def __init__(self, transport: BaseTransport):
        self._transport = transport

    @property
    def transport(self) -> BaseTransport:
        return self._transport

    def list(self, args: ArgsLike = None) -> Future:
        """Lists all Items."""
        return self._transport.list(args)

    def get(self, item_id: Any, args: ArgsLike = None) -> Future:
        """Gets an Item by id."""
        return self._transport.get(item_id, args)

    def query(self, predicate: Optional[Dict[str, Any]], args: ArgsLike = None) -> Future:
        """Queries for Items matching the key/value pairs of `predicate`."""
        return self._transport.query(predicate, args)

    def create(self, item: Item, args: ArgsLike = None) -> Future:
        return self._transport.create(item, args)

    def update(self, item: Item, args: ArgsLike = None) -> Future:
        return self._transport.update(item, args)

    def remove(self, item: Item, args: ArgsLike = None) -> Future:
        return self._transport.remove(item, args)

    def __repr__(self) -> str:
        return f"Resource({self._transport.name})"
