"""
Local Transport - In-memory implementation of the transport contract

Serves one resource out of an ordered list of Items held in process.
Every operation completes before returning; the returned Future is
already resolved so callers cannot tell it apart from a remote call.
"""

import logging
from concurrent.futures import Future
from typing import Any, Dict, Iterable, List, Optional

from resource_kit.exceptions import DataNotFoundError, PreconditionError, UnsupportedOperationError
from resource_kit.schemas import OperationArgs
from resource_kit.transports.base import ArgsLike, BaseTransport, Item

logger = logging.getLogger(__name__)

ID_FIELD = "id"


class LocalTransport(BaseTransport):
    """Transport implementation backed by an in-memory list"""

    def __init__(self, items: Optional[Iterable[Item]] = None, args: ArgsLike = None):
        # Own copy of the sequence; the Items themselves are shared with the caller
        self._items: List[Item] = list(items or [])
        self._index: Dict[Any, int] = {}

        max_id = 0
        for position, item in enumerate(self._items):
            item_id = item.get(ID_FIELD)
            if not item_id:
                continue
            if item_id in self._index:
                logger.warning(f"Duplicate id {item_id!r} at position {position}, earlier entry shadowed")
            self._index[item_id] = position
            if isinstance(item_id, int) and item_id > max_id:
                max_id = item_id
        self._next_id = max_id + 1

        logger.info(f"LocalTransport initialized with {len(self._items)} items, next id {self._next_id}")

    @property
    def next_id(self) -> int:
        return self._next_id

    def __len__(self) -> int:
        return len(self._items)

    def snapshot(self) -> List[Item]:
        """Copy of the stored Items in collection order (for inspection)"""
        return list(self._items)

    def list(self, args: ArgsLike = None) -> Future:
        args = OperationArgs.coerce(args)
        self._require_load(args, "list")

        window = args.window(len(self._items))
        logger.debug(f"list [{window.start}, {window.stop}) of {len(self._items)} items")
        return self._resolved(self._deliver(args, [self._items[i] for i in window]))

    def get(self, item_id: Any, args: ArgsLike = None) -> Future:
        args = OperationArgs.coerce(args)
        self._require_load(args, "get")

        position = self._index.get(item_id)
        if position is None:
            logger.debug(f"get {item_id!r}: not found")
            if args.error is not None:
                args.error()
            return self._failed(DataNotFoundError("Item", item_id))

        logger.debug(f"get {item_id!r}: position {position}")
        return self._resolved(self._deliver(args, self._items[position]))

    def query(self, predicate: Optional[Dict[str, Any]], args: ArgsLike = None) -> Future:
        raise UnsupportedOperationError(self.name, "query")

    def create(self, item: Item, args: ArgsLike = None) -> Future:
        args = OperationArgs.coerce(args)
        if item.get(ID_FIELD):
            raise PreconditionError("item already has an id", "create", item)

        item[ID_FIELD] = self._next_id
        self._next_id += 1
        self._items.append(item)
        self._index[item[ID_FIELD]] = len(self._items) - 1

        logger.debug(f"create: assigned id {item[ID_FIELD]}")
        return self._resolved(self._deliver(args, item))

    def update(self, item: Item, args: ArgsLike = None) -> Future:
        args = OperationArgs.coerce(args)
        item_id = item.get(ID_FIELD)
        if not item_id:
            logger.debug("update: item has no id, ignored")
            return self._resolved([])

        position = self._index.get(item_id)
        if position is None:
            logger.debug(f"update {item_id!r}: not found")
            if args.error is not None:
                args.error(item)
            return self._failed(DataNotFoundError("Item", item_id))

        self._items[position] = item
        logger.debug(f"update {item_id!r}: replaced position {position}")
        return self._resolved(self._deliver(args, item))

    def remove(self, item: Item, args: ArgsLike = None) -> Future:
        raise UnsupportedOperationError(self.name, "remove")

    @staticmethod
    def _require_load(args: OperationArgs, operation: str) -> None:
        if args.load is None:
            raise PreconditionError("args must have a load handler function", operation)
