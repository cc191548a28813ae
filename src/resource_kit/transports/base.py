"""
Base Transport - Abstract interface for resource operations

This defines the contract that every transport implementation must follow.
Allows swapping between a remote HTTP endpoint and an in-memory dataset
without changing the code that uses a Resource.

Every operation returns a concurrent.futures.Future. Results are also pushed
to the `load` callback of the operation arguments, failures to `error`.
"""

from abc import ABC, abstractmethod
from concurrent.futures import Future
from typing import Any, Dict, List, MutableMapping, Optional, Union
import logging

from resource_kit.schemas import OperationArgs
from resource_kit.utils.types import is_sequence

logger = logging.getLogger(__name__)

Item = MutableMapping[str, Any]
ArgsLike = Union[OperationArgs, Dict[str, Any], None]


class BaseTransport(ABC):
    """Abstract base class for resource transports"""

    @abstractmethod
    def list(self, args: ArgsLike = None) -> Future:
        """
        List every Item of the resource, subject to start/count paging.

        Args:
            args: operation arguments

        Returns:
            Future resolving to the list of Items passed to `load`
        """
        pass

    @abstractmethod
    def get(self, item_id: Any, args: ArgsLike = None) -> Future:
        """
        Get one Item by id.

        Args:
            item_id: id of the Item
            args: operation arguments

        Returns:
            Future resolving to a one-element list
        """
        pass

    @abstractmethod
    def query(self, predicate: Optional[Dict[str, Any]], args: ArgsLike = None) -> Future:
        """
        Query for matching Items.

        Args:
            predicate: key/value pairs the Items must match, None for all
            args: operation arguments

        Returns:
            Future resolving to the list of matching Items
        """
        pass

    @abstractmethod
    def create(self, item: Item, args: ArgsLike = None) -> Future:
        """
        Persist a new Item. The stored Item (with its id) is passed to `load`.
        """
        pass

    @abstractmethod
    def update(self, item: Item, args: ArgsLike = None) -> Future:
        """
        Replace the stored Item carrying the same id.
        """
        pass

    @abstractmethod
    def remove(self, item: Item, args: ArgsLike = None) -> Future:
        """
        Delete the stored Item carrying the same id.
        """
        pass

    @property
    def name(self) -> str:
        return self.__class__.__name__

    @staticmethod
    def _deliver(args: OperationArgs, payload: Any) -> List[Any]:
        """Feed `payload` to args.load, once per element when it is a list."""
        items = list(payload) if is_sequence(payload) else [payload]
        if args.load is not None:
            for item in items:
                args.load(item)
        return items

    @staticmethod
    def _resolved(result: Any) -> Future:
        future: Future = Future()
        future.set_result(result)
        return future

    @staticmethod
    def _failed(exc: BaseException) -> Future:
        future: Future = Future()
        future.set_exception(exc)
        return future
