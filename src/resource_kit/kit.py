"""
Resource Kit - builds Resources from an endpoint descriptor

The endpoint decides which transport backs every Resource:

    "https://api.example.com/v1"        -> RemoteTransport at <base>/<name>
    factory(name, args) -> transport    -> whatever the factory returns
    {"books": [...], "authors": [...]}  -> LocalTransport over endpoint[name]
"""

import logging
from typing import Any, Callable, Dict, Mapping, Union

from resource_kit.exceptions import ConfigurationError
from resource_kit.resource import Resource
from resource_kit.transports.base import ArgsLike, BaseTransport
from resource_kit.transports.local import LocalTransport
from resource_kit.transports.remote import RemoteTransport
from resource_kit.utils.types import is_mapping, is_sequence
from resource_kit.utils.urls import build_full_url

logger = logging.getLogger(__name__)

TransportFactory = Callable[[str, ArgsLike], BaseTransport]
Endpoint = Union[str, TransportFactory, Mapping]


class ResourceKit:
    """
    Factory producing Resources for one endpoint.

    URL and factory endpoints build a fresh transport on every call to
    `resource`. Dataset endpoints build one LocalTransport per name and
    reuse it, so Items created through one Resource are visible to the next.
    """

    def __init__(self, endpoint: Endpoint, args: ArgsLike = None):
        self.endpoint = endpoint
        self.args = args
        self._local_transports: Dict[str, LocalTransport] = {}

        if isinstance(endpoint, str):
            self.factory: TransportFactory = self._remote_factory
            kind = "url"
        elif callable(endpoint):
            self.factory = endpoint
            kind = "factory"
        elif is_mapping(endpoint):
            self.factory = self._local_factory
            kind = "dataset"
        elif is_sequence(endpoint):
            raise ConfigurationError(
                "Dataset endpoints must map resource names to item lists, got a bare list",
                endpoint,
            )
        else:
            raise ConfigurationError(f"Unsupported endpoint type: {type(endpoint).__name__}", endpoint)

        logger.info(f"ResourceKit initialized with {kind} endpoint")

    def resource(self, name: str, args: ArgsLike = None) -> Resource:
        """
        Creates a new Resource of the specified name from this kit.

        Args:
            name: the name of the Resource
            args: passed to the transport factory

        Returns:
            Resource wrapping the transport built for `name`
        """
        transport = self.factory(name, args)
        if not isinstance(transport, BaseTransport):
            raise ConfigurationError(
                f"Transport factory returned {type(transport).__name__} for '{name}', expected a BaseTransport",
                self.endpoint,
            )
        logger.debug(f"Resource '{name}' bound to {transport.name}")
        return Resource(transport)

    def _remote_factory(self, name: str, args: ArgsLike) -> BaseTransport:
        return RemoteTransport(build_full_url(self.endpoint, name), args if args is not None else self.args)

    def _local_factory(self, name: str, args: ArgsLike) -> BaseTransport:
        transport = self._local_transports.get(name)
        if transport is None:
            dataset: Any = self.endpoint.get(name)
            if dataset is None:
                logger.debug(f"No dataset for '{name}', starting empty")
                dataset = []
            elif not is_sequence(dataset):
                raise ConfigurationError(f"Dataset for '{name}' must be a list of items", self.endpoint)
            transport = LocalTransport(dataset, args)
            self._local_transports[name] = transport
        return transport
