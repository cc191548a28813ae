"""Unit tests for ResourceKit endpoint dispatch and the Resource facade."""
from concurrent.futures import Future
from unittest.mock import MagicMock

import pytest

from resource_kit import ConfigurationError, LocalTransport, RemoteTransport, Resource, ResourceKit
from resource_kit.transports.base import BaseTransport


class TestUrlEndpoint:

    def test_builds_remote_transport_per_name(self):
        kit = ResourceKit("https://api.example.com/v1")
        books = kit.resource("books")
        assert isinstance(books.transport, RemoteTransport)
        assert books.transport.url == "https://api.example.com/v1/books"

    def test_trailing_slash_not_doubled(self):
        kit = ResourceKit("https://api.example.com/v1/")
        assert kit.resource("books").transport.url == "https://api.example.com/v1/books"

    def test_no_caching(self):
        kit = ResourceKit("/api")
        first = kit.resource("books")
        second = kit.resource("books")
        assert first.transport is not second.transport


class TestFactoryEndpoint:

    def test_factory_receives_name_and_args(self):
        built = []

        def factory(name, args):
            built.append((name, args))
            return LocalTransport([])

        kit = ResourceKit(factory)
        resource = kit.resource("books", {"timeout": 10})
        assert built == [("books", {"timeout": 10})]
        assert isinstance(resource, Resource)

    def test_factory_called_on_every_request(self):
        factory = MagicMock(side_effect=lambda name, args: LocalTransport([]))
        kit = ResourceKit(factory)
        kit.resource("a")
        kit.resource("a")
        assert factory.call_count == 2

    def test_factory_must_return_transport(self):
        kit = ResourceKit(lambda name, args: object())
        with pytest.raises(ConfigurationError):
            kit.resource("books")


class TestDatasetEndpoint:

    def test_local_transport_per_name(self):
        kit = ResourceKit({"books": [{"id": 1, "title": "Dune"}], "authors": []})
        books = kit.resource("books")
        assert isinstance(books.transport, LocalTransport)

        loaded = []
        books.get(1, {"load": loaded.append})
        assert loaded == [{"id": 1, "title": "Dune"}]

    def test_transport_reused_for_same_name(self):
        kit = ResourceKit({"books": []})
        kit.resource("books").create({"title": "Dune"})

        loaded = []
        kit.resource("books").list({"load": loaded.append})
        assert loaded == [{"id": 1, "title": "Dune"}]

    def test_names_are_isolated(self):
        kit = ResourceKit({"books": [{"id": 1}], "authors": [{"id": 1}, {"id": 2}]})
        assert kit.resource("books").transport is not kit.resource("authors").transport
        assert len(kit.resource("authors").transport) == 2

    def test_unknown_name_starts_empty(self):
        kit = ResourceKit({})
        loaded = []
        kit.resource("ghosts").list({"load": loaded.append})
        assert loaded == []

    def test_bare_list_rejected(self):
        with pytest.raises(ConfigurationError):
            ResourceKit([{"id": 1}])

    def test_non_list_dataset_rejected(self):
        kit = ResourceKit({"books": "not a list"})
        with pytest.raises(ConfigurationError):
            kit.resource("books")


class TestUnsupportedEndpoint:

    def test_int_endpoint_rejected(self):
        with pytest.raises(ConfigurationError):
            ResourceKit(42)


class TestResourceForwarding:

    @pytest.mark.parametrize("verb,call_args", [
        ("list", ({"start": 1},)),
        ("get", (3, {"count": 1})),
        ("query", ({"q": "x"}, None)),
        ("create", ({"name": "x"}, None)),
        ("update", ({"id": 1}, None)),
        ("remove", ({"id": 1}, None)),
    ])
    def test_forwards_unchanged(self, verb, call_args):
        transport = MagicMock(spec=BaseTransport)
        future = Future()
        getattr(transport, verb).return_value = future

        result = getattr(Resource(transport), verb)(*call_args)

        getattr(transport, verb).assert_called_once_with(*call_args)
        assert result is future
