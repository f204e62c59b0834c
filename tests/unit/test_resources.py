"""Tests for generic resource CRUD."""

import pytest

from domoscio_client.dispatcher import Dispatcher
from domoscio_client.resources import RESOURCE_NAMES, Resource
from domoscio_client.testing import RecordingHandler, create_mock_response
from domoscio_client.transport import Transport


@pytest.fixture
def dispatcher(config, handler):
    return Dispatcher(config, transport=Transport(transport=handler.transport()))


class TestUrl:
    @pytest.mark.unit
    def test_collection_url(self, dispatcher):
        assert Resource(dispatcher, "knowledge_node").url() == "/v1/instances/42/knowledge_nodes"

    @pytest.mark.unit
    def test_member_url(self, dispatcher):
        assert Resource(dispatcher, "tag_set").url(7) == "/v1/instances/42/tag_sets/7"

    @pytest.mark.unit
    def test_version_from_config(self, config, handler):
        dispatcher = Dispatcher(config.configure(version=2))
        assert Resource(dispatcher, "student").url("abc") == "/v2/instances/42/students/abc"


class TestOperations:
    @pytest.mark.unit
    def test_create_posts_body(self, dispatcher, handler):
        Resource(dispatcher, "student").create(body={"civil_profile_id": 3})

        request = handler.requests[0]
        assert request.method == "POST"
        assert request.url.path == "/v1/instances/42/students"
        assert handler.body() == {"civil_profile_id": 3}

    @pytest.mark.unit
    def test_fetch_member(self, dispatcher, handler):
        Resource(dispatcher, "knowledge_node").fetch(5)

        request = handler.requests[0]
        assert request.method == "GET"
        assert request.url.path == "/v1/instances/42/knowledge_nodes/5"

    @pytest.mark.unit
    def test_fetch_with_filters(self, dispatcher, handler):
        Resource(dispatcher, "event").fetch(filters={"page": 3})

        assert handler.requests[0].url.params["page"] == "3"

    @pytest.mark.unit
    def test_update_puts_body(self, dispatcher, handler):
        Resource(dispatcher, "tag").update(9, {"name": "algebra"})

        request = handler.requests[0]
        assert request.method == "PUT"
        assert request.url.path == "/v1/instances/42/tags/9"
        assert handler.body() == {"name": "algebra"}

    @pytest.mark.unit
    def test_destroy_deletes(self, dispatcher, handler):
        Resource(dispatcher, "tagging").destroy(4)

        request = handler.requests[0]
        assert request.method == "DELETE"
        assert request.url.path == "/v1/instances/42/taggings/4"

    @pytest.mark.unit
    def test_returns_decoded_data(self, config):
        handler = RecordingHandler([create_mock_response(200, json={"id": 5, "name": "Fractions"})])
        dispatcher = Dispatcher(config, transport=Transport(transport=handler.transport()))

        assert Resource(dispatcher, "knowledge_node").fetch(5) == {"id": 5, "name": "Fractions"}


@pytest.mark.unit
def test_known_resources():
    assert {"knowledge_node", "student", "tag_edge", "learning_session", "path_rule"} <= RESOURCE_NAMES


@pytest.mark.unit
def test_destroy_no_content_under_strict_decode(config):
    handler = RecordingHandler([create_mock_response(204)])
    dispatcher = Dispatcher(config.configure(lenient_decode=False), transport=Transport(transport=handler.transport()))

    assert Resource(dispatcher, "student").destroy(1) == {}
    assert handler.requests[0].method == "DELETE"
