"""Generic CRUD access to Domoscio resources.

Every resource exposes the same four calls, so a single ``Resource``
parameterised by name covers them all:

- ``create``  → ``POST   /v{version}/instances/{client_id}/{name}s[/{id}]``
- ``fetch``   → ``GET    /v{version}/instances/{client_id}/{name}s[/{id}]``
- ``update``  → ``PUT    /v{version}/instances/{client_id}/{name}s[/{id}]``
- ``destroy`` → ``DELETE /v{version}/instances/{client_id}/{name}s[/{id}]``
"""

from collections.abc import Mapping
from http import HTTPMethod
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from domoscio_client.dispatcher import Dispatcher

RESOURCE_NAMES: frozenset[str] = frozenset(
    [
        # adaptive engine
        "path_rule",
        "rule_input",
        "rule_output",
        "rule_condition",
        "objective",
        "objective_student",
        "objective_knowledge_node",
        "objective_knowledge_node_student",
        "recommendation",
        "learning_path",
        # content and students
        "content",
        "knowledge_node_content",
        "student",
        "student_cluster",
        # knowledge graph
        "knowledge_graph",
        "knowledge_edge",
        "knowledge_node",
        # metadata
        "tag",
        "tagging",
        "tag_set",
        "tag_edge",
        "delta_object",
        # learning data
        "knowledge_node_student",
        "event",
        "learning_session",
    ]
)

ResourceId = int | str


class Resource:
    """CRUD operations on one resource type.

    Args:
        dispatcher: Sends the requests
        name: Singular snake_case resource name, e.g. ``"knowledge_node"``
    """

    def __init__(self, dispatcher: "Dispatcher", name: str) -> None:
        self.dispatcher = dispatcher
        self.name = name

    def __repr__(self) -> str:
        return f"Resource({self.name!r})"

    def url(self, id: ResourceId | None = None) -> str:
        config = self.dispatcher.config
        path = f"/v{config.version}/instances/{config.client_id}/{self.name}s"
        if id is not None:
            path += f"/{id}"
        return path

    def create(self, id: ResourceId | None = None, body: Mapping[str, Any] | None = None) -> Any:
        return self.dispatcher.request(HTTPMethod.POST, self.url(id), body)

    def fetch(self, id: ResourceId | None = None, filters: Mapping[str, Any] | None = None) -> Any:
        """Fetch one entity, or the whole collection when ``id`` is None.

        Collections spread over several pages come back merged, unless
        ``filters`` asks for a specific ``page``.
        """
        return self.dispatcher.request(HTTPMethod.GET, self.url(id), filters=filters)

    def update(self, id: ResourceId | None = None, body: Mapping[str, Any] | None = None) -> Any:
        return self.dispatcher.request(HTTPMethod.PUT, self.url(id), body)

    def destroy(self, id: ResourceId | None = None, body: Mapping[str, Any] | None = None) -> Any:
        return self.dispatcher.request(HTTPMethod.DELETE, self.url(id), body)
