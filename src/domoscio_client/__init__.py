"""Domoscio Client - Python bindings for the Domoscio adaptive-learning API.

This library turns resource operations into signed HTTP calls:
- Environment-dependent host resolution (local, staging, preprod, production)
- Passphrase or access/refresh token authentication with token capture
- Transparent aggregation of paginated responses
- Lenient JSON decoding, with an opt-in strict error policy

Example:
    ```python
    from domoscio_client import Configuration, DomoscioClient

    config = Configuration(
        preproduction=True,
        client_id="42",
        client_passphrase="secret",
    )

    with DomoscioClient(config) as client:
        nodes = client.knowledge_node.fetch()
        client.student.create(body={"civil_profile_id": 7})
    ```
"""

__version__ = "0.1.0"

from domoscio_client.client import DomoscioClient
from domoscio_client.config import Configuration
from domoscio_client.dispatcher import Dispatcher

__all__ = ["Configuration", "Dispatcher", "DomoscioClient", "__version__"]
