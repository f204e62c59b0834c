"""Request headers for the two Domoscio authentication modes."""

from typing import TYPE_CHECKING

from domoscio_client.auth.tokens import Credentials, Passphrase, Tokens

if TYPE_CHECKING:
    from domoscio_client.config import Configuration


def user_agent() -> str:
    from domoscio_client import __version__

    return f"Domoscio PythonBindings/{__version__}"


def build_request_headers(config: "Configuration", credentials: Credentials) -> dict[str, str]:
    """Build the headers for one outgoing request.

    Token mode sends the captured ``AccessToken``/``RefreshToken`` pair.
    Otherwise the request carries ``Authorization: Token token=<secret>``, the
    secret being the explicit passphrase or the configured one. Missing
    values become empty strings; this never raises.

    Args:
        config: Active configuration (passphrase and client identifier)
        credentials: Current value of the token store

    Returns:
        Header mapping ready to send
    """
    if isinstance(credentials, Tokens):
        headers = {
            "user_agent": user_agent(),
            "AccessToken": credentials.access_token or "",
            "RefreshToken": credentials.refresh_token or "",
            "Content-Type": "application/json",
        }
    else:
        if isinstance(credentials, Passphrase):
            secret = credentials.secret
        else:
            secret = config.client_passphrase or ""
        headers = {
            "user_agent": user_agent(),
            "Authorization": f"Token token={secret}",
            "Content-Type": "application/json",
        }

    if config.client_identifier is not None:
        headers["VizToken"] = config.client_identifier

    return headers
