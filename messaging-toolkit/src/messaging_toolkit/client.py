"""HTTP client for the messaging demo API."""

import requests
from loguru import logger
from pydantic import TypeAdapter

from messaging_toolkit.message_database.data_models.message import Message

_MESSAGE_LIST = TypeAdapter(list[Message])


class MessagingClient:
    """
    Client call site for the messaging API.

    Keeps a local view of both sequences ('user_messages', 'sender_messages').
    'add_user_message' replaces the local user view with the list the server
    returns, so the view always matches the server after a successful post.
    """

    def __init__(self, base_url: str, timeout: float = 5.0, session: requests.Session | None = None):
        """Initialize MessagingClient.

        Args:
            base_url: Server root, e.g. "http://127.0.0.1:8080".
            timeout: Per-request timeout in seconds.
            session: Optional session to reuse connections.
        """
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()
        self.user_messages: list[Message] = []
        self.sender_messages: list[Message] = []

    def get_user_messages(self) -> list[Message]:
        return self._request("GET", "/api/get-user-messages")

    def get_sender_messages(self) -> list[Message]:
        return self._request("GET", "/api/get-sender-messages")

    def add_user_message(self, message: Message) -> list[Message]:
        """Post a message and merge the returned sequence into the local view.

        Returns:
            The full user sequence after the append.
        """
        self.user_messages = self._request(
            "POST",
            "/api/add-user-message",
            json=message.model_dump(mode="json", by_alias=True),
        )
        return self.user_messages

    def refresh(self) -> None:
        """Reload both local views from the server."""
        self.user_messages = self.get_user_messages()
        self.sender_messages = self.get_sender_messages()

    def _request(self, method: str, path: str, **kwargs) -> list[Message]:
        url = f"{self.base_url}{path}"
        try:
            response = self.session.request(method, url, timeout=self.timeout, **kwargs)
            response.raise_for_status()
        except requests.HTTPError as e:
            logger.warning(f"{method} {url} failed: {e}")
            raise
        except requests.RequestException as e:
            logger.error(f"{method} {url} unreachable: {e}")
            raise
        return _MESSAGE_LIST.validate_python(response.json())
