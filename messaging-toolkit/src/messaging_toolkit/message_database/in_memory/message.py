"""
In-memory message store.

'InMemoryMessageDatabase' keeps both message sequences in plain lists owned by
the instance. Reads and appends share one 'asyncio.Lock', so concurrent
requests append one entry each and never see a half-applied append.

Use 'create_seeded_message_database' to get a store holding the demo data.
"""

import asyncio
from collections.abc import Sequence

from loguru import logger

from messaging_toolkit.message_database.data_models.message import Message, MessageDatabase
from messaging_toolkit.message_database.data_models.user import User

SEED_USER_MESSAGES = (
    Message(
        sender=User(first_name="Aurelie"),
        text="Message from Lilly",
        conversation_id=1,
        sequence_number=2,
    ),
)

SEED_SENDER_MESSAGES = (
    Message(
        sender=User(first_name="Ludovic", is_online=True),
        text="Message from Ludovic",
        conversation_id=1,
        sequence_number=0,
    ),
    Message(
        sender=User(first_name="Jessica", is_online=False),
        text="Message from Jessica",
        conversation_id=1,
        sequence_number=1,
    ),
)


class InMemoryMessageDatabase(MessageDatabase):
    """
    Process-lifetime message store.

    The given sequences are copied on construction and every read returns a
    fresh list of copies, so nothing outside the store can mutate its state.
    """

    def __init__(
        self,
        user_messages: Sequence[Message] | None = None,
        sender_messages: Sequence[Message] | None = None,
    ):
        self._user_messages: list[Message] = [m.model_copy(deep=True) for m in user_messages or ()]
        self._sender_messages: list[Message] = [m.model_copy(deep=True) for m in sender_messages or ()]
        self._lock = asyncio.Lock()

    async def get_user_messages(self) -> list[Message]:
        async with self._lock:
            return self._snapshot(self._user_messages)

    async def get_sender_messages(self) -> list[Message]:
        async with self._lock:
            return self._snapshot(self._sender_messages)

    async def add_user_message(self, message: Message) -> list[Message]:
        async with self._lock:
            self._user_messages.append(message.model_copy(deep=True))
            logger.debug(f"Appended user message #{len(self._user_messages)} (conversation={message.conversation_id})")
            return self._snapshot(self._user_messages)

    @staticmethod
    def _snapshot(messages: list[Message]) -> list[Message]:
        return [m.model_copy(deep=True) for m in messages]


def create_seeded_message_database() -> InMemoryMessageDatabase:
    """Build a store populated with the demo conversation."""
    return InMemoryMessageDatabase(user_messages=SEED_USER_MESSAGES, sender_messages=SEED_SENDER_MESSAGES)
