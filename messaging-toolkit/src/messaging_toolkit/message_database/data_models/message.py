"""
Message data model and storage interface.

A message belongs to a conversation ('conversation_id') and carries its
position in it ('sequence_number'). Neither field is checked: duplicate or
out-of-order sequence numbers are stored as given.

The JSON form uses camelCase keys ('conversationId', 'sequenceNumber') to
match what the front-end sends; both spellings are accepted on input.

The 'MessageDatabase' ABC is the pluggable storage backend. Concrete
implementation: 'InMemoryMessageDatabase'.
"""

from abc import ABC, abstractmethod

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from messaging_toolkit.message_database.data_models.user import User


class Message(BaseModel):
    """
    A single chat message.

    Every field may be omitted by the caller and is then None. The sender is
    embedded by value, so updating a user elsewhere never changes stored
    messages.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    sender: User | None = None
    text: str | None = None
    conversation_id: int | None = None
    sequence_number: int | None = None


class MessageDatabase(ABC):
    """
    Abstract repository holding the 'user' and 'sender' message sequences.

    Both sequences keep insertion order. Only the user sequence can grow;
    nothing is ever updated, removed or reordered.
    """

    @abstractmethod
    async def get_user_messages(self) -> list[Message]:
        pass

    @abstractmethod
    async def get_sender_messages(self) -> list[Message]:
        pass

    @abstractmethod
    async def add_user_message(self, message: Message) -> list[Message]:
        """Append 'message' to the user sequence and return the whole updated sequence."""
        pass
