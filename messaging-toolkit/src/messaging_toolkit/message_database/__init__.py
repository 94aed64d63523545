"""
Message storage for the messaging toolkit.

    from messaging_toolkit.message_database import (
        MessagingController, create_seeded_message_database,
    )

    controller = MessagingController(create_seeded_message_database())
"""

from messaging_toolkit.message_database.controller import MessagingController
from messaging_toolkit.message_database.data_models.message import Message, MessageDatabase
from messaging_toolkit.message_database.data_models.user import User
from messaging_toolkit.message_database.in_memory.message import (
    InMemoryMessageDatabase,
    create_seeded_message_database,
)

__all__ = [
    "InMemoryMessageDatabase",
    "Message",
    "MessageDatabase",
    "MessagingController",
    "User",
    "create_seeded_message_database",
]
