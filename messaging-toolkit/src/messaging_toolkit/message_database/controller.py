"""
Messaging controller (Facade).

'MessagingController' is the single entry point the HTTP layer talks to. It
holds a reference to one 'MessageDatabase' and never keeps message state of
its own, so every app instance built around a fresh store is independent.
"""

from loguru import logger

from messaging_toolkit.message_database.data_models.message import Message, MessageDatabase


class MessagingController:
    def __init__(self, message_db: MessageDatabase):
        self.message_db = message_db

    async def get_user_messages(self) -> list[Message]:
        return await self.message_db.get_user_messages()

    async def get_sender_messages(self) -> list[Message]:
        return await self.message_db.get_sender_messages()

    async def add_user_message(self, message: Message) -> list[Message]:
        sender = message.sender.first_name if message.sender else None
        logger.info(f"New user message from {sender!r} in conversation {message.conversation_id}")
        return await self.message_db.add_user_message(message)
