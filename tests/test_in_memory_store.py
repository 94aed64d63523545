import asyncio

from messaging_toolkit.message_database.data_models.message import Message
from messaging_toolkit.message_database.data_models.user import User
from messaging_toolkit.message_database.in_memory.message import InMemoryMessageDatabase


def _message(name: str, text: str, seq: int) -> Message:
    return Message(sender=User(first_name=name), text=text, conversation_id=1, sequence_number=seq)


def test_seeded_user_messages(store):
    messages = asyncio.run(store.get_user_messages())
    assert len(messages) == 1
    assert messages[0].sender.first_name == "Aurelie"
    assert messages[0].text == "Message from Lilly"
    assert messages[0].conversation_id == 1
    assert messages[0].sequence_number == 2


def test_seeded_sender_messages_in_order(store):
    messages = asyncio.run(store.get_sender_messages())
    assert [(m.sender.first_name, m.sender.is_online) for m in messages] == [
        ("Ludovic", True),
        ("Jessica", False),
    ]


def test_add_user_message_appends_last(store):
    before = asyncio.run(store.get_user_messages())
    new = _message("Lilly", "Hi Aurelie", 3)
    after = asyncio.run(store.add_user_message(new))
    assert len(after) == len(before) + 1
    assert after[-1] == new
    assert after[:-1] == before


def test_two_appends_keep_call_order(store):
    first = _message("Lilly", "first", 3)
    second = _message("Aurelie", "second", 4)
    asyncio.run(store.add_user_message(first))
    messages = asyncio.run(store.add_user_message(second))
    assert [m.text for m in messages] == ["Message from Lilly", "first", "second"]


def test_sender_messages_unaffected_by_appends(store):
    before = asyncio.run(store.get_sender_messages())
    asyncio.run(store.add_user_message(_message("Lilly", "x", 3)))
    assert asyncio.run(store.get_sender_messages()) == before


def test_duplicate_sequence_numbers_are_stored(store):
    messages = asyncio.run(store.add_user_message(_message("Lilly", "same slot", 2)))
    assert [m.sequence_number for m in messages] == [2, 2]


def test_snapshots_do_not_leak_state(store):
    messages = asyncio.run(store.get_user_messages())
    messages.clear()
    assert len(asyncio.run(store.get_user_messages())) == 1


def test_stored_message_is_a_copy():
    message = _message("Lilly", "original", 0)
    store = InMemoryMessageDatabase()
    asyncio.run(store.add_user_message(message))
    message.text = "changed"
    assert asyncio.run(store.get_user_messages())[0].text == "original"


def test_empty_store():
    store = InMemoryMessageDatabase()
    assert asyncio.run(store.get_user_messages()) == []
    assert asyncio.run(store.get_sender_messages()) == []


def test_concurrent_appends_all_land():
    store = InMemoryMessageDatabase()

    async def add_many():
        await asyncio.gather(*(store.add_user_message(_message("u", str(i), i)) for i in range(50)))
        return await store.get_user_messages()

    messages = asyncio.run(add_many())
    assert sorted(int(m.text) for m in messages) == list(range(50))
