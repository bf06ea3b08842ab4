"""Tests for the rule-based assistant."""

import asyncio

from architect.canvas.document_store import DocumentStore
from architect.models.chat_models import ChatRole
from architect.models.document_models import Theme
from architect.models.element_models import ElementType, TextAlign
from architect.services.assistant import HELP_TEXT, Assistant, match_command


def _store_with(*types):
    store = DocumentStore()
    for t in types:
        store.add_element(t)
    return store


def test_red_command_recolors_everything():
    store = _store_with(ElementType.BUTTON, ElementType.CARD)
    assistant = Assistant(store, delay=0)

    reply = asyncio.run(assistant.respond("make everything red"))

    assert reply.content == "Done! Everything is now Red."
    assert all(e.props.bg == "#ef4444" for e in store.elements)


def test_romanian_commands():
    store = _store_with(ElementType.TEXT)
    assistant = Assistant(store, delay=0)

    asyncio.run(assistant.respond("totul albastru"))
    assert store.elements[0].props.bg == "#3b82f6"

    asyncio.run(assistant.respond("pune in centru"))
    assert store.elements[0].props.align == TextAlign.CENTER


def test_theme_commands_need_a_theme_name():
    store = _store_with()
    assistant = Assistant(store, delay=0)

    assert asyncio.run(assistant.respond("switch theme to light")).content == "Switched to Light theme."
    assert store.state.theme == Theme.LIGHT
    assert asyncio.run(assistant.respond("glass theme please")).content == "Glassmorphism mode on."
    assert asyncio.run(assistant.respond("tema dark")).content == "Back to Dark theme."
    assert asyncio.run(assistant.respond("change the theme")).content == HELP_TEXT


def test_clear_command():
    store = _store_with(ElementType.TEXT, ElementType.TEXT)

    reply = asyncio.run(Assistant(store, delay=0).respond("clear the canvas"))

    assert reply.content == "Canvas cleared."
    assert store.elements == []


def test_words_are_matched_whole():
    assert match_command("keep it centered") is None
    assert match_command("hundred buttons") is None
    assert match_command("center all").name == "center"


def test_unknown_message_gets_help_and_no_change():
    store = _store_with(ElementType.TEXT)
    before = store.state

    reply = asyncio.run(Assistant(store, delay=0).respond("do a barrel roll"))

    assert reply.content == HELP_TEXT
    assert reply.action is None
    assert store.state is before


def test_reply_applies_to_state_current_at_reply_time():
    store = _store_with(ElementType.TEXT)
    assistant = Assistant(store, delay=0.01)

    async def scenario():
        pending = asyncio.create_task(assistant.respond("make it blue"))
        await asyncio.sleep(0)
        store.add_element(ElementType.CARD)
        return await pending

    asyncio.run(scenario())

    assert len(store.elements) == 2
    assert all(e.props.bg == "#3b82f6" for e in store.elements)


def test_transcript_records_both_sides():
    assistant = Assistant(_store_with(ElementType.TEXT), delay=0)

    asyncio.run(assistant.respond("center all"))

    roles = [m.role for m in assistant.transcript.messages]
    assert roles == [ChatRole.USER, ChatRole.ASSISTANT]
    assert assistant.transcript.messages[1].action == "center"


def test_bulk_command_is_one_undo_step():
    store = _store_with(ElementType.TEXT, ElementType.CARD)
    before = store.state

    asyncio.run(Assistant(store, delay=0).respond("red"))
    store.undo()

    assert store.state == before


def test_recent_returns_latest_messages():
    assistant = Assistant(_store_with(), delay=0)

    for word in ("one", "two", "three"):
        asyncio.run(assistant.respond(word))

    recent = assistant.transcript.recent(2)
    assert [m.role for m in recent] == [ChatRole.USER, ChatRole.ASSISTANT]
    assert recent[0].content == "three"
    assert recent[1].action is None
