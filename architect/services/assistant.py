"""
Assistant Chat Simulation
=========================

Rule-based assistant that answers after a fixed delay. Commands are
matched against the words of the message (English and Romanian); the
first matching rule mutates the document through the store.

The mutation is applied when the reply is produced and always reads the
store's current state at that moment, never a snapshot taken when the
message arrived.
"""

import asyncio
import logging
import re
from typing import Callable, List, NamedTuple, Optional, Set

from ..canvas.document_store import DocumentStore
from ..models.chat_models import ChatMessage, ChatRole, ChatTranscript
from ..models.document_models import Theme
from ..models.element_models import ElementProps, TextAlign

logger = logging.getLogger(__name__)

DEFAULT_REPLY_DELAY = 0.6

HELP_TEXT = "I'm not sure how to do that yet. Try 'make everything red' or 'center all'."


class AssistantCommand(NamedTuple):
    """One rule: trigger words, required extra words (any of), the action and its reply."""
    name: str
    triggers: Set[str]
    apply: Callable[[DocumentStore], object]
    reply: str
    qualifiers: Optional[Set[str]] = None

    def matches(self, words: Set[str]) -> bool:
        if not words & self.triggers:
            return False
        return self.qualifiers is None or bool(words & self.qualifiers)


ASSISTANT_COMMANDS: List[AssistantCommand] = [
    AssistantCommand(
        "red", {"red", "roșu", "rosu"},
        lambda store: store.update_all_props(ElementProps(bg="#ef4444")),
        "Done! Everything is now Red.",
    ),
    AssistantCommand(
        "blue", {"blue", "albastru"},
        lambda store: store.update_all_props(ElementProps(bg="#3b82f6")),
        "Changed all backgrounds to Blue.",
    ),
    AssistantCommand(
        "center", {"center", "centru"},
        lambda store: store.update_all_props(ElementProps(align=TextAlign.CENTER)),
        "All elements are now centered.",
    ),
    AssistantCommand(
        "clear", {"clear", "goleste", "golește"},
        lambda store: store.clear_canvas(),
        "Canvas cleared.",
    ),
    AssistantCommand(
        "theme-light", {"theme", "tema"},
        lambda store: store.set_theme(Theme.LIGHT),
        "Switched to Light theme.",
        qualifiers={"light"},
    ),
    AssistantCommand(
        "theme-dark", {"theme", "tema"},
        lambda store: store.set_theme(Theme.DARK),
        "Back to Dark theme.",
        qualifiers={"dark"},
    ),
    AssistantCommand(
        "theme-glass", {"theme", "tema"},
        lambda store: store.set_theme(Theme.GLASS),
        "Glassmorphism mode on.",
        qualifiers={"glass"},
    ),
]


def message_words(message: str) -> Set[str]:
    return set(re.findall(r"\b\w+\b", message.lower()))


def match_command(message: str, commands: Optional[List[AssistantCommand]] = None) -> Optional[AssistantCommand]:
    words = message_words(message)
    for command in commands if commands is not None else ASSISTANT_COMMANDS:
        if command.matches(words):
            return command
    return None


class Assistant:
    """Simulated assistant bound to one document store."""

    def __init__(
        self,
        store: DocumentStore,
        delay: float = DEFAULT_REPLY_DELAY,
        transcript: Optional[ChatTranscript] = None,
    ):
        self.store = store
        self.delay = delay
        self.transcript = transcript or ChatTranscript()

    def apply(self, message: str) -> ChatMessage:
        """Run the matching command against the current state and record the reply."""
        command = match_command(message)
        if command is None:
            logger.info(f"[ASSISTANT] No command matched: '{message[:50]}'")
            return self.transcript.add_message(ChatRole.ASSISTANT, HELP_TEXT)

        command.apply(self.store)
        logger.info(f"[ASSISTANT] Applied '{command.name}' ({len(self.store.elements)} elements)")
        return self.transcript.add_message(ChatRole.ASSISTANT, command.reply, action=command.name)

    async def respond(self, message: str) -> ChatMessage:
        """
        Record the user message, wait the reply delay, then answer.

        Args:
            message: User message text

        Returns:
            The assistant reply that was appended to the transcript
        """
        self.transcript.add_message(ChatRole.USER, message)
        if self.delay > 0:
            await asyncio.sleep(self.delay)
        return self.apply(message)
