"""
Chat Models for Architect Labs
==============================

Models for the assistant transcript.
"""

from enum import Enum
from typing import List, Optional
from pydantic import BaseModel, Field
from datetime import datetime


class ChatRole(str, Enum):
    """Role of chat participant."""
    USER = "user"
    ASSISTANT = "assistant"


class ChatMessage(BaseModel):
    """A single chat message."""
    role: ChatRole
    content: str
    timestamp: datetime = Field(default_factory=datetime.now)
    action: Optional[str] = None


class ChatTranscript(BaseModel):
    """In-memory conversation with the assistant (never persisted)."""
    messages: List[ChatMessage] = Field(default_factory=list)

    def add_message(self, role: ChatRole, content: str, action: Optional[str] = None) -> ChatMessage:
        """Add a message to the transcript."""
        message = ChatMessage(role=role, content=content, action=action)
        self.messages.append(message)
        return message

    def recent(self, limit: int = 50) -> List[ChatMessage]:
        return self.messages[-limit:]
