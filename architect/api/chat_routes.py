"""
Chat Routes for Architect Labs
==============================

Prompt synthesis ("generate with AI") and the rule-based assistant chat.
"""

import logging
from typing import Any, Dict, List, Optional

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel, Field

from ..services.assistant import Assistant
from ..services.prompt_synthesizer import PromptSynthesizer
from .canvas_routes import CanvasStateResponse, state_response

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/chat", tags=["chat"])

# Shared instances (initialized in server.py)
session = None
assistant: Optional[Assistant] = None
synthesizer: Optional[PromptSynthesizer] = None


def get_session():
    """Dependency to get the editor session."""
    if session is None:
        raise HTTPException(500, "Editor session not initialized")
    return session


def get_assistant() -> Assistant:
    """Dependency to get the assistant."""
    if assistant is None:
        raise HTTPException(500, "Assistant not initialized")
    return assistant


def get_synthesizer() -> PromptSynthesizer:
    """Dependency to get the prompt synthesizer."""
    if synthesizer is None:
        raise HTTPException(500, "Prompt synthesizer not initialized")
    return synthesizer


class GenerateRequest(BaseModel):
    """Free-text page description."""
    prompt: str


class GenerateResponse(BaseModel):
    """Elements appended by synthesis plus the resulting document."""
    added_ids: List[str] = Field(default_factory=list)
    state: CanvasStateResponse


class ChatRequest(BaseModel):
    """Request for chat message."""
    message: str


class ChatResponse(BaseModel):
    """Assistant reply."""
    response_text: str
    action_taken: Optional[str] = None
    state: CanvasStateResponse


@router.post("/generate")
async def generate(request: GenerateRequest) -> GenerateResponse:
    """Synthesize elements from the prompt and append them as one undoable step."""
    s = get_session()
    elements = get_synthesizer().synthesize(request.prompt, s.store.ids)
    state = s.store.add_template_batch(elements)
    logger.info(f"[SYNTHESIS] Appended {len(elements)} elements from prompt")
    return GenerateResponse(added_ids=[e.id for e in elements], state=state_response(state))


@router.post("/message")
async def send_message(request: ChatRequest) -> ChatResponse:
    """Send a message to the assistant; the reply arrives after the configured delay."""
    if not request.message.strip():
        raise HTTPException(400, "Message is empty")
    reply = await get_assistant().respond(request.message)
    return ChatResponse(response_text=reply.content, action_taken=reply.action, state=state_response())


@router.get("/messages")
async def get_messages(limit: int = 50) -> List[Dict[str, Any]]:
    """Recent transcript entries."""
    return [m.model_dump(mode="json") for m in get_assistant().transcript.recent(limit)]
