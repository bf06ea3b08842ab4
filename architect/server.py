"""
Architect Labs Server
=====================

FastAPI server for the component page builder.

Features:
- Flat document of typed components with bounded undo/redo
- Deterministic prompt-to-components synthesis and a rule-based assistant
- Four code exports (tsx, html, css, json) plus a live HTML preview
- JSON persistence of the current document and saved projects
"""

import logging
from contextlib import asynccontextmanager
from pathlib import Path
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .config import load_config

config = load_config()

# Configure logging
logging.basicConfig(
    level=getattr(logging, config.log_level, logging.INFO),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)

# Import services
from .services.assistant import Assistant
from .services.code_generator import EXPORT_FORMATS
from .services.catalog import PREMADE_PROJECTS, TEMPLATE_REGISTRY
from .services.prompt_synthesizer import SYNTHESIS_RULES, get_prompt_synthesizer

# Import canvas manager
from .canvas.session import EditorSession
from .canvas.state_manager import StateManager

# Import API routers
from .api import canvas_routes, chat_routes, element_routes, project_routes
from .models.element_models import COMPONENT_REGISTRY
from .models.document_models import THEMES


# Shared instances
editor_session: EditorSession = None
assistant: Assistant = None


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager."""
    global editor_session, assistant

    logger.info("[ARCHITECT] Starting up...")

    # Re-read so tests can point the data dir elsewhere
    settings = load_config()

    state_manager = StateManager(data_dir=Path(settings.data_dir))
    editor_session = EditorSession(state_manager=state_manager, history_limit=settings.history_limit)
    assistant = Assistant(editor_session.store, delay=settings.assistant_reply_delay)

    # Inject into route modules
    canvas_routes.session = editor_session
    element_routes.session = editor_session
    project_routes.session = editor_session
    chat_routes.session = editor_session
    chat_routes.assistant = assistant
    chat_routes.synthesizer = get_prompt_synthesizer()

    logger.info(
        f"[ARCHITECT] Services initialized ({len(editor_session.state.elements)} elements restored, "
        f"data_dir={settings.data_dir})"
    )

    yield

    logger.info("[ARCHITECT] Shutting down...")
    canvas_routes.session = None
    element_routes.session = None
    project_routes.session = None
    chat_routes.session = None
    chat_routes.assistant = None


# Create FastAPI app
app = FastAPI(
    title="Architect Labs",
    description="Component page builder with undo/redo, prompt synthesis and code export",
    version="1.0.0",
    lifespan=lifespan
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # Allow all origins for development
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include API routers
app.include_router(canvas_routes.router)
app.include_router(element_routes.router)
app.include_router(chat_routes.router)
app.include_router(project_routes.router)
app.include_router(project_routes.shortcut_router)


@app.get("/")
async def root():
    """Service summary."""
    return {
        "service": "Architect Labs",
        "version": "1.0.0",
        "status": "running",
        "endpoints": {
            "canvas": "/api/canvas/state",
            "elements": "/api/element",
            "chat": "/api/chat/message",
            "generate": "/api/chat/generate",
            "export": "/api/canvas/export/{format}",
            "preview": "/api/canvas/preview",
            "projects": "/api/projects"
        }
    }


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {
        "status": "healthy",
        "service": "architect-labs",
        "session_ready": editor_session is not None
    }


@app.get("/api/info")
async def api_info():
    """Component kinds, themes, export formats and built-in content."""
    return {
        "service": "Architect Labs",
        "version": "1.0.0",
        "component_types": [c.model_dump(mode="json") for c in COMPONENT_REGISTRY],
        "themes": [{"id": t.value, "label": p.label, "accent": p.accent} for t, p in THEMES.items()],
        "export_formats": [
            {"format": name, "extension": f.extension, "media_type": f.media_type}
            for name, f in EXPORT_FORMATS.items()
        ],
        "templates": [t.label for t in TEMPLATE_REGISTRY],
        "premade_projects": [p.name for p in PREMADE_PROJECTS],
        "synthesis_categories": [
            {"name": r.name, "keywords": list(r.keywords), "elements": len(r.template)}
            for r in SYNTHESIS_RULES
        ],
    }


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "architect.server:app",
        host=config.host,
        port=config.port,
        reload=True
    )
