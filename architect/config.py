"""
Architect Labs Configuration
============================

Environment-driven settings, read once at startup.
"""

import os
from pydantic import BaseModel, Field


class ArchitectConfig(BaseModel):
    """Server and editor settings."""
    data_dir: str = "data"
    history_limit: int = Field(default=50, ge=1)
    assistant_reply_delay: float = Field(default=0.6, ge=0)
    log_level: str = "INFO"
    host: str = "0.0.0.0"
    port: int = 8080


def load_config() -> ArchitectConfig:
    """Build the config from ARCHITECT_* environment variables."""
    return ArchitectConfig(
        data_dir=os.getenv("ARCHITECT_DATA_DIR", "data"),
        history_limit=int(os.getenv("ARCHITECT_HISTORY_LIMIT", "50")),
        assistant_reply_delay=float(os.getenv("ARCHITECT_ASSISTANT_REPLY_DELAY", "0.6")),
        log_level=os.getenv("ARCHITECT_LOG_LEVEL", "INFO").upper(),
        host=os.getenv("ARCHITECT_HOST", "0.0.0.0"),
        port=int(os.getenv("ARCHITECT_PORT", "8080")),
    )
