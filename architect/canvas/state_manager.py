"""
Canvas State Manager
====================

Durable key-value persistence with JSON files:
- the current document state, overwritten on every commit
- the collection of named projects (name is the dedup key)
"""

import json
import logging
import uuid
from datetime import datetime
from pathlib import Path
from typing import Any, List, Optional

from pydantic import ValidationError

from ..models.document_models import BrandKit, DocumentState, Project

logger = logging.getLogger(__name__)

STORAGE_KEY = "ia_arh_canvas"
PROJECTS_KEY = "ia_arh_projects"


class StateManager:
    """Persists the document state and saved projects."""

    def __init__(self, data_dir: Optional[Path] = None):
        self.data_dir = Path(data_dir or "data")
        self.data_dir.mkdir(parents=True, exist_ok=True)
        self._projects: Optional[List[Project]] = None
        logger.info(f"[STATE-MANAGER] Initialized with data_dir={self.data_dir}")

    def _path(self, key: str) -> Path:
        return self.data_dir / f"{key}.json"

    def _read(self, key: str) -> Optional[Any]:
        path = self._path(key)
        if not path.exists():
            return None
        try:
            with open(path, encoding="utf-8") as f:
                return json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            logger.error(f"[STATE-MANAGER] Could not read {path}: {e}")
            return None

    def _write(self, key: str, data: Any) -> bool:
        path = self._path(key)
        try:
            with open(path, "w", encoding="utf-8") as f:
                json.dump(data, f, indent=2, ensure_ascii=False)
            return True
        except OSError as e:
            logger.error(f"[STATE-MANAGER] Could not write {path}: {e}")
            return False

    # ------------------------------------------------------------------
    # Current document
    # ------------------------------------------------------------------

    def load_state(self) -> DocumentState:
        """Persisted state, or a fresh default document."""
        data = self._read(STORAGE_KEY)
        if not isinstance(data, dict):
            return DocumentState()
        if not data.get("brand"):
            data["brand"] = BrandKit().model_dump(mode="json")
        try:
            state = DocumentState.model_validate(data)
        except ValidationError as e:
            logger.error(f"[STATE-MANAGER] Discarding invalid persisted state: {e}")
            return DocumentState()
        logger.info(f"[STATE-MANAGER] Restored state with {len(state.elements)} elements")
        return state

    def save_state(self, state: DocumentState) -> bool:
        return self._write(STORAGE_KEY, state.to_storage_dict())

    # ------------------------------------------------------------------
    # Projects
    # ------------------------------------------------------------------

    def list_projects(self) -> List[Project]:
        if self._projects is None:
            self._projects = []
            data = self._read(PROJECTS_KEY)
            for entry in data if isinstance(data, list) else []:
                if not isinstance(entry, dict):
                    continue
                try:
                    self._projects.append(Project.from_dict(entry))
                except ValidationError as e:
                    logger.warning(f"[STATE-MANAGER] Skipping invalid project entry: {e}")
        return list(self._projects)

    def get_project(self, name: str) -> Optional[Project]:
        for project in self.list_projects():
            if project.name == name:
                return project
        return None

    def save_project(self, name: str, state: DocumentState, icon: Optional[str] = None) -> Project:
        """Save ``state`` under ``name``, replacing any project with that name."""
        project = Project(
            id=str(uuid.uuid4()),
            name=name,
            state=state,
            saved_at=datetime.now().isoformat(),
            icon=icon,
        )
        projects = [p for p in self.list_projects() if p.name != name]
        projects.append(project)
        self._projects = projects
        self._save_projects()
        logger.info(f"[STATE-MANAGER] Saved project '{name}' ({len(state.elements)} elements)")
        return project

    def delete_project(self, name: str) -> bool:
        projects = self.list_projects()
        remaining = [p for p in projects if p.name != name]
        if len(remaining) == len(projects):
            return False
        self._projects = remaining
        self._save_projects()
        return True

    def _save_projects(self) -> None:
        self._write(PROJECTS_KEY, [p.to_dict() for p in self._projects or []])
