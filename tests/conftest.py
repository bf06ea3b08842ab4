"""
Pytest Configuration and Fixtures
=================================

Shared fixtures for the Architect Labs test suite.
"""

import pytest
from fastapi.testclient import TestClient

from architect.canvas.document_store import DocumentStore
from architect.canvas.ids import IdAllocator
from architect.canvas.session import EditorSession
from architect.canvas.state_manager import StateManager
from architect.models.element_models import CanvasElement, ElementType, props_with_defaults


@pytest.fixture
def ids():
    return IdAllocator(session="test0001")


@pytest.fixture
def store(ids):
    return DocumentStore(ids=ids)


@pytest.fixture
def state_manager(tmp_path):
    return StateManager(data_dir=tmp_path / "data")


@pytest.fixture
def session(state_manager, ids):
    return EditorSession(state_manager=state_manager, ids=ids)


@pytest.fixture
def make_element():
    """Factory for elements with default props plus overrides."""
    def _make(element_id: str, element_type: ElementType = ElementType.TEXT, label: str = "x", **overrides):
        return CanvasElement(id=element_id, type=element_type, label=label, props=props_with_defaults(**overrides))
    return _make


@pytest.fixture
def client(tmp_path, monkeypatch):
    """API client with an isolated data directory and no assistant delay."""
    monkeypatch.setenv("ARCHITECT_DATA_DIR", str(tmp_path / "api-data"))
    monkeypatch.setenv("ARCHITECT_ASSISTANT_REPLY_DELAY", "0")
    from architect.server import app
    with TestClient(app) as test_client:
        yield test_client
