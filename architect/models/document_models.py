"""
Document Models for Architect Labs
==================================

Document state (the unit of undo/redo and persistence), brand tokens,
theme palettes and saved projects.
"""

from enum import Enum
from typing import Dict, List, Optional
from pydantic import BaseModel, Field

from .element_models import CanvasElement


class Theme(str, Enum):
    """Named canvas palettes."""
    DARK = "dark"
    LIGHT = "light"
    PURPLE = "purple"
    OCEAN = "ocean"
    SUNSET = "sunset"
    GLASS = "glass"


class FontFamily(str, Enum):
    """Brand font families."""
    SANS = "sans"
    MONO = "mono"
    SERIF = "serif"
    DISPLAY = "display"


class ThemePalette(BaseModel):
    """Colors the preview falls back to when an element leaves them unset."""
    bg: str
    surface: str
    border: str
    accent: str
    text: str
    label: str


THEMES: Dict[Theme, ThemePalette] = {
    Theme.DARK: ThemePalette(bg="#0A0A0B", surface="#0D0D0F", border="rgba(255,255,255,0.05)", accent="#a855f7", text="#ffffff", label="Dark"),
    Theme.LIGHT: ThemePalette(bg="#f4f4f5", surface="#ffffff", border="rgba(0,0,0,0.08)", accent="#6366f1", text="#09090b", label="Light"),
    Theme.PURPLE: ThemePalette(bg="#120820", surface="#1a0d2e", border="rgba(168,85,247,0.15)", accent="#e879f9", text="#ffffff", label="Purple"),
    Theme.OCEAN: ThemePalette(bg="#071520", surface="#0c1f30", border="rgba(56,189,248,0.12)", accent="#38bdf8", text="#ffffff", label="Ocean"),
    Theme.SUNSET: ThemePalette(bg="#180c08", surface="#221209", border="rgba(251,146,60,0.15)", accent="#fb923c", text="#ffffff", label="Sunset"),
    Theme.GLASS: ThemePalette(bg="rgba(10,10,11,0.9)", surface="rgba(255,255,255,0.05)", border="rgba(255,255,255,0.1)", accent="#06b6d4", text="#ffffff", label="Glass"),
}


class BrandKit(BaseModel):
    """Global brand tokens; element props override them."""
    primary: str = "#a855f7"
    secondary: str = "#6366f1"
    accent: str = "#f472b6"
    radius: int = Field(default=16, ge=0)
    font: FontFamily = FontFamily.SANS
    glass: bool = True

    class Config:
        frozen = True


class BrandPatch(BaseModel):
    """Partial brand update."""
    primary: Optional[str] = None
    secondary: Optional[str] = None
    accent: Optional[str] = None
    radius: Optional[int] = Field(default=None, ge=0)
    font: Optional[FontFamily] = None
    glass: Optional[bool] = None


class DocumentState(BaseModel):
    """
    Full editable document.

    Treated as immutable: every mutation produces a new instance, and
    elements that were not touched are shared with the previous state.
    """
    elements: List[CanvasElement] = Field(default_factory=list)
    theme: Theme = Theme.DARK
    columns: int = Field(default=1, ge=1, le=3)
    brand: BrandKit = Field(default_factory=BrandKit)

    class Config:
        frozen = True

    def find(self, element_id: str) -> Optional[CanvasElement]:
        """Element with the given id, if present."""
        for element in self.elements:
            if element.id == element_id:
                return element
        return None

    def to_export_dict(self) -> dict:
        """Structured-data export payload (elements, theme, columns)."""
        return {
            "elements": [
                e.model_dump(mode="json", by_alias=True, exclude_none=True) for e in self.elements
            ],
            "theme": self.theme.value,
            "columns": self.columns,
        }

    def to_storage_dict(self) -> dict:
        """Full snapshot including brand, as written to disk."""
        data = self.to_export_dict()
        data["brand"] = self.brand.model_dump(mode="json")
        return data


class Project(BaseModel):
    """Named, timestamped snapshot of a document state."""
    id: str
    name: str
    state: DocumentState
    saved_at: str
    icon: Optional[str] = None

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "icon": self.icon,
            "savedAt": self.saved_at,
            "state": self.state.to_storage_dict(),
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Project":
        return cls(
            id=str(data.get("id", data.get("name", "project"))),
            name=data.get("name", "My Project"),
            state=DocumentState.model_validate(data.get("state", {})),
            saved_at=data.get("savedAt", ""),
            icon=data.get("icon"),
        )
