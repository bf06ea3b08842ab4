"""
Template and Premade Project Catalog
====================================

Built-in content the editor offers out of the box:
- TEMPLATE_REGISTRY: small element groups appended as one batch
- PREMADE_PROJECTS: complete documents that replace the canvas
"""

from typing import Dict, List, Optional

from pydantic import BaseModel

from ..models.element_models import CanvasElement, ElementType, props_with_defaults
from ..models.document_models import BrandKit, DocumentState, FontFamily, Project, Theme


CATALOG_SAVED_AT = "2026-01-01T00:00:00"


class Template(BaseModel):
    """Named group of elements; ids are placeholders replaced on insertion."""
    label: str
    icon: str
    elements: List[CanvasElement]


def _el(element_id: str, element_type: ElementType, label: str, **overrides) -> CanvasElement:
    return CanvasElement(id=element_id, type=element_type, label=label, props=props_with_defaults(**overrides))


TEMPLATE_REGISTRY: List[Template] = [
    Template(label="Pricing Table", icon="layout", elements=[
        _el("T1-1", ElementType.HERO, "Choose Your Plan", align="center", shadow="soft"),
        _el("T1-2", ElementType.CARD, "Starter - $9", shadow="medium", blur=5, bg="rgba(255,255,255,0.05)"),
        _el("T1-3", ElementType.BUTTON, "Get Started", radius=30),
    ]),
    Template(label="Glass Navbar", icon="layers", elements=[
        _el("T2-1", ElementType.NAVBAR, "ARCHITECT AI", blur=15, bg="rgba(255,255,255,0.03)", shadow="glow", radius=0),
    ]),
    Template(label="Pro Hero", icon="monitor", elements=[
        _el("T3-1", ElementType.HERO, "Design the Future",
            gradient="from-purple-600 to-blue-600", color="#fff", animation="slideUp"),
    ]),
]


def _premade(project_id: str, name: str, icon: str, theme: Theme, brand: BrandKit,
             elements: List[CanvasElement]) -> Project:
    return Project(
        id=project_id,
        name=name,
        icon=icon,
        saved_at=CATALOG_SAVED_AT,
        state=DocumentState(elements=elements, theme=theme, columns=1, brand=brand),
    )


PREMADE_PROJECTS: List[Project] = [
    _premade("P1", "SaaS Power-Up", "zap", Theme.DARK,
             BrandKit(primary="#a855f7", secondary="#6366f1", accent="#f472b6", radius=16),
             [
                 _el("S1-1", ElementType.NAVBAR, "NEURAL-LINK", blur=12, shadow="glow"),
                 _el("S1-2", ElementType.HERO, "Scale Beyond Limits", font_size="2xl", align="center"),
                 _el("S1-3", ElementType.CARD, "Ready to sync?", shadow="soft"),
                 _el("S1-4", ElementType.BUTTON, "Get Started", bg="#a855f7"),
             ]),
    _premade("P2", "Glass Storefront", "shopping-bag", Theme.GLASS,
             BrandKit(primary="#0ea5e9", secondary="#0284c7", accent="#f472b6", radius=24),
             [
                 _el("S2-1", ElementType.NAVBAR, "MODERN-MINT", blur=20),
                 _el("S2-2", ElementType.CARD, "Premium Watch", shadow="deep"),
                 _el("S2-3", ElementType.BADGE, "Limited Edition"),
                 _el("S2-4", ElementType.BUTTON, "Buy Now", bg="#0ea5e9"),
             ]),
    _premade("P3", "Pro Portfolio", "user", Theme.DARK,
             BrandKit(primary="#fbbf24", secondary="#f59e0b", accent="#fff", radius=12, font=FontFamily.DISPLAY),
             [
                 _el("S3-1", ElementType.HERO, "Creative Architect", align="center", font_size="2xl"),
                 _el("S3-2", ElementType.CARD, "Project Alpha", shadow="medium"),
                 _el("S3-3", ElementType.CARD, "Project Beta", shadow="medium"),
                 _el("S3-4", ElementType.BUTTON, "Contact Me", bg="#fbbf24", border_color="#fff"),
             ]),
    _premade("P4", "Event Landing", "calendar", Theme.DARK,
             BrandKit(primary="#f43f5e", secondary="#e11d48", accent="#fff", radius=20, font=FontFamily.DISPLAY),
             [
                 _el("S4-1", ElementType.NAVBAR, "GEN-Z CON", bg="#f43f5e", shadow="soft"),
                 _el("S4-2", ElementType.HERO, "The Future is Here", align="center"),
                 _el("S4-3", ElementType.BUTTON, "Register Now", bg="#f43f5e"),
             ]),
    _premade("P5", "Crypto Dashboard", "layout-list", Theme.SUNSET,
             BrandKit(primary="#f97316", secondary="#ea580c", accent="#fff", radius=10, font=FontFamily.MONO),
             [
                 _el("S5-1", ElementType.HERO, "Yield Master", gradient="from-orange-500 to-rose-500"),
                 _el("S5-2", ElementType.CARD, "Staking Pool", shadow="deep"),
                 _el("S5-3", ElementType.BUTTON, "Connect Wallet", bg="#f97316"),
             ]),
    _premade("P6", "News Terminal", "terminal", Theme.DARK,
             BrandKit(primary="#ef4444", secondary="#333", accent="#fff", radius=4, font=FontFamily.MONO, glass=False),
             [
                 _el("S6-1", ElementType.NAVBAR, "DEV CHRONICLE", bg="#000", border_color="#333"),
                 _el("S6-2", ElementType.BADGE, "Breaking News", bg="#ef4444"),
                 _el("S6-3", ElementType.CARD, "AI becomes sentient", shadow="medium"),
             ]),
    _premade("P7", "Oceanic Spa", "waves", Theme.OCEAN,
             BrandKit(primary="#0891b2", secondary="#0e7490", accent="#fff", radius=40, font=FontFamily.SERIF),
             [
                 _el("S7-1", ElementType.HERO, "Breathe Deeply", font_size="2xl", align="center"),
                 _el("S7-2", ElementType.CARD, "Detox Treatment", padding=24),
                 _el("S7-3", ElementType.BUTTON, "Book Now", bg="#06b6d4"),
             ]),
    _premade("P8", "Minimalist Blog", "pen-tool", Theme.LIGHT,
             BrandKit(primary="#111", secondary="#444", accent="#000", radius=0, font=FontFamily.SERIF, glass=False),
             [
                 _el("S8-1", ElementType.NAVBAR, "THOUGHTS", color="#000"),
                 _el("S8-2", ElementType.TEXT, "A collection of stories.", font_size="xl", align="left"),
                 _el("S8-3", ElementType.DIVIDER, ""),
             ]),
    _premade("P9", "Purple Night", "moon", Theme.PURPLE,
             BrandKit(primary="#a855f7", secondary="#7e22ce", accent="#fff", radius=32, font=FontFamily.DISPLAY),
             [
                 _el("S9-1", ElementType.NAVBAR, "NEON", bg="#581c87"),
                 _el("S9-2", ElementType.CARD, "Cyber Deck", shadow="glow"),
                 _el("S9-3", ElementType.BUTTON, "Enter Matrix", bg="#a855f7", shadow="glow"),
             ]),
    _premade("P10", "Glass Admin", "layout", Theme.DARK,
             BrandKit(primary="#3b82f6", secondary="#1e40af", accent="#60a5fa", radius=12),
             [
                 _el("S10-1", ElementType.NAVBAR, "OS-LINK", blur=16),
                 _el("S10-2", ElementType.CARD, "System Health", shadow="soft"),
                 _el("S10-3", ElementType.BADGE, "Online", bg="#10b981"),
             ]),
]


def _lookup_key(value: str) -> str:
    return value.strip().lower()


_TEMPLATES_BY_KEY: Dict[str, Template] = {_lookup_key(t.label): t for t in TEMPLATE_REGISTRY}
_PREMADE_BY_KEY: Dict[str, Project] = {
    **{_lookup_key(p.name): p for p in PREMADE_PROJECTS},
    **{_lookup_key(p.id): p for p in PREMADE_PROJECTS},
}


def get_template(name: str) -> Optional[Template]:
    """Template by label (case-insensitive)."""
    return _TEMPLATES_BY_KEY.get(_lookup_key(name))


def get_premade(name: str) -> Optional[Project]:
    """Premade project by name or id (case-insensitive)."""
    return _PREMADE_BY_KEY.get(_lookup_key(name))
