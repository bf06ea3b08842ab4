"""
Element Models for Architect Labs
=================================

Typed visual components placed on the page, their sparse property set,
and the per-type defaults used when a new element is created.
"""

from enum import Enum
from typing import Dict, List, Optional, Tuple
from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel


class ElementType(str, Enum):
    """Closed set of component kinds (render order = list order)."""
    BUTTON = "button"
    INPUT = "input"
    TEXTAREA = "textarea"
    TEXT = "text"
    SELECT = "select"
    TOGGLE = "toggle"
    BADGE = "badge"
    DIVIDER = "divider"
    CARD = "card"
    NAVBAR = "navbar"
    HERO = "hero"
    IMAGE = "image"


class FontSize(str, Enum):
    """Font size steps."""
    XS = "xs"
    SM = "sm"
    BASE = "base"
    LG = "lg"
    XL = "xl"
    XXL = "2xl"


class TextAlign(str, Enum):
    """Text alignment."""
    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"


class WidthMode(str, Enum):
    """Horizontal sizing of an element."""
    AUTO = "auto"
    HALF = "half"
    FULL = "full"


class ShadowPreset(str, Enum):
    """Named box-shadow presets."""
    NONE = "none"
    SOFT = "soft"
    MEDIUM = "medium"
    DEEP = "deep"
    GLOW = "glow"


class Animation(str, Enum):
    """Entry animations (preview only, carried through exports as data)."""
    NONE = "none"
    FADE_IN = "fadeIn"
    SLIDE_UP = "slideUp"
    SCALE_POP = "scalePop"
    ROTATE_IN = "rotateIn"


class ElementProps(BaseModel):
    """
    Sparse property set of an element.

    Every field is optional; ``None`` means absent and each renderer falls
    back to its own default. Serialized with camelCase names.
    """
    bg: Optional[str] = None
    color: Optional[str] = None
    border_color: Optional[str] = None
    font_size: Optional[FontSize] = None
    align: Optional[TextAlign] = None
    radius: Optional[int] = Field(default=None, ge=0)
    padding: Optional[int] = Field(default=None, ge=0)
    width: Optional[WidthMode] = None
    image_url: Optional[str] = None
    badge_color: Optional[str] = None
    columns: Optional[int] = Field(default=None, ge=1, le=3)
    blur: Optional[int] = Field(default=None, ge=0)
    opacity: Optional[int] = Field(default=None, ge=0, le=100)
    shadow: Optional[ShadowPreset] = None
    gradient: Optional[str] = None
    animation: Optional[Animation] = None
    animation_duration: Optional[float] = Field(default=None, ge=0)

    class Config:
        frozen = True
        populate_by_name = True
        alias_generator = to_camel

    def merged(self, patch: "ElementProps") -> "ElementProps":
        """Return a copy with every field set on ``patch`` overriding ours."""
        return self.model_copy(update=patch.model_dump(exclude_unset=True))


class CanvasElement(BaseModel):
    """An element placed on the canvas."""
    id: str
    type: ElementType
    label: str = ""
    props: ElementProps = Field(default_factory=ElementProps)

    class Config:
        frozen = True


class ComponentInfo(BaseModel):
    """Palette entry for a component kind."""
    type: ElementType
    label: str
    group: str


DEFAULT_PROPS = ElementProps(
    font_size=FontSize.BASE,
    align=TextAlign.LEFT,
    radius=16,
    padding=4,
    width=WidthMode.FULL,
    blur=0,
    opacity=100,
    shadow=ShadowPreset.NONE,
    animation=Animation.NONE,
    animation_duration=0.5,
)

DEFAULT_LABELS: Dict[ElementType, str] = {
    ElementType.BUTTON: "Click Me",
    ElementType.INPUT: "Enter value...",
    ElementType.TEXTAREA: "Write something...",
    ElementType.TEXT: "Sample Text",
    ElementType.SELECT: "Choose option",
    ElementType.TOGGLE: "Enable feature",
    ElementType.BADGE: "New",
    ElementType.DIVIDER: "",
    ElementType.CARD: "Card Title",
    ElementType.NAVBAR: "My App",
    ElementType.HERO: "Welcome to My App",
    ElementType.IMAGE: "https://picsum.photos/600/300",
}

_REGISTRY_ROWS: List[Tuple[ElementType, str, str]] = [
    (ElementType.BUTTON, "Button", "Basic"),
    (ElementType.INPUT, "Input", "Basic"),
    (ElementType.TEXTAREA, "Textarea", "Basic"),
    (ElementType.TEXT, "Text", "Basic"),
    (ElementType.SELECT, "Select", "Basic"),
    (ElementType.TOGGLE, "Toggle", "Basic"),
    (ElementType.BADGE, "Badge", "Basic"),
    (ElementType.DIVIDER, "Divider", "Basic"),
    (ElementType.CARD, "Card", "Layout"),
    (ElementType.NAVBAR, "Navbar", "Layout"),
    (ElementType.HERO, "Hero", "Layout"),
    (ElementType.IMAGE, "Image", "Media"),
]

COMPONENT_REGISTRY: List[ComponentInfo] = [
    ComponentInfo(type=t, label=label, group=group) for t, label, group in _REGISTRY_ROWS
]


def search_components(query: str = "", group: Optional[str] = None) -> List[ComponentInfo]:
    """Filter the palette by display label substring and optional group."""
    needle = query.strip().lower()
    return [
        c for c in COMPONENT_REGISTRY
        if (group is None or c.group == group) and (not needle or needle in c.label.lower())
    ]


def props_with_defaults(**overrides) -> ElementProps:
    """DEFAULT_PROPS with snake_case overrides applied."""
    return DEFAULT_PROPS.merged(ElementProps(**overrides))
