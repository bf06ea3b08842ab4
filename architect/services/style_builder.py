"""
Shared Style Builder
====================

Single mapping from element props (plus optional brand tokens) to visual
output. The markup and component exports, the stylesheet export and the
live preview all resolve visual properties through this module, so they
cannot drift apart.

Exported markup carries declarations as important arbitrary-property
classes (``![border-radius:16px]``) rather than inline style strings, so the
same fragment is valid in both the html document and the tsx component.
"""

import html
from typing import List, NamedTuple, Optional, Tuple

from ..models.element_models import ElementProps, FontSize, ShadowPreset, TextAlign, WidthMode
from ..models.document_models import BrandKit, FontFamily

DEFAULT_RADIUS = 16
PADDING_STEP_PX = 4
DEFAULT_IMAGE_URL = "https://picsum.photos/800/400"
DEFAULT_BADGE_COLOR = "#6366f1"
DEFAULT_BUTTON_COLOR = "#4f46e5"

FONT_SIZE_PX = {
    FontSize.XS: "11px",
    FontSize.SM: "13px",
    FontSize.BASE: "15px",
    FontSize.LG: "18px",
    FontSize.XL: "22px",
    FontSize.XXL: "28px",
}

WIDTH_VALUES = {
    WidthMode.AUTO: "auto",
    WidthMode.HALF: "50%",
    WidthMode.FULL: "100%",
}

SHADOW_VALUES = {
    ShadowPreset.NONE: "none",
    ShadowPreset.SOFT: "0 4px 12px rgba(0,0,0,0.1)",
    ShadowPreset.MEDIUM: "0 12px 24px rgba(0,0,0,0.2)",
    ShadowPreset.DEEP: "0 24px 48px rgba(0,0,0,0.4)",
    ShadowPreset.GLOW: "0 0 20px rgba(168,85,247,0.4)",
}

SHADOW_CLASSES = {
    ShadowPreset.NONE: "",
    ShadowPreset.SOFT: "shadow-md",
    ShadowPreset.MEDIUM: "shadow-lg",
    ShadowPreset.DEEP: "shadow-2xl",
    ShadowPreset.GLOW: "shadow-[0_0_20px_rgba(168,85,247,0.4)]",
}

FONT_FAMILY_CLASSES = {
    FontFamily.SANS: "",
    FontFamily.MONO: "font-mono",
    FontFamily.SERIF: "font-serif",
    FontFamily.DISPLAY: "font-display",
}

FONT_FAMILY_STACKS = {
    FontFamily.SANS: "ui-sans-serif, system-ui, sans-serif",
    FontFamily.MONO: "ui-monospace, SFMono-Regular, monospace",
    FontFamily.SERIF: "ui-serif, Georgia, serif",
    FontFamily.DISPLAY: "'Outfit', 'Inter', sans-serif",
}

GLASS_CLASSES = "backdrop-blur-md bg-white/5 border-white/10"


class StyleAttributes(NamedTuple):
    """Preset classes and declaration classes shared by every markup fragment."""
    presets: str
    declarations: str

    @property
    def classes(self) -> str:
        return join_classes(self.presets, self.declarations)


def is_css_gradient(value: str) -> bool:
    """True for CSS gradient functions, False for utility classes like 'from-x to-y'."""
    return "gradient(" in value


def effective_radius(props: ElementProps, brand: Optional[BrandKit] = None) -> Optional[int]:
    if props.radius is not None:
        return props.radius
    if brand is not None:
        return brand.radius
    return None


def effective_image_src(props: ElementProps, label: str) -> str:
    return props.image_url or label or DEFAULT_IMAGE_URL


def effective_badge_color(props: ElementProps, brand: Optional[BrandKit] = None) -> str:
    return props.badge_color or props.bg or (brand.secondary if brand else None) or DEFAULT_BADGE_COLOR


def resolve_declarations(props: ElementProps, brand: Optional[BrandKit] = None) -> List[Tuple[str, str]]:
    """
    CSS declarations for the fields present on ``props``.

    Absent fields are omitted, except radius and font family which fall
    back to the brand when one is given.
    """
    decls: List[Tuple[str, str]] = []

    radius = effective_radius(props, brand)
    if radius is not None:
        decls.append(("border-radius", f"{radius}px"))
    if props.padding is not None:
        decls.append(("padding", f"{props.padding * PADDING_STEP_PX}px"))
    if props.bg:
        decls.append(("background", props.bg))
    if props.gradient and is_css_gradient(props.gradient):
        decls.append(("background-image", props.gradient))
    if props.color:
        decls.append(("color", props.color))
    if props.border_color:
        decls.append(("border", f"1px solid {props.border_color}"))
    if props.align is not None:
        decls.append(("text-align", TextAlign(props.align).value))
    if props.font_size is not None:
        decls.append(("font-size", FONT_SIZE_PX[props.font_size]))
    if props.width is not None:
        decls.append(("width", WIDTH_VALUES[props.width]))
    if props.blur:
        decls.append(("backdrop-filter", f"blur({props.blur}px)"))
    if props.opacity is not None:
        decls.append(("opacity", format_fraction(props.opacity / 100)))
    if props.shadow is not None:
        decls.append(("box-shadow", SHADOW_VALUES[props.shadow]))
    if brand is not None and brand.font != FontFamily.SANS:
        decls.append(("font-family", FONT_FAMILY_STACKS[brand.font]))

    return decls


def format_fraction(value: float) -> str:
    """0.5 -> '0.5', 1.0 -> '1'."""
    text = f"{value:.2f}".rstrip("0").rstrip(".")
    return text or "0"


def declarations_to_style(decls: List[Tuple[str, str]]) -> str:
    return "; ".join(f"{name}: {value}" for name, value in decls)


def build_classes(props: ElementProps, brand: Optional[BrandKit] = None) -> str:
    """Brand glass overlay, brand font, shadow preset and utility gradient classes."""
    classes: List[str] = []
    if brand is not None and brand.glass:
        classes.append(GLASS_CLASSES)
    if brand is not None:
        classes.append(FONT_FAMILY_CLASSES[brand.font])
    if props.shadow is not None:
        classes.append(SHADOW_CLASSES[props.shadow])
    if props.gradient and not is_css_gradient(props.gradient):
        classes.append(f"bg-gradient-to-r {props.gradient}")
    return " ".join(c for c in classes if c)


def declaration_class(name: str, value: str) -> str:
    """'box-shadow', '0 4px 12px ...' -> '![box-shadow:0_4px_12px_...]'."""
    value = value.replace("_", "\\_").replace(" ", "_")
    return f"![{name}:{value}]"


def declarations_to_classes(decls: List[Tuple[str, str]]) -> str:
    return " ".join(declaration_class(name, value) for name, value in decls)


def build_style_attributes(props: ElementProps, brand: Optional[BrandKit] = None) -> StyleAttributes:
    return StyleAttributes(
        presets=build_classes(props, brand),
        declarations=declarations_to_classes(resolve_declarations(props, brand)),
    )


def join_classes(*parts: str) -> str:
    return " ".join(p for p in parts if p)


def escape_text(text: str) -> str:
    return html.escape(text, quote=False)


def escape_attr(value: str) -> str:
    return html.escape(value, quote=True)
