"""
Live Preview Renderer
=====================

Renders the document as a standalone HTML page with inline styles, the
way the editor canvas shows it. Visual properties come from the shared
``resolve_declarations``; the theme palette fills in colors an element
leaves unset.
"""

import logging
from enum import Enum
from typing import Callable, Dict, List, Optional, Tuple

from ..models.element_models import CanvasElement, ElementType
from ..models.document_models import BrandKit, DocumentState, THEMES, ThemePalette
from .style_builder import (
    declarations_to_style,
    effective_badge_color,
    effective_image_src,
    escape_attr,
    escape_text,
    resolve_declarations,
)

logger = logging.getLogger(__name__)

CARD_PREVIEW_BODY = "Professional card component."
HERO_PREVIEW_BODY = "Build next-gen interfaces with our AI-powered architect tools."
HERO_CALL_TO_ACTION = "Launch Experience"
NAV_PREVIEW_LINKS = ("Home", "Features", "Solutions")


class PreviewMode(str, Enum):
    """Device frame width of the preview."""
    DESKTOP = "desktop"
    TABLET = "tablet"
    MOBILE = "mobile"


PREVIEW_WIDTHS = {
    PreviewMode.DESKTOP: "100%",
    PreviewMode.TABLET: "768px",
    PreviewMode.MOBILE: "375px",
}

GRID_COLUMNS = {1: "1fr", 2: "1fr 1fr", 3: "1fr 1fr 1fr"}

PreviewRule = Callable[[CanvasElement, List[Tuple[str, str]], ThemePalette, Optional[BrandKit]], str]


def _style(decls: List[Tuple[str, str]], **overrides: str) -> str:
    """Merge base declarations with per-type overrides (underscores become dashes)."""
    merged: Dict[str, str] = dict(decls)
    for name, value in overrides.items():
        merged[name.replace("_", "-")] = value
    return escape_attr(declarations_to_style(list(merged.items())))


def _with_fallbacks(decls: List[Tuple[str, str]], th: ThemePalette,
                    background: str) -> List[Tuple[str, str]]:
    names = {name for name, _ in decls}
    out = list(decls)
    if "background" not in names and background:
        out.append(("background", background))
    if "color" not in names:
        out.append(("color", th.text))
    return out


def _button(el: CanvasElement, decls, th: ThemePalette, brand: Optional[BrandKit] = None) -> str:
    base = _with_fallbacks(decls, th, th.accent)
    if not el.props.color:
        base = [(n, "#fff" if n == "color" else v) for n, v in base]
    return (
        f'<button style="{_style(base, font_weight="700", text_transform="uppercase", border="none")}">'
        f"{escape_text(el.label)}</button>"
    )


def _input(el: CanvasElement, decls, th: ThemePalette, brand: Optional[BrandKit] = None) -> str:
    base = _with_fallbacks(decls, th, th.border)
    return f'<input disabled placeholder="{escape_attr(el.label)}" style="{_style(base, display="block")}" />'


def _textarea(el: CanvasElement, decls, th: ThemePalette, brand: Optional[BrandKit] = None) -> str:
    base = _with_fallbacks(decls, th, th.border)
    return (
        f'<textarea disabled rows="3" placeholder="{escape_attr(el.label)}" '
        f'style="{_style(base, display="block", resize="none")}"></textarea>'
    )


def _text(el: CanvasElement, decls, th: ThemePalette, brand: Optional[BrandKit] = None) -> str:
    base = _with_fallbacks(decls, th, "")
    return f'<p style="{_style(base)}">{escape_text(el.label)}</p>'


def _select(el: CanvasElement, decls, th: ThemePalette, brand: Optional[BrandKit] = None) -> str:
    base = _with_fallbacks(decls, th, th.surface)
    return f'<select disabled style="{_style(base, display="block")}"><option>{escape_text(el.label)}</option></select>'


def _toggle(el: CanvasElement, decls, th: ThemePalette, brand: Optional[BrandKit] = None) -> str:
    base = _with_fallbacks(decls, th, "")
    switch = f"width: 44px; height: 24px; background: {th.accent}; border-radius: 12px; flex-shrink: 0"
    return (
        f'<label style="{_style(base, display="flex", align_items="center", gap="12px")}">'
        f'<span role="switch" style="{escape_attr(switch)}"></span>'
        f"<span>{escape_text(el.label)}</span></label>"
    )


def _badge(el: CanvasElement, decls, th: ThemePalette, brand: Optional[BrandKit] = None) -> str:
    color = effective_badge_color(el.props, brand)
    base = _with_fallbacks(decls, th, color)
    overrides = {"display": "inline-block", "font_weight": "700", "text_transform": "uppercase"}
    # badge look only where the element leaves size unset
    if el.props.font_size is None:
        overrides["font_size"] = "11px"
    if el.props.width is None:
        overrides["width"] = "auto"
    return f'<span style="{_style(base, **overrides)}">{escape_text(el.label)}</span>'


def _divider(el: CanvasElement, decls, th: ThemePalette, brand: Optional[BrandKit] = None) -> str:
    return f'<hr style="border: none; border-top: 1px solid {escape_attr(th.border)}; margin: 8px 0; width: 100%" />'


def _card(el: CanvasElement, decls, th: ThemePalette, brand: Optional[BrandKit] = None) -> str:
    base = _with_fallbacks(decls, th, th.surface)
    accent_bar = f"width: 40px; height: 4px; background: {th.accent}; border-radius: 2px; margin-bottom: 12px"
    return (
        f'<div style="{_style(base)}">'
        f'<div style="{escape_attr(accent_bar)}"></div>'
        f'<h3 style="font-weight: 800; font-size: 16px; margin-bottom: 8px">{escape_text(el.label)}</h3>'
        f'<p style="font-size: 13px; color: #888; line-height: 1.6">{CARD_PREVIEW_BODY}</p></div>'
    )


def _navbar(el: CanvasElement, decls, th: ThemePalette, brand: Optional[BrandKit] = None) -> str:
    base = _with_fallbacks(decls, th, th.surface)
    links = "".join(f"<span>{link}</span>" for link in NAV_PREVIEW_LINKS)
    return (
        f'<nav style="{_style(base, display="flex", align_items="center", justify_content="space-between")}">'
        f'<span style="font-weight: 900; font-style: italic; text-transform: uppercase">{escape_text(el.label)}</span>'
        f'<div style="display: flex; gap: 16px; font-size: 13px; color: #888">{links}</div></nav>'
    )


def _hero(el: CanvasElement, decls, th: ThemePalette, brand: Optional[BrandKit] = None) -> str:
    base = _with_fallbacks(decls, th, th.surface)
    cta = f"background: {th.accent}; color: #fff; border: none; border-radius: 20px; padding: 12px 32px; font-weight: 700"
    return (
        f'<div style="{_style(base)}">'
        f'<h2 style="font-weight: 900; font-size: 32px; font-style: italic; text-transform: uppercase; '
        f'margin-bottom: 12px">{escape_text(el.label)}</h2>'
        f'<p style="font-size: 15px; color: #888; max-width: 500px; margin: 0 auto 24px">{HERO_PREVIEW_BODY}</p>'
        f'<button style="{escape_attr(cta)}">{HERO_CALL_TO_ACTION}</button></div>'
    )


def _image(el: CanvasElement, decls, th: ThemePalette, brand: Optional[BrandKit] = None) -> str:
    src = effective_image_src(el.props, el.label)
    return (
        f'<img src="{escape_attr(src)}" alt="{escape_attr(el.label)}" '
        f'style="{_style(decls, display="block", object_fit="cover", height="220px")}" />'
    )


PREVIEW_RULES: Dict[ElementType, PreviewRule] = {
    ElementType.BUTTON: _button,
    ElementType.INPUT: _input,
    ElementType.TEXTAREA: _textarea,
    ElementType.TEXT: _text,
    ElementType.SELECT: _select,
    ElementType.TOGGLE: _toggle,
    ElementType.BADGE: _badge,
    ElementType.DIVIDER: _divider,
    ElementType.CARD: _card,
    ElementType.NAVBAR: _navbar,
    ElementType.HERO: _hero,
    ElementType.IMAGE: _image,
}


def render_element_preview(element: CanvasElement, state: DocumentState) -> str:
    th = THEMES[state.theme]
    decls = resolve_declarations(element.props, state.brand)
    fragment = PREVIEW_RULES[element.type](element, decls, th, state.brand)
    return f'<div class="el" data-id="{escape_attr(element.id)}">{fragment}</div>'


def render_preview(state: DocumentState, mode: PreviewMode = PreviewMode.DESKTOP) -> str:
    """Standalone preview page for the whole document."""
    th = THEMES[state.theme]
    items = "\n".join(f"    {render_element_preview(e, state)}" for e in state.elements)
    frame = (
        f"width: {PREVIEW_WIDTHS[PreviewMode(mode)]}; background: {th.surface}; "
        f"border: 1px solid {th.border}; border-radius: 32px; padding: 32px; "
        f"display: grid; grid-template-columns: {GRID_COLUMNS[state.columns]}; gap: 16px; align-content: start"
    )
    logger.debug(f"[CODEGEN] Preview rendered ({len(state.elements)} elements, theme={state.theme.value})")
    return (
        "<!DOCTYPE html>\n"
        '<html lang="en">\n'
        "<head>\n"
        '  <meta charset="UTF-8">\n'
        f"  <title>Preview - {escape_text(th.label)}</title>\n"
        "</head>\n"
        f'<body style="margin: 0; padding: 32px; background: {th.bg}; color: {th.text}">\n'
        f'  <div class="canvas" style="{escape_attr(frame)}">\n'
        f"{items}\n"
        "  </div>\n"
        "</body>\n"
        "</html>\n"
    )
