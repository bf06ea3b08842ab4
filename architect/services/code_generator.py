"""
Code Generators
===============

Four pure exports over the element list:
- html: standalone document with one fragment per element
- tsx: the same fragments inside a component function
- css: one rule block per element
- json: lossless structured-data backup (round-trips through import)

Per-type fragments are shared by the html and tsx exports; only the outer
shell differs. All visual properties come from ``style_builder`` and are
expressed as classes, never as inline style strings.
"""

import json
import logging
from typing import Callable, Dict, List, NamedTuple, Optional, Sequence

from ..models.element_models import CanvasElement, ElementType, TextAlign
from ..models.document_models import BrandKit, DocumentState
from .style_builder import (
    DEFAULT_BUTTON_COLOR,
    StyleAttributes,
    build_style_attributes,
    effective_badge_color,
    effective_image_src,
    escape_attr,
    escape_text,
    join_classes,
    resolve_declarations,
)

logger = logging.getLogger(__name__)

FILE_STEM = "ia-arh-export"
GENERATED_BANNER = "Generated by IA ARHITECTE"
EMPTY_STYLESHEET = "/* No elements yet */"

CARD_BODY = "Sample content for this card component."
HERO_BODY = "Experience the next generation of digital architecture with our neural-driven design system."
NAV_LINKS = ("Home", "About")

FragmentRule = Callable[[CanvasElement, StyleAttributes, Optional[BrandKit]], str]


def _class_attr(classes: str) -> str:
    return f'class="{escape_attr(classes)}"'


def _button(el: CanvasElement, sa: StyleAttributes, brand: Optional[BrandKit]) -> str:
    primary = brand.primary if brand else DEFAULT_BUTTON_COLOR
    classes = join_classes(sa.classes, f"bg-[{primary}] hover:opacity-90 text-white font-bold transition-all")
    return f"<button {_class_attr(classes)}>{escape_text(el.label)}</button>"


def _input(el: CanvasElement, sa: StyleAttributes, brand: Optional[BrandKit]) -> str:
    classes = join_classes("w-full", sa.classes, "border border-white/10 bg-white/5 outline-none")
    return f'<input {_class_attr(classes)} placeholder="{escape_attr(el.label)}" />'


def _textarea(el: CanvasElement, sa: StyleAttributes, brand: Optional[BrandKit]) -> str:
    classes = join_classes("w-full", sa.classes, "border border-white/10 bg-white/5 outline-none")
    return f'<textarea {_class_attr(classes)} placeholder="{escape_attr(el.label)}"></textarea>'


def _text(el: CanvasElement, sa: StyleAttributes, brand: Optional[BrandKit]) -> str:
    align = TextAlign(el.props.align or TextAlign.LEFT).value
    classes = join_classes(sa.classes, f"text-{align}")
    return f"<p {_class_attr(classes)}>{escape_text(el.label)}</p>"


def _select(el: CanvasElement, sa: StyleAttributes, brand: Optional[BrandKit]) -> str:
    classes = join_classes("w-full", sa.classes, "border border-white/10 bg-white/5 outline-none")
    return f"<select {_class_attr(classes)}><option>{escape_text(el.label)}</option></select>"


def _toggle(el: CanvasElement, sa: StyleAttributes, brand: Optional[BrandKit]) -> str:
    classes = join_classes("flex items-center gap-2", sa.classes)
    return (
        f"<label {_class_attr(classes)}>"
        f'<span class="w-10 h-6 bg-white/20 rounded-full" role="switch" aria-checked="false"></span>'
        f"<span>{escape_text(el.label)}</span></label>"
    )


def _badge(el: CanvasElement, sa: StyleAttributes, brand: Optional[BrandKit]) -> str:
    color = effective_badge_color(el.props, brand)
    classes = join_classes(
        "px-2 py-1 text-xs font-medium", sa.classes,
        f"bg-[{color}]/20 text-[{color}] border border-[{color}]/30",
    )
    return f"<span {_class_attr(classes)}>{escape_text(el.label)}</span>"


def _divider(el: CanvasElement, sa: StyleAttributes, brand: Optional[BrandKit]) -> str:
    return '<hr class="border-white/10 my-4" />'


def _card(el: CanvasElement, sa: StyleAttributes, brand: Optional[BrandKit]) -> str:
    classes = join_classes(sa.classes, "border border-white/10 bg-white/5")
    return (
        f"<div {_class_attr(classes)}>"
        f'<h3 class="text-lg font-bold mb-2">{escape_text(el.label)}</h3>'
        f'<p class="text-white/60 text-sm">{CARD_BODY}</p></div>'
    )


def _navbar(el: CanvasElement, sa: StyleAttributes, brand: Optional[BrandKit]) -> str:
    classes = join_classes("w-full", sa.classes, "border-b border-white/10 bg-white/5 flex items-center justify-between")
    links = "".join(f'<span class="text-sm opacity-60">{link}</span>' for link in NAV_LINKS)
    return (
        f"<nav {_class_attr(classes)}>"
        f'<span class="font-bold text-xl">{escape_text(el.label)}</span>'
        f'<div class="flex gap-4">{links}</div></nav>'
    )


def _hero(el: CanvasElement, sa: StyleAttributes, brand: Optional[BrandKit]) -> str:
    align = TextAlign(el.props.align or TextAlign.CENTER).value
    classes = join_classes("w-full py-20 px-6", sa.classes, f"text-{align} border border-white/10")
    return (
        f"<section {_class_attr(classes)}>"
        f'<h1 class="text-4xl font-black mb-4">{escape_text(el.label)}</h1>'
        f'<p class="text-xl opacity-70 max-w-2xl mx-auto">{HERO_BODY}</p></section>'
    )


def _image(el: CanvasElement, sa: StyleAttributes, brand: Optional[BrandKit]) -> str:
    src = effective_image_src(el.props, el.label)
    classes = join_classes("w-full h-auto", sa.classes, "border border-white/10")
    return f'<img src="{escape_attr(src)}" {_class_attr(classes)} alt="{escape_attr(el.label)}" />'


FRAGMENT_RULES: Dict[ElementType, FragmentRule] = {
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


def render_fragment(element: CanvasElement, brand: Optional[BrandKit] = None) -> str:
    """Markup for a single element, identical in the html and tsx exports."""
    rule = FRAGMENT_RULES[element.type]
    return rule(element, build_style_attributes(element.props, brand), brand)


def render_fragments(elements: Sequence[CanvasElement], brand: Optional[BrandKit] = None) -> List[str]:
    return [render_fragment(e, brand) for e in elements]


def generate_html(elements: Sequence[CanvasElement], brand: Optional[BrandKit] = None) -> str:
    body = "\n\n".join(f"  {fragment}" for fragment in render_fragments(elements, brand))
    return (
        "<!DOCTYPE html>\n"
        '<html lang="en">\n'
        "<head>\n"
        '  <meta charset="UTF-8">\n'
        '  <meta name="viewport" content="width=device-width, initial-scale=1.0">\n'
        "  <title>IA Architecte Export</title>\n"
        '  <script src="https://cdn.tailwindcss.com"></script>\n'
        "  <style>body { background: #0a0a0b; color: #fff; font-family: sans-serif; padding: 2rem; }</style>\n"
        "</head>\n"
        '<body class="space-y-6 p-8">\n'
        f"{body}\n"
        "</body>\n"
        "</html>\n"
    )


def generate_tsx(elements: Sequence[CanvasElement], brand: Optional[BrandKit] = None) -> str:
    body = "\n\n".join(f"      {fragment}" for fragment in render_fragments(elements, brand))
    return (
        f"// {GENERATED_BANNER}\n"
        "import React from 'react';\n"
        "\n"
        "export default function App() {\n"
        "  return (\n"
        '    <div className="p-8 space-y-6 bg-[#0a0a0b] min-h-screen text-white">\n'
        f"{body}\n"
        "    </div>\n"
        "  );\n"
        "}\n"
    )


def selector_for(element: CanvasElement) -> str:
    """Class selector derived from the element id (non-alphanumerics become '-')."""
    sid = "".join(ch if ch.isascii() and ch.isalnum() else "-" for ch in element.id)
    return f".el-{sid}"


def generate_css(elements: Sequence[CanvasElement], brand: Optional[BrandKit] = None) -> str:
    rules = []
    for element in elements:
        decls = resolve_declarations(element.props, brand)
        lines = [f"  {name}: {value};" for name, value in decls]
        rules.append("\n".join([f"{selector_for(element)} {{", *lines, "}"]))
    content = "\n\n".join(rules) if rules else EMPTY_STYLESHEET
    return f"/* {GENERATED_BANNER} */\n\n{content}\n"


def generate_json(state: DocumentState) -> str:
    return json.dumps(state.to_export_dict(), indent=2, ensure_ascii=False)


class ExportFormat(NamedTuple):
    extension: str
    media_type: str
    render: Callable[[DocumentState], str]


EXPORT_FORMATS: Dict[str, ExportFormat] = {
    "tsx": ExportFormat("tsx", "text/plain", lambda s: generate_tsx(s.elements, s.brand)),
    "html": ExportFormat("html", "text/html", lambda s: generate_html(s.elements, s.brand)),
    "json": ExportFormat("json", "application/json", generate_json),
    "css": ExportFormat("css", "text/css", lambda s: generate_css(s.elements, s.brand)),
}


def generate_code(fmt: str, state: DocumentState) -> str:
    """Generated text for ``fmt``; raises KeyError for unknown formats."""
    export = EXPORT_FORMATS[fmt]
    code = export.render(state)
    logger.info(f"[CODEGEN] Generated {fmt} ({len(state.elements)} elements, {len(code)} chars)")
    return code


def export_filename(fmt: str) -> str:
    return f"{FILE_STEM}.{EXPORT_FORMATS[fmt].extension}"
