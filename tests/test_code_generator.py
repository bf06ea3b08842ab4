"""Tests for the four code exports and the shared style builder."""

import pytest

from architect.canvas.document_store import parse_document
from architect.models.document_models import BrandKit, DocumentState, FontFamily, Theme
from architect.models.element_models import (
    COMPONENT_REGISTRY,
    DEFAULT_LABELS,
    CanvasElement,
    ElementProps,
    ElementType,
    props_with_defaults,
)
from architect.services import code_generator as cg
from architect.services.preview_renderer import PREVIEW_RULES
from architect.services.style_builder import build_style_attributes, declaration_class, resolve_declarations


def _all_types_state(brand=None):
    elements = [
        CanvasElement(id=f"NODE-x-{i}", type=t, label=DEFAULT_LABELS[t], props=props_with_defaults())
        for i, t in enumerate(ElementType)
    ]
    return DocumentState(elements=elements, brand=brand or BrandKit())


def test_every_dispatch_table_covers_every_type():
    every = set(ElementType)

    assert set(cg.FRAGMENT_RULES) == every
    assert set(PREVIEW_RULES) == every
    assert set(DEFAULT_LABELS) == every
    assert {c.type for c in COMPONENT_REGISTRY} == every


@pytest.mark.parametrize("brand", [None, BrandKit(font=FontFamily.MONO, glass=False)])
def test_markup_and_component_exports_share_fragments(brand):
    state = _all_types_state()

    html_out = cg.generate_html(state.elements, brand)
    tsx_out = cg.generate_tsx(state.elements, brand)

    for fragment in cg.render_fragments(state.elements, brand):
        assert fragment in html_out
        assert fragment in tsx_out

    def body_lines(text):
        return [line.strip() for line in text.splitlines() if line.strip().startswith("<")
                and not line.strip().startswith(("<!DOCTYPE", "<html", "</html", "<head", "</head",
                                                 "<meta", "<title", "<script", "<style", "<body",
                                                 "</body", "<div className", "</div>"))]

    assert body_lines(html_out) == body_lines(tsx_out)


def test_fragments_follow_element_order():
    state = _all_types_state()
    html_out = cg.generate_html(state.elements)

    positions = [html_out.index(cg.render_fragment(e)) for e in state.elements if e.type != ElementType.DIVIDER]
    assert positions == sorted(positions)


def test_shells():
    html_out = cg.generate_html([])
    tsx_out = cg.generate_tsx([])

    assert html_out.startswith("<!DOCTYPE html>")
    assert '<script src="https://cdn.tailwindcss.com"></script>' in html_out
    assert '<body class="space-y-6 p-8">' in html_out
    assert tsx_out.startswith("// Generated by IA ARHITECTE\nimport React from 'react';")
    assert "export default function App()" in tsx_out


def test_fragment_content_per_type():
    def frag(element_type, label, **props):
        return cg.render_fragment(CanvasElement(id="a", type=element_type, label=label,
                                                props=ElementProps(**props)))

    assert frag(ElementType.INPUT, "Email").endswith('placeholder="Email" />')
    assert "<option>Pick</option>" in frag(ElementType.SELECT, "Pick")
    assert 'role="switch"' in frag(ElementType.TOGGLE, "Notify")
    assert "<span>Notify</span>" in frag(ElementType.TOGGLE, "Notify")
    assert frag(ElementType.DIVIDER, "ignored") == '<hr class="border-white/10 my-4" />'
    assert "<h3" in frag(ElementType.CARD, "Card") and cg.CARD_BODY in frag(ElementType.CARD, "Card")
    assert "<span class=\"text-sm opacity-60\">About</span>" in frag(ElementType.NAVBAR, "Nav")
    assert "<h1" in frag(ElementType.HERO, "Big") and cg.HERO_BODY in frag(ElementType.HERO, "Big")
    assert '<p class="text-left">Plain</p>' == frag(ElementType.TEXT, "Plain")


def test_image_source_verbatim_and_label_as_alt():
    url = "https://example.com/pic.png"
    by_label = cg.render_fragment(CanvasElement(id="i", type=ElementType.IMAGE, label=url))
    by_prop = cg.render_fragment(CanvasElement(id="i", type=ElementType.IMAGE, label="Alt",
                                               props=ElementProps(image_url=url)))

    assert f'src="{url}"' in by_label
    assert f'src="{url}"' in by_prop and 'alt="Alt"' in by_prop


def test_labels_are_escaped():
    element = CanvasElement(id="a", type=ElementType.BUTTON, label='<b>"hi"</b>')

    fragment = cg.render_fragment(element)

    assert "&lt;b&gt;" in fragment
    assert "<b>" not in fragment


def test_badge_colour_fallbacks():
    badge = CanvasElement(id="b", type=ElementType.BADGE, label="New")

    assert "bg-[#6366f1]/20" in cg.render_fragment(badge)
    assert "bg-[#222222]/20" in cg.render_fragment(badge, BrandKit(secondary="#222222"))
    own = badge.model_copy(update={"props": ElementProps(badge_color="#0f0")})
    assert "bg-[#0f0]/20" in cg.render_fragment(own, BrandKit(secondary="#222222"))


def test_brand_drives_button_and_shared_classes():
    button = CanvasElement(id="b", type=ElementType.BUTTON, label="Go")

    fragment = cg.render_fragment(button, BrandKit(primary="#123456", font=FontFamily.SERIF, glass=True))

    assert "bg-[#123456]" in fragment
    assert "font-serif" in fragment
    assert "backdrop-blur-md bg-white/5 border-white/10" in fragment


def test_stylesheet_empty_placeholder():
    assert cg.generate_css([]) == "/* Generated by IA ARHITECTE */\n\n/* No elements yet */\n"


def test_stylesheet_translates_props():
    element = CanvasElement(id="NODE-ab.c 1", type=ElementType.CARD, label="c", props=props_with_defaults(
        bg="#111", color="#eee", border_color="#333", font_size="2xl", width="half",
        blur=8, opacity=40, shadow="deep", padding=6, align="center",
    ))

    css = cg.generate_css([element])

    assert ".el-NODE-ab-c-1 {" in css
    for line in [
        "border-radius: 16px;", "padding: 24px;", "background: #111;", "color: #eee;",
        "border: 1px solid #333;", "text-align: center;", "font-size: 28px;", "width: 50%;",
        "backdrop-filter: blur(8px);", "opacity: 0.4;", "box-shadow: 0 24px 48px rgba(0,0,0,0.4);",
    ]:
        assert line in css


def test_stylesheet_omits_absent_fields():
    element = CanvasElement(id="x", type=ElementType.TEXT, label="t", props=ElementProps(bg="#fff"))

    css = cg.generate_css([element])

    assert css.endswith(".el-x {\n  background: #fff;\n}\n")


def test_gradient_kinds():
    css_grad = ElementProps(gradient="linear-gradient(to right, #a, #b)")
    utility = ElementProps(gradient="from-purple-600 to-blue-600")

    assert ("background-image", "linear-gradient(to right, #a, #b)") in resolve_declarations(css_grad)
    assert resolve_declarations(utility) == []
    assert "bg-gradient-to-r from-purple-600 to-blue-600" in build_style_attributes(utility).classes


def test_stylesheet_matches_markup_declaration_classes():
    element = CanvasElement(id="x", type=ElementType.HERO, label="h", props=props_with_defaults(bg="#000", radius=3))
    brand = BrandKit(font=FontFamily.DISPLAY)

    classes = build_style_attributes(element.props, brand).classes
    css = cg.generate_css([element], brand)

    for name, value in resolve_declarations(element.props, brand):
        assert declaration_class(name, value) in classes
        assert f"  {name}: {value};" in css


def test_declaration_classes_use_underscores_for_spaces():
    assert declaration_class("border-radius", "16px") == "![border-radius:16px]"
    assert declaration_class("box-shadow", "0 4px 12px rgba(0,0,0,0.1)") == "![box-shadow:0_4px_12px_rgba(0,0,0,0.1)]"
    assert declaration_class("font-family", "my_font, serif") == "![font-family:my\\_font,_serif]"


@pytest.mark.parametrize("brand", [None, BrandKit(font=FontFamily.DISPLAY)])
def test_component_export_has_no_inline_style_strings(brand):
    state = _all_types_state()
    button = CanvasElement(id="b", type=ElementType.BUTTON, label="Click Me", props=props_with_defaults())

    tsx_out = cg.generate_tsx([*state.elements, button], brand)

    assert 'style="' not in tsx_out
    assert "![border-radius:16px]" in cg.render_fragment(button, brand)
    assert "![padding:16px]" in cg.render_fragment(button, brand)


def test_brand_radius_is_only_a_fallback():
    brand = BrandKit(radius=40)

    assert ("border-radius", "40px") in resolve_declarations(ElementProps(), brand)
    assert ("border-radius", "8px") in resolve_declarations(ElementProps(radius=8), brand)


def test_json_export_round_trips():
    state = _all_types_state().model_copy(update={"theme": Theme.GLASS, "columns": 2})

    parsed = parse_document(cg.generate_json(state))

    assert parsed.elements == state.elements
    assert (parsed.theme, parsed.columns) == (Theme.GLASS, 2)


def test_generate_code_dispatch_and_filenames():
    state = _all_types_state()

    assert cg.generate_code("css", state) == cg.generate_css(state.elements, state.brand)
    assert cg.generate_code("json", state) == cg.generate_json(state)
    assert cg.export_filename("tsx") == "ia-arh-export.tsx"
    assert cg.export_filename("html") == "ia-arh-export.html"
    with pytest.raises(KeyError):
        cg.generate_code("pdf", state)
