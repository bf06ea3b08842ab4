"""Tests for the prompt synthesis rule table."""

import pytest

from architect.canvas.document_store import DocumentStore
from architect.canvas.ids import IdAllocator
from architect.models.element_models import ElementType, ShadowPreset
from architect.services.prompt_synthesizer import (
    FALLBACK_CAPTION,
    PromptSynthesizer,
    SYNTHESIS_RULES,
    synthesize_elements,
)

T = ElementType


def _types(elements):
    return [e.type for e in elements]


def test_dashboard_prompt_produces_documented_batch():
    elements = synthesize_elements("build me a dashboard", IdAllocator(session="s"))

    assert _types(elements) == [T.NAVBAR, T.HERO, T.BADGE, T.DIVIDER, T.CARD, T.CARD, T.TEXT, T.BUTTON]
    assert elements[0].label == "Neural SaaS Platform"
    assert elements[-1].props.radius == 30
    assert elements[-1].props.shadow == ShadowPreset.GLOW


def test_unmatched_prompt_falls_back_to_generic_batch():
    elements = synthesize_elements("xyzzy", IdAllocator())

    assert _types(elements) == [T.HERO, T.BUTTON, T.TEXT]
    assert elements[0].label == "xyzzy"
    assert elements[1].label == "Initialize"
    assert elements[2].label == FALLBACK_CAPTION
    assert elements[2].props.opacity == 50


@pytest.mark.parametrize("prompt,expected", [
    ("Vreau un magazin online", "storefront"),
    ("my PROFILE page", "social"),
    ("portofoliu creativ", "portfolio"),
    ("a login screen", "login"),
    ("pagina de conexiune", "login"),
    ("user signup", "register"),
    ("formular de înregistrare", "register"),
    ("contact us", "contact"),
    ("homepage for a startup", "landing"),
    ("customer survey", "form"),
    ("SaaS analytics", "dashboard"),
])
def test_keywords_in_both_languages(prompt, expected):
    assert PromptSynthesizer().match(prompt).name == expected


def test_first_matching_rule_wins():
    elements = synthesize_elements("dashboard for my shop", IdAllocator())

    assert _types(elements)[0] == T.NAVBAR
    assert len(elements) == 8


def test_template_lengths_follow_rule_order():
    lengths = {rule.name: len(rule.template) for rule in SYNTHESIS_RULES}

    assert lengths == {
        "dashboard": 8, "storefront": 9, "social": 9, "portfolio": 8, "login": 7,
        "register": 6, "contact": 5, "landing": 6, "form": 6,
    }


def test_blank_prompt_produces_nothing():
    ids = IdAllocator()

    assert synthesize_elements("   ", ids) == []
    assert ids.counter == 0


def test_image_elements_carry_url_as_label():
    elements = synthesize_elements("my portfolio", IdAllocator())

    images = [e for e in elements if e.type == T.IMAGE]
    assert len(images) == 2
    assert all(e.label.startswith("https://images.unsplash.com/") for e in images)


def test_overrides_are_layered_on_defaults():
    hero = synthesize_elements("landing page", IdAllocator())[1]

    assert hero.props.gradient == "linear-gradient(to right, #06b6d4, #3b82f6)"
    assert hero.props.padding == 4
    assert hero.props.animation_duration == 0.5


def test_synthesis_ids_share_the_store_counter():
    store = DocumentStore(ids=IdAllocator(session="abc"))
    store.add_element(T.TEXT)

    batch = synthesize_elements("contact", store.ids)
    store.add_template_batch(batch)

    ids = [e.id for e in store.elements]
    assert ids[0] == "NODE-abc-1"
    assert ids[1:] == [f"AI-abc-{n}" for n in range(2, 7)]
    assert len(set(ids)) == len(ids)


def test_synthesis_does_not_touch_existing_elements():
    store = DocumentStore()
    store.add_element(T.CARD)
    before = store.elements[0]

    store.add_template_batch(synthesize_elements("dashboard", store.ids))

    assert store.elements[0] is before
    assert len(store.history.past) == 2
