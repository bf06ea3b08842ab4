"""
Prompt Synthesis Engine
=======================

Maps a free-text prompt (English or Romanian) to an ordered batch of new
canvas elements. Rules are evaluated top to bottom against the lower-cased
prompt by keyword containment; the first matching rule wins. Prompts that
match nothing get a generic batch headed by the prompt itself.

The engine never touches existing elements. Its only side effect is
advancing the shared id allocator.
"""

import logging
from typing import Any, Dict, List, NamedTuple, Optional, Sequence, Tuple

from ..canvas.ids import IdAllocator, SYNTHESIS_PREFIX
from ..models.element_models import CanvasElement, ElementType, props_with_defaults

logger = logging.getLogger(__name__)

# (type, label, prop overrides in snake_case)
ElementSpec = Tuple[ElementType, str, Dict[str, Any]]

BUTTON, INPUT, TEXTAREA, TEXT = ElementType.BUTTON, ElementType.INPUT, ElementType.TEXTAREA, ElementType.TEXT
SELECT, TOGGLE, BADGE, DIVIDER = ElementType.SELECT, ElementType.TOGGLE, ElementType.BADGE, ElementType.DIVIDER
CARD, NAVBAR, HERO, IMAGE = ElementType.CARD, ElementType.NAVBAR, ElementType.HERO, ElementType.IMAGE


class SynthesisRule(NamedTuple):
    name: str
    keywords: Tuple[str, ...]
    template: Tuple[ElementSpec, ...]

    def matches(self, text: str) -> bool:
        return any(k in text for k in self.keywords)


SYNTHESIS_RULES: List[SynthesisRule] = [
    SynthesisRule("dashboard", ("saas", "dashboard", "panou", "panel"), (
        (NAVBAR, "Neural SaaS Platform", {"blur": 15, "shadow": "glow"}),
        (HERO, "Accelerate Your Protocol", {
            "align": "center", "animation": "slideUp",
            "gradient": "linear-gradient(to right, #a855f7, #6366f1)",
        }),
        (BADGE, "Live Performance: 99.9%", {"align": "center", "bg": "rgba(168,85,247,0.1)"}),
        (DIVIDER, "", {}),
        (CARD, "Total Revenue", {"bg": "rgba(255,255,255,0.03)", "shadow": "soft"}),
        (CARD, "Active Nodes", {"bg": "rgba(255,255,255,0.03)", "shadow": "soft"}),
        (TEXT, "Neural Sync Progress", {"font_size": "sm", "align": "center"}),
        (BUTTON, "Enter Console", {"radius": 30, "shadow": "glow"}),
    )),
    SynthesisRule("storefront", ("magazin", "shop", "ecommerce", "store"), (
        (NAVBAR, "GLITCH STORE", {"shadow": "soft"}),
        (HERO, "Future Wear 2026", {"align": "center", "animation": "scalePop"}),
        (IMAGE, "https://images.unsplash.com/photo-1523275335684-37898b6baf30?w=800", {"radius": 24, "shadow": "medium"}),
        (CARD, "Quantum Watch - $299", {"align": "center", "blur": 5}),
        (BUTTON, "Add to Cart", {"bg": "#6366f1", "radius": 12}),
        (CARD, "Neural Glasses - $550", {"align": "center", "blur": 5}),
        (BUTTON, "Buy Now", {"bg": "#a855f7", "radius": 12}),
        (DIVIDER, "", {}),
        (TEXT, "Free shipping across the Metaverse", {"align": "center", "font_size": "xs"}),
    )),
    SynthesisRule("social", ("social", "network", "profil", "profile"), (
        (NAVBAR, "Connect.AI", {"blur": 10}),
        (IMAGE, "https://images.unsplash.com/photo-1535713875002-d1d0cf377fde?w=200", {
            "radius": 100, "width": "auto", "align": "center", "shadow": "glow",
        }),
        (TEXT, "Agent Anderson", {"align": "center", "font_size": "xl", "color": "#fff"}),
        (BADGE, "Verified AI", {"align": "center", "bg": "rgba(6,182,212,0.2)"}),
        (DIVIDER, "", {}),
        (TEXT, "Interests: Neural Webs, 4D Art, Byte-shifting", {"align": "center", "font_size": "sm"}),
        (BUTTON, "Follow Protocol", {"radius": 24, "gradient": "linear-gradient(to right, #0ea5e9, #22d3ee)"}),
        (CARD, "Recent Broadcast", {"bg": "rgba(255,255,255,0.02)"}),
        (TEXT, "Synthesizing new dimensions today. Stay tuned.", {"font_size": "sm", "padding": 4}),
    )),
    SynthesisRule("portfolio", ("portfolio", "portofoliu", "creativ"), (
        (NAVBAR, "STUDIO.ARCH", {"shadow": "glow"}),
        (HERO, "Creative Synthesis", {"animation": "fadeIn", "align": "left"}),
        (DIVIDER, "", {}),
        (IMAGE, "https://images.unsplash.com/photo-1460925895917-afdab827c52f?w=800", {"radius": 32}),
        (TEXT, "PROJECT ALPHA", {"font_size": "lg", "align": "left"}),
        (IMAGE, "https://images.unsplash.com/photo-1504384308090-c894fdcc538d?w=800", {"radius": 32}),
        (TEXT, "PROJECT BETA", {"font_size": "lg", "align": "left"}),
        (BUTTON, "Collaborate", {"radius": 0, "border_color": "#fff", "bg": "transparent"}),
    )),
    SynthesisRule("login", ("login", "conexiune", "sign in"), (
        (HERO, "Welcome Back", {"animation": "scalePop"}),
        (TEXT, "Access the Neural Hub", {"align": "center", "font_size": "sm", "opacity": 60}),
        (INPUT, "Email address", {}),
        (INPUT, "Password", {}),
        (TOGGLE, "Remember my Signature", {}),
        (BUTTON, "Enter Protocol", {"shadow": "glow"}),
        (TEXT, "Forgot sequence?", {"align": "center", "font_size": "xs", "opacity": 50}),
    )),
    SynthesisRule("register", ("register", "signup", "înregistr"), (
        (HERO, "Create Identity", {"gradient": "linear-gradient(to right, #f97316, #facc15)"}),
        (INPUT, "Full Name", {}),
        (INPUT, "Email", {}),
        (INPUT, "Password", {}),
        (TOGGLE, "Agree to Meta-Terms", {}),
        (BUTTON, "Manifest Account", {"radius": 12}),
    )),
    SynthesisRule("contact", ("contact", "mesaj"), (
        (HERO, "Open Frequencies", {"align": "center"}),
        (INPUT, "Your name", {}),
        (INPUT, "Email", {}),
        (TEXTAREA, "Your message...", {}),
        (BUTTON, "Transmit", {"shadow": "soft"}),
    )),
    SynthesisRule("landing", ("landing", "homepage", "acasa"), (
        (NAVBAR, "Aether UI", {"blur": 15}),
        (HERO, "Design the Future", {
            "animation": "slideUp", "gradient": "linear-gradient(to right, #06b6d4, #3b82f6)",
        }),
        (BADGE, "v2.0 Beta Live", {"align": "center"}),
        (CARD, "Quantum Speed", {"blur": 5}),
        (CARD, "Neural Security", {"blur": 5}),
        (BUTTON, "Get Started", {"radius": 32, "shadow": "glow"}),
    )),
    SynthesisRule("form", ("form", "formular", "survey"), (
        (TEXT, "Survey Protocol", {"font_size": "xl", "align": "center"}),
        (INPUT, "Your Name", {}),
        (SELECT, "Experience Level", {}),
        (TEXTAREA, "Feedback / Notes", {}),
        (TOGGLE, "Receive Updates", {}),
        (BUTTON, "Submit Data", {"radius": 8}),
    )),
]

FALLBACK_RULE_NAME = "generic"
FALLBACK_CAPTION = "Contextual components synthesized based on your prompt."


def fallback_template(prompt: str) -> Tuple[ElementSpec, ...]:
    return (
        (HERO, prompt, {"animation": "fadeIn"}),
        (BUTTON, "Initialize", {"shadow": "soft"}),
        (TEXT, FALLBACK_CAPTION, {"align": "center", "opacity": 50}),
    )


class PromptSynthesizer:
    """Deterministic rule table from prompt text to element batches."""

    def __init__(self, rules: Optional[Sequence[SynthesisRule]] = None):
        self.rules = list(rules if rules is not None else SYNTHESIS_RULES)

    def match(self, prompt: str) -> Optional[SynthesisRule]:
        """First rule whose keywords occur in the lower-cased prompt."""
        text = prompt.lower()
        for rule in self.rules:
            if rule.matches(text):
                return rule
        return None

    def synthesize(self, prompt: str, ids: IdAllocator) -> List[CanvasElement]:
        """
        Build the element batch for ``prompt``.

        Args:
            prompt: Free-form user text
            ids: Shared allocator; one id is consumed per produced element

        Returns:
            Ordered list of new elements (empty for a blank prompt)
        """
        if not prompt.strip():
            return []

        rule = self.match(prompt)
        template = rule.template if rule else fallback_template(prompt)
        elements = [
            CanvasElement(
                id=ids.next_id(SYNTHESIS_PREFIX),
                type=element_type,
                label=label,
                props=props_with_defaults(**overrides),
            )
            for element_type, label, overrides in template
        ]
        logger.info(
            f"[SYNTHESIS] Prompt matched '{rule.name if rule else FALLBACK_RULE_NAME}' "
            f"-> {len(elements)} elements"
        )
        return elements


# Singleton instance
_synthesizer = None


def get_prompt_synthesizer() -> PromptSynthesizer:
    """Get singleton PromptSynthesizer instance."""
    global _synthesizer
    if _synthesizer is None:
        _synthesizer = PromptSynthesizer()
    return _synthesizer


def synthesize_elements(prompt: str, ids: IdAllocator) -> List[CanvasElement]:
    """Convenience function for the default rule table."""
    return get_prompt_synthesizer().synthesize(prompt, ids)
