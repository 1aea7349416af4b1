# topmark:header:start
#
#   project      : htmlterm
#   file         : test_rules.py
#   file_relpath : tests/rendering/test_rules.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for the element rule table and its effects."""

from __future__ import annotations

import pytest

from htmlterm.parsing import parse_document
from htmlterm.rendering.rules import (
    BLOCK_ELEMENTS,
    DEFAULT_RULE,
    ELEMENT_RULES,
    IGNORED_ELEMENTS,
    FixedText,
    ImageLabel,
    LinkTarget,
    NoOp,
    Preformatted,
    StyledText,
    is_preformatted,
    rule_for,
)
from htmlterm.rendering.styles import BOLD_STYLE, RESET_SEQUENCE


def test_rule_table_is_read_only() -> None:
    """The rule table cannot be modified at runtime."""
    with pytest.raises(TypeError):
        ELEMENT_RULES["blink"] = DEFAULT_RULE  # type: ignore[index]


def test_classification_sets() -> None:
    """Block and ignore flags follow the classification sets."""
    for name in BLOCK_ELEMENTS:
        assert rule_for(name).block
    for name in IGNORED_ELEMENTS:
        assert rule_for(name).ignored
    assert rule_for("title").block and rule_for("title").ignored
    assert not rule_for("div").block


def test_unknown_and_non_element_nodes_get_default_rule() -> None:
    """Unknown tags and non-element nodes (name None) get the no-op rule."""
    assert rule_for("blink") is DEFAULT_RULE
    assert rule_for(None) is DEFAULT_RULE
    assert isinstance(DEFAULT_RULE.open, NoOp)
    assert isinstance(DEFAULT_RULE.close, NoOp)


def test_only_pre_is_preformatted() -> None:
    """Whitespace passthrough is tied to <pre>."""
    assert is_preformatted("pre")
    assert not is_preformatted("code")
    assert [name for name, rule in ELEMENT_RULES.items() if rule.preformatted] == ["pre"]


def test_styled_text_effect() -> None:
    """StyledText picks punctuation or escape sequences by the color flag."""
    node = parse_document("<b>x</b>").b
    assert node is not None
    opening, closing = StyledText(BOLD_STYLE, "*"), StyledText(BOLD_STYLE, "*", closing=True)

    assert opening.render(node, color=False) == "*"
    assert closing.render(node, color=False) == "*"
    assert opening.render(node, color=True) == BOLD_STYLE.open_sequence()
    assert closing.render(node, color=True) == RESET_SEQUENCE


def test_fixed_and_fence_effects_ignore_color() -> None:
    """Fixed text and fences are the same in both styles."""
    node = parse_document("<pre>x</pre>").pre
    assert node is not None

    for color in (False, True):
        assert FixedText("[").render(node, color=color) == "["
        assert Preformatted().render(node, color=color) == "```\n"
        assert Preformatted(closing=True).render(node, color=color) == "\n```"


def test_image_label_effect() -> None:
    """ImageLabel reads the alt attribute."""
    with_alt = parse_document("<img alt='a dog'>").img
    without_alt = parse_document("<img src='x.png'>").img
    assert with_alt is not None and without_alt is not None

    assert ImageLabel().render(with_alt, color=True) == "(image: a dog) "
    assert ImageLabel().render(without_alt, color=False) == "(image) "


def test_link_target_effect() -> None:
    """LinkTarget requires an href and no rel."""
    plain = parse_document("<a href='/x'>t</a>").a
    related = parse_document("<a href='/x' rel='next'>t</a>").a
    bare = parse_document("<a>t</a>").a
    assert plain is not None and related is not None and bare is not None

    assert LinkTarget().render(plain, color=False) == " (/x)"
    assert LinkTarget().render(related, color=False) == ""
    assert LinkTarget().render(bare, color=False) == ""


def test_links_have_no_opening_marker() -> None:
    """Links are only annotated after their text."""
    rule = rule_for("a")
    assert isinstance(rule.open, NoOp)
    assert isinstance(rule.close, LinkTarget)


def test_headings_have_no_closing_marker() -> None:
    """Heading styles end with the per-node reset, not a closing marker."""
    for level in range(1, 6):
        rule = rule_for(f"h{level}")
        assert isinstance(rule.open, StyledText)
        assert rule.open.plain == "#" * level + " "
        assert isinstance(rule.close, NoOp)
