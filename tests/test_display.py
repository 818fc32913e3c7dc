import logging

import pytest

from lightdom.display import BLOCK, INLINE, BlockDisplay, DisplayStrategy, InlineDisplay, display_for
from lightdom.dom import ElementNode, TagShape, TextNode


def _element(text="x"):
    p = ElementNode("p")
    p.add_class("lead")
    p.add_child(TextNode(text))
    return p


def test_block_is_default():
    p = _element()
    assert isinstance(p.display, BlockDisplay)
    assert p.render() == "<div>x</div>"


def test_block_and_inline_wrap_inner_html():
    p = _element()
    assert BlockDisplay().render(p) == "<div>x</div>"
    assert InlineDisplay().render(p) == "<span>x</span>"


def test_set_display_switches_render_only():
    p = _element()
    p.set_display(INLINE)
    assert p.render() == "<span>x</span>"
    assert p.outer_html == '<p class="lead">x</p>'
    p.set_display(BLOCK)
    assert p.render() == "<div>x</div>"


def test_set_display_by_name():
    p = _element()
    p.set_display("inline")
    assert p.display is INLINE
    p.set_display(" Block ")
    assert p.display is BLOCK


def test_unknown_display_name():
    with pytest.raises(ValueError):
        display_for("flex")
    p = _element()
    with pytest.raises(ValueError):
        p.set_display("grid")
    assert p.display is BLOCK


def test_set_display_rejects_other_objects():
    p = _element()
    with pytest.raises(TypeError):
        p.set_display(object())


def test_render_empty_and_self_closing():
    assert ElementNode("ul").render() == "<div></div>"
    br = ElementNode("br", TagShape.SELF_CLOSING)
    br.set_display(INLINE)
    assert br.render() == "<span></span>"


def test_render_nested_uses_children_outer_html():
    ul = ElementNode("ul")
    li = ElementNode("li")
    li.add_child(TextNode("Apples"))
    ul.add_child(li)
    ul.set_display(INLINE)
    assert ul.render() == "<span><li>Apples</li></span>"


def test_custom_strategy():
    class Bracketed(DisplayStrategy):
        name = "bracketed"

        def render(self, element):
            return "[" + element.inner_html + "]"

    p = _element("hi")
    p.set_display(Bracketed())
    assert p.render() == "[hi]"


def test_display_change_is_logged(caplog):
    p = _element()
    with caplog.at_level(logging.DEBUG, logger="lightdom.dom"):
        p.set_display(INLINE)
    assert any("<p> display BlockDisplay() -> InlineDisplay()" in r.getMessage() for r in caplog.records)
