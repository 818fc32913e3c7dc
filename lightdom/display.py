from __future__ import annotations
import abc
from typing import TYPE_CHECKING, Dict

from lightdom.markup import paired_tag

if TYPE_CHECKING:
    from lightdom.dom import ElementNode

BLOCK_WRAPPER_TAG = "div"
INLINE_WRAPPER_TAG = "span"
DEFAULT_DISPLAY = "block"


class DisplayStrategy(abc.ABC):
    """How an element presents itself through ElementNode.render().

    Independent of outer_html: the element's own tag and classes are not part of
    the rendered output, only its inner markup inside a generic container.
    Strategies are stateless, so one instance can be shared by any number of elements.
    """

    name: str = ""

    @abc.abstractmethod
    def render(self, element: ElementNode) -> str:
        ...

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class BlockDisplay(DisplayStrategy):
    name = "block"

    def render(self, element: ElementNode) -> str:
        return paired_tag(BLOCK_WRAPPER_TAG, "", element.inner_html)


class InlineDisplay(DisplayStrategy):
    name = "inline"

    def render(self, element: ElementNode) -> str:
        return paired_tag(INLINE_WRAPPER_TAG, "", element.inner_html)


BLOCK = BlockDisplay()
INLINE = InlineDisplay()

_BY_NAME: Dict[str, DisplayStrategy] = {BLOCK.name: BLOCK, INLINE.name: INLINE}


def display_for(name: str) -> DisplayStrategy:
    key = (name or "").strip().lower()
    try:
        return _BY_NAME[key]
    except KeyError:
        raise ValueError(f"unknown display {name!r}, expected one of: {', '.join(sorted(_BY_NAME))}") from None
