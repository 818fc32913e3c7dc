from __future__ import annotations
import abc
import enum
import logging
from dataclasses import dataclass, field
from typing import Any, Iterator, List, Optional, Tuple, Union

from lightdom.display import DEFAULT_DISPLAY, DisplayStrategy, display_for
from lightdom.errors import InvalidStructure
from lightdom.markup import class_attribute, close_tag, open_tag, self_closing_tag

logger = logging.getLogger(__name__)


class TagShape(enum.Enum):
    SELF_CLOSING = "self-closing"
    PAIRED = "paired"


class Node(abc.ABC):
    """A node of the tree.

    outer_html / inner_html are computed from the current subtree on every access;
    nothing is cached, so appending to a child shows up in every ancestor right away.
    """

    parent: Optional["ElementNode"] = None

    @property
    @abc.abstractmethod
    def outer_html(self) -> str:
        ...

    @property
    @abc.abstractmethod
    def inner_html(self) -> str:
        ...

    @abc.abstractmethod
    def accept(self, visitor: Any) -> Any:
        """Hand this node to the visitor's handler for its variant and return what it returns."""
        ...

    def _attach(self, parent: ElementNode) -> None:
        self.parent = parent


@dataclass(frozen=True, eq=False)
class TextNode(Node):
    text: str = ""

    # emitted verbatim, no escaping
    @property
    def outer_html(self) -> str:
        return self.text

    @property
    def inner_html(self) -> str:
        return self.text

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_text(self)

    def _attach(self, parent: ElementNode) -> None:
        # text is frozen; the owning element is the only writer of parent
        object.__setattr__(self, "parent", parent)

    def __repr__(self) -> str:
        return f"<TextNode {self.text!r}>"


class NodeList:
    """Append-only children of an element, in insertion order."""

    def __init__(self) -> None:
        self._nodes: List[Node] = []

    def _append(self, node: Node) -> None:
        self._nodes.append(node)

    def __iter__(self) -> Iterator[Node]:
        return iter(self._nodes)

    def __reversed__(self) -> Iterator[Node]:
        return reversed(self._nodes)

    def __len__(self) -> int:
        return len(self._nodes)

    def __getitem__(self, index: int) -> Node:
        return self._nodes[index]

    def __repr__(self) -> str:
        return f"NodeList({self._nodes!r})"


_FIXED_FIELDS = ("tag", "shape")


@dataclass(eq=False)
class ElementNode(Node):
    tag: str
    shape: TagShape = TagShape.PAIRED
    _classes: List[str] = field(default_factory=list, init=False, repr=False)
    _children: NodeList = field(default_factory=NodeList, init=False, repr=False)
    _display: DisplayStrategy = field(default_factory=lambda: display_for(DEFAULT_DISPLAY), init=False, repr=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "shape", TagShape(self.shape))

    def __setattr__(self, name: str, value: Any) -> None:
        if name in _FIXED_FIELDS and name in self.__dict__:
            raise AttributeError(f"{name} of <{self.tag}> is fixed at construction")
        super().__setattr__(name, value)

    @property
    def is_self_closing(self) -> bool:
        return self.shape is TagShape.SELF_CLOSING

    @property
    def classes(self) -> Tuple[str, ...]:
        return tuple(self._classes)

    @property
    def children(self) -> NodeList:
        return self._children

    @property
    def display(self) -> DisplayStrategy:
        return self._display

    def add_class(self, name: str) -> None:
        # duplicates are kept, order is insertion order
        self._classes.append(name)

    def add_child(self, node: Node) -> None:
        if self.is_self_closing:
            logger.debug("rejected child %r for self-closing <%s>", node, self.tag)
            raise InvalidStructure(self.tag)
        if not isinstance(node, Node):
            raise TypeError(f"expected a Node, got {type(node).__name__}")
        if node.parent is not None:
            raise InvalidStructure(self.tag, f"{node!r} already belongs to <{node.parent.tag}>")
        p: Optional[ElementNode] = self
        while p is not None:
            if p is node:
                raise InvalidStructure(self.tag, f"{node!r} is <{self.tag}> or one of its ancestors")
            p = p.parent
        node._attach(self)
        self._children._append(node)
        logger.debug("appended %r to <%s> (%d children)", node, self.tag, len(self._children))

    def set_display(self, display: Union[DisplayStrategy, str]) -> None:
        if isinstance(display, str):
            display = display_for(display)
        elif not isinstance(display, DisplayStrategy):
            raise TypeError(f"expected a DisplayStrategy or display name, got {type(display).__name__}")
        logger.debug("<%s> display %r -> %r", self.tag, self._display, display)
        self._display = display

    def render(self) -> str:
        return self._display.render(self)

    @property
    def inner_html(self) -> str:
        return "".join(_serialize(child) for child in self._children)

    @property
    def outer_html(self) -> str:
        return _serialize(self)

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_element(self)

    def __repr__(self) -> str:
        if self.is_self_closing:
            return f"<ElementNode {self.tag} />"
        return f"<ElementNode {self.tag} children={len(self._children)}>"


def _serialize(node: Node) -> str:
    # explicit stack, so depth is not bounded by the interpreter's recursion limit
    out: List[str] = []
    stack: List[Union[Node, str]] = [node]
    while stack:
        item = stack.pop()
        if isinstance(item, str):
            out.append(item)
        elif isinstance(item, ElementNode):
            attrs = class_attribute(item._classes)
            if item.is_self_closing:
                out.append(self_closing_tag(item.tag, attrs))
                continue
            out.append(open_tag(item.tag, attrs))
            stack.append(close_tag(item.tag))
            stack.extend(reversed(item.children))
        else:
            out.append(item.outer_html)
    return "".join(out)
