from __future__ import annotations
import abc
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from lightdom.dom import ElementNode, TextNode


class NodeVisitor(abc.ABC):
    """One handler per node variant, called through Node.accept().

    Nodes do not walk their children for you. A visitor that wants the whole
    subtree calls accept() on each child from visit_element; one that doesn't
    stops at that depth.
    """

    @abc.abstractmethod
    def visit_text(self, node: TextNode) -> Any:
        ...

    @abc.abstractmethod
    def visit_element(self, node: ElementNode) -> Any:
        ...


class TagCountVisitor(NodeVisitor):
    """Counts element nodes, pre-order and depth-first. Text leaves are not counted."""

    def __init__(self) -> None:
        self.count = 0

    def reset(self) -> None:
        self.count = 0

    def visit_text(self, node: TextNode) -> int:
        return self.count

    def visit_element(self, node: ElementNode) -> int:
        self.count += 1
        for child in node.children:
            child.accept(self)
        return self.count
