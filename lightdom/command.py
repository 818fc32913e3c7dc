from __future__ import annotations
import abc
import logging
from dataclasses import dataclass

from lightdom.dom import ElementNode

logger = logging.getLogger(__name__)


class Command(abc.ABC):
    @abc.abstractmethod
    def execute(self) -> None:
        ...


@dataclass(frozen=True)
class AddClassCommand(Command):
    """Deferred ElementNode.add_class(class_name).

    Each execute() appends again, so running it twice leaves the class in the list twice.
    """

    target: ElementNode
    class_name: str

    def execute(self) -> None:
        logger.debug("add class %r to <%s>", self.class_name, self.target.tag)
        self.target.add_class(self.class_name)
