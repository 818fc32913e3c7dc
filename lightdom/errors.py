"""
Errors raised by lightdom.

Structural problems in a tree being built derive from LightDomError. Passing the
wrong kind of object (a str where a node is expected, an unknown display keyword)
raises the usual TypeError / ValueError instead.
"""

from __future__ import annotations


class LightDomError(Exception):
    """Base class for all lightdom errors."""
    pass


class InvalidStructure(LightDomError):
    """An operation would produce a tree that cannot be serialized, e.g. a child under <br />."""

    def __init__(self, tag: str, message: str = "") -> None:
        self.tag = tag
        super().__init__(message or f"<{tag} /> is self-closing and can't have children")


__all__ = ["LightDomError", "InvalidStructure"]
