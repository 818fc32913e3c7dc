from __future__ import annotations
from typing import Sequence


def class_attribute(classes: Sequence[str]) -> str:
    # no classes -> no attribute at all, never class=""
    if not classes:
        return ""
    joined = " ".join(classes)
    return f' class="{joined}"'


def open_tag(tag: str, attrs: str) -> str:
    return f"<{tag}{attrs}>"


def close_tag(tag: str) -> str:
    return f"</{tag}>"


def paired_tag(tag: str, attrs: str, inner: str) -> str:
    return open_tag(tag, attrs) + inner + close_tag(tag)


def self_closing_tag(tag: str, attrs: str) -> str:
    return f"<{tag}{attrs} />"
