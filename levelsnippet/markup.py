"""
a tiny tree of html nodes that writes itself to a text stream

nothing is escaped, callers are responsible for the text they put in
"""

from abc import abstractmethod
from io import StringIO
from typing import Any, TextIO


class Node:
    @abstractmethod
    def render(self, out: TextIO) -> None:
        pass

    def to_string(self) -> str:
        buffer = StringIO()
        self.render(buffer)
        return buffer.getvalue()


class Text(Node):
    def __init__(self, text: Any) -> None:
        self.text = text

    def render(self, out: TextIO) -> None:
        out.write(str(self.text))


class Element(Node):
    def __init__(
        self,
        name: str,
        attributes: dict[str, str] | None = None,
        children: tuple[Node, ...] = (),
    ) -> None:
        self.name = name
        self.attributes = attributes or {}
        self.children = children

    def render(self, out: TextIO) -> None:
        out.write(f"<{self.name}")
        for key, value in self.attributes.items():
            out.write(f' {key}="{value}"')
        out.write(">")
        for child in self.children:
            child.render(out)
        out.write(f"</{self.name}>")


class Conditional(Node):
    "renders inner only when guard isn't None"

    def __init__(self, guard: Any, inner: Node) -> None:
        self.guard = guard
        self.inner = inner

    def render(self, out: TextIO) -> None:
        if self.guard is not None:
            self.inner.render(out)


def t(text: Any) -> Text:
    return Text(text)


def tag(name: str, *children: Node, **attributes: str) -> Element:
    return Element(name, attributes, children)


def div(*children: Node) -> Element:
    return tag("div", *children)


def span(*children: Node) -> Element:
    return tag("span", *children)


def a(href: str, *children: Node) -> Element:
    return tag("a", *children, href=href)


def if_not_none(guard: Any, inner: Node) -> Conditional:
    return Conditional(guard, inner)

# Licensed under the MIT License
# Copyright (c) 2024 Anonymous941
# See the LICENSE file for more information.
