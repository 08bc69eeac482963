"""Markup nodes emitted for each rendered error."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from html import escape
from types import MappingProxyType


@dataclass(frozen=True, slots=True)
class ErrorNode:
    """One element wrapping a single translated error message."""

    text: str
    attributes: Mapping[str, str] = field(default_factory=dict)
    tag: str = "span"

    def __post_init__(self) -> None:
        object.__setattr__(self, "attributes", MappingProxyType(dict(self.attributes)))

    def __hash__(self) -> int:
        return hash((self.text, tuple(self.attributes.items()), self.tag))

    def get(self, name: str) -> str | None:
        return self.attributes.get(name)

    def to_dict(self) -> dict[str, object]:
        return {"tag": self.tag, "attributes": dict(self.attributes), "text": self.text}

    def to_html(self) -> str:
        attrs = "".join(f' {name}="{escape(value, quote=True)}"' for name, value in self.attributes.items())
        return f"<{self.tag}{attrs}>{escape(self.text, quote=False)}</{self.tag}>"


def render_nodes(nodes: Iterable[ErrorNode], separator: str = "") -> str:
    """Concatenate the HTML of ``nodes``; no nodes renders as an empty string."""
    return separator.join(node.to_html() for node in nodes)
