"""
Identifier Value Object - Hierarchical entity identity.

An identifier is a numeric id plus an optional parent identifier. The parent
chain is strictly acyclic; each identifier owns its parent value.

String form lists the chain root first: Identifier(5, Identifier(1)) is
"[UUID:1.5]". parse() accepts that form or the bare dotted path "1.5".
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from functools import total_ordering
from typing import Optional

_WRAPPED = re.compile(r"^\[UUID:(?P<path>[^\]]*)\]$")


@total_ordering
@dataclass(frozen=True)
class Identifier:
    id: int
    parent: Optional[Identifier] = None

    def __post_init__(self):
        if isinstance(self.id, bool) or not isinstance(self.id, int):
            raise ValueError(f"Identifier id must be an int, got {self.id!r}")

    def sort_key(self) -> tuple:
        """Numeric id first, then the parent chain; no parent sorts first."""
        parent_key = self.parent.sort_key() if self.parent is not None else ()
        return (self.id, parent_key)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Identifier):
            return NotImplemented
        return self.sort_key() < other.sort_key()

    @property
    def root(self) -> Identifier:
        node = self
        while node.parent is not None:
            node = node.parent
        return node

    def path(self) -> list[int]:
        """Numeric ids from the root down to this identifier."""
        ids = []
        node: Optional[Identifier] = self
        while node is not None:
            ids.append(node.id)
            node = node.parent
        ids.reverse()
        return ids

    def __str__(self) -> str:
        return "[UUID:" + ".".join(str(i) for i in self.path()) + "]"

    @classmethod
    def parse(cls, text: str) -> Identifier:
        if text is None:
            raise ValueError("Identifier text cannot be None")

        raw = text.strip()
        match = _WRAPPED.match(raw)
        if match:
            raw = match.group("path").strip()

        if not raw:
            raise ValueError(f"Invalid identifier: {text!r}")

        identifier: Optional[Identifier] = None
        for token in raw.split("."):
            if not token.isdigit():
                raise ValueError(f"Invalid identifier: {text!r}")
            identifier = cls(int(token), identifier)
        return identifier
