"""
IdentifierGenerator - Mints sequential identifiers under one parent.

Not thread-safe; the owner serializes calls.
"""

from typing import Optional

from chatcore.domain.exceptions.generation_exhausted import GenerationExhaustedError
from chatcore.domain.value_objects.identifier import Identifier


class IdentifierGenerator:
    def __init__(self, parent: Optional[Identifier], low: int, high: int):
        if low >= high:
            raise ValueError(f"Empty identifier range [{low}, {high})")
        self._parent = parent
        self._high = high
        self._next = low

    @property
    def parent(self) -> Optional[Identifier]:
        return self._parent

    def make(self) -> Identifier:
        """Return the next identifier; raises GenerationExhaustedError at the bound."""
        if self._next >= self._high:
            raise GenerationExhaustedError(self._high)
        identifier = Identifier(self._next, self._parent)
        self._next += 1
        return identifier

    def reserve(self, identifier: Identifier) -> None:
        """Never hand out `identifier` (or anything below it) from now on."""
        if identifier.parent == self._parent and identifier.id >= self._next:
            self._next = identifier.id + 1
