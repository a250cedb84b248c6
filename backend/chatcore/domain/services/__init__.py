"""
DOMAIN SERVICES - Pure data structures with no I/O
"""

from chatcore.domain.services.ordered_index import OrderedIndex, OrderedValues
from chatcore.domain.services.identifier_generator import IdentifierGenerator

__all__ = [
    "OrderedIndex",
    "OrderedValues",
    "IdentifierGenerator",
]
