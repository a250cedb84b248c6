"""
DOMAIN LAYER - Chat entities and the pure data structures behind them

This layer contains:
- Entities: Business objects with identity (User, Conversation, Message)
- Value Objects: Immutable types (Identifier, Timestamp)
- Ports: Interfaces that infrastructure and transport implement
- Services: Pure domain logic (OrderedIndex, IdentifierGenerator)
- Exceptions: Domain-specific errors

RULES:
1. NO framework imports (no Redis, Pydantic, dishka, etc.)
2. NO I/O operations (no database, no network, no file system)
3. Only depends on Python stdlib
"""
