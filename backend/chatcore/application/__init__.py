"""
APPLICATION LAYER - Use Cases & Orchestration

This layer contains:
- entity_model.py → the multi-index in-memory store every entity passes through
- commands/       → Write operations (CQRS)
- queries/        → Read operations (CQRS)
- transport.py    → in-process Controller / View over the handlers
- dto/            → Data Transfer Objects
- common/         → Shared interfaces (Command, Query base classes)

Rules:
- No transport/presentation code here
- Coordinates entities, indices, the vault and the credential store
"""
