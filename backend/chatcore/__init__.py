"""chatcore - in-memory multi-index store, identifiers and credentials for a chat service."""

__version__ = "0.1.0"
