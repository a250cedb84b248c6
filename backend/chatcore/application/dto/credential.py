"""Credential checkpoint DTO (the persisted document schema)."""

from pydantic import BaseModel, ConfigDict


class CredentialDocument(BaseModel):
    """One checkpointed user: identity, creation time and credentials."""

    model_config = ConfigDict(extra="ignore")

    username: str
    id: str  # serialized Identifier, e.g. "[UUID:1.5]"
    creation_ms: int
    password_hash: str  # hex
    salt: str  # hex
