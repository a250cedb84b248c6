"""
Credential Vault - Salted scrypt password hashes keyed by username.

Each new credential draws a fresh random salt and stores scrypt(password, salt).
Verification recomputes the digest with the stored salt and compares in
constant time. Plaintext passwords are never stored.

Hashing never runs under the vault lock. derive() computes a record without
storing it; match_password() reads the stored credential, then hashes.

A username can be registered once; a second add() raises
CredentialExistsError instead of replacing the existing credentials.
"""

import logging
import secrets
import threading
from dataclasses import dataclass, field
from typing import Optional

from cryptography.hazmat.primitives.kdf.scrypt import Scrypt

from chatcore.config.settings import Config
from chatcore.domain.exceptions.validation_error import CredentialExistsError

logger = logging.getLogger(__name__)

DIGEST_LENGTH = 32


@dataclass(frozen=True)
class CredentialRecord:
    """Checkpoint payload for one user's credentials (hex-encoded)."""

    username: str
    salt: str = field(repr=False)
    password_hash: str = field(repr=False)


@dataclass(frozen=True)
class _Credential:
    salt: bytes
    digest: bytes


class CredentialVault:
    def __init__(
        self,
        n: Optional[int] = None,
        r: Optional[int] = None,
        p: Optional[int] = None,
        salt_bytes: Optional[int] = None,
    ):
        self._n = n or Config.SCRYPT_N
        self._r = r or Config.SCRYPT_R
        self._p = p or Config.SCRYPT_P
        self._salt_bytes = salt_bytes or Config.SALT_BYTES
        self._credentials: dict[str, _Credential] = {}
        self._lock = threading.Lock()

    def _derive(self, password: str, salt: bytes) -> bytes:
        kdf = Scrypt(salt=salt, length=DIGEST_LENGTH, n=self._n, r=self._r, p=self._p)
        return kdf.derive(password.encode("utf-8"))

    def derive(self, username: str, password: str) -> CredentialRecord:
        """Hash `password` under a fresh salt without registering anything."""
        salt = secrets.token_bytes(self._salt_bytes)
        digest = self._derive(password, salt)
        return CredentialRecord(
            username=username, salt=salt.hex(), password_hash=digest.hex()
        )

    def add(self, username: str, password: str) -> CredentialRecord:
        if username in self:
            raise CredentialExistsError(username)
        record = self.derive(username, password)
        self.restore(record)
        return record

    def restore(self, record: CredentialRecord) -> None:
        """
        Register a record produced by derive() or read from a checkpoint.

        Raises:
            CredentialExistsError: username already registered
            ValueError: malformed hex, empty salt or wrong digest length
        """
        salt = bytes.fromhex(record.salt)
        digest = bytes.fromhex(record.password_hash)
        if not salt or len(digest) != DIGEST_LENGTH:
            raise ValueError(f"Malformed credential record for {record.username}")

        with self._lock:
            if record.username in self._credentials:
                raise CredentialExistsError(record.username)
            self._credentials[record.username] = _Credential(salt=salt, digest=digest)
        logger.debug(f"[Vault] Registered credentials for {record.username}")

    def match_password(self, username: str, attempt: str) -> bool:
        with self._lock:
            credential = self._credentials.get(username)
        if credential is None or attempt is None:
            return False
        return secrets.compare_digest(
            self._derive(attempt, credential.salt), credential.digest
        )

    def __contains__(self, username: object) -> bool:
        with self._lock:
            return username in self._credentials

    def __len__(self) -> int:
        with self._lock:
            return len(self._credentials)
