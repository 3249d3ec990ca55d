"""Hash helpers for address checksums and RCD hashes."""

from __future__ import annotations

import hashlib
from typing import NewType

from .constants import CHECKSUM_LENGTH, RCD_TYPE_1

# 32-byte hash of a Redeem Condition Datum, as carried by public Factoid addresses
RcdHash = NewType("RcdHash", bytes)


def sha256d(data: bytes) -> bytes:
    """Double SHA-256: ``sha256(sha256(data))``."""
    return hashlib.sha256(hashlib.sha256(data).digest()).digest()


def checksum(data: bytes) -> bytes:
    """First 4 bytes of the double SHA-256 of ``data``."""
    return sha256d(data)[:CHECKSUM_LENGTH]


def key_to_rcd1_hash(key: bytes) -> RcdHash:
    """Hash an Ed25519 public key into its RCD type 1 hash.

    This hash, not the key itself, is the payload of a public Factoid
    address.
    """
    return RcdHash(sha256d(RCD_TYPE_1 + bytes(key)))
