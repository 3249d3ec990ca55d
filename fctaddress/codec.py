"""Binary layout of addresses: base58 decode/encode and key coercion."""

from __future__ import annotations

import binascii
import logging
from dataclasses import dataclass
from typing import Any

import base58

from .constants import ADDRESS_LENGTH, ADDRESS_TEXT_LENGTH, KEY_LENGTH, PAYLOAD_END, PREFIX_LENGTH, AddressKind
from .crypto import checksum
from .errors import InvalidKeyError

logger = logging.getLogger(__name__)

_ALPHABET = frozenset(base58.BITCOIN_ALPHABET.decode("ascii"))


@dataclass(frozen=True)
class DecodedAddress:
    """A validated address split into its fields."""

    kind: AddressKind
    payload: bytes
    checksum: bytes

    @property
    def raw(self) -> bytes:
        """The 38 bytes the address string encodes."""
        return self.kind.prefix + self.payload + self.checksum

    def to_dict(self) -> dict[str, Any]:
        """Serialize to a dictionary with hex-encoded byte fields."""
        return {
            "kind": self.kind.name,
            "prefix": self.kind.human_prefix,
            "currency": self.kind.currency.value,
            "private": self.kind.is_private,
            "payload": self.payload.hex(),
            "checksum": self.checksum.hex(),
        }


def b58decode(text: str) -> bytes | None:
    """Decode a base58 string, or return None if it holds foreign characters."""
    if not text or not _ALPHABET.issuperset(text):
        return None
    return base58.b58decode(text)


def decode_address(address: Any) -> DecodedAddress | None:
    """Decode and verify an address.

    Returns None for anything that is not a well-formed address: non-string
    input, a string that is not 52 characters long, characters outside the
    base58 alphabet, a decoded length other than 38 bytes, an unknown prefix
    or a checksum mismatch.
    """
    if not isinstance(address, str):
        logger.debug("Rejected address of type %s", type(address).__name__)
        return None
    if len(address) != ADDRESS_TEXT_LENGTH:
        logger.debug("Rejected address: %d characters long", len(address))
        return None

    raw = b58decode(address)
    if raw is None:
        logger.debug("Rejected address: not base58")
        return None
    if len(raw) != ADDRESS_LENGTH:
        logger.debug("Rejected address: decodes to %d bytes", len(raw))
        return None

    kind = AddressKind.from_prefix(raw[:PREFIX_LENGTH])
    if kind is None:
        logger.debug("Rejected address: unknown prefix %s", raw[:PREFIX_LENGTH].hex())
        return None

    if checksum(raw[:PAYLOAD_END]) != raw[PAYLOAD_END:]:
        logger.debug("Rejected address: checksum mismatch")
        return None

    return DecodedAddress(kind=kind, payload=raw[PREFIX_LENGTH:PAYLOAD_END], checksum=raw[PAYLOAD_END:])


def encode_address(payload: bytes, kind: AddressKind) -> str:
    """Build the base58 address string for a 32-byte payload of the given kind."""
    body = kind.prefix + payload
    return base58.b58encode(body + checksum(body)).decode("ascii")


def coerce_key(key: bytes | bytearray | str) -> bytes:
    """Turn raw bytes or a hex string into exactly 32 bytes."""
    if isinstance(key, str):
        try:
            key_bytes = binascii.unhexlify(key)
        except ValueError:
            raise InvalidKeyError(f"Key {key!r} is not a valid hex string.") from None
    elif isinstance(key, (bytes, bytearray, memoryview)):
        key_bytes = bytes(key)
    else:
        raise InvalidKeyError(f"Key must be bytes or a hex string, got {type(key).__name__}.")

    if len(key_bytes) != KEY_LENGTH:
        raise InvalidKeyError(f"Key {key_bytes.hex()} is not {KEY_LENGTH} bytes long.")
    return key_bytes
