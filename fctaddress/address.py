"""Validation, extraction and construction of human readable addresses.

Validation predicates never raise: anything malformed is simply not a
valid address. Extraction and construction functions raise
:class:`~fctaddress.errors.AddressError` subclasses on misuse.
"""

from __future__ import annotations

import logging
from typing import Any

from .codec import DecodedAddress, coerce_key, decode_address, encode_address
from .constants import AddressKind, Currency
from .crypto import RcdHash, key_to_rcd1_hash
from .errors import InvalidAddressError, RcdHashAddressError, WrongAddressKindError
from .keys import secret_to_public_key

logger = logging.getLogger(__name__)


def get_address_kind(address: Any) -> AddressKind | None:
    """Return the kind of a valid address, or None if it is not valid."""
    decoded = decode_address(address)
    return decoded.kind if decoded is not None else None


def is_valid_address(address: Any) -> bool:
    """Check that an address is well formed, whatever its kind."""
    return decode_address(address) is not None


def is_valid_public_address(address: Any) -> bool:
    """Check for a valid public EC or FCT address."""
    kind = get_address_kind(address)
    return kind is not None and kind.is_public


def is_valid_private_address(address: Any) -> bool:
    """Check for a valid private EC or FCT address."""
    kind = get_address_kind(address)
    return kind is not None and kind.is_private


def is_valid_ec_address(address: Any) -> bool:
    """Check for a valid EC address, public or private."""
    kind = get_address_kind(address)
    return kind is not None and kind.currency is Currency.ENTRY_CREDIT


def is_valid_ec_public_address(address: Any) -> bool:
    return get_address_kind(address) is AddressKind.EC_PUBLIC


def is_valid_ec_private_address(address: Any) -> bool:
    return get_address_kind(address) is AddressKind.EC_PRIVATE


def is_valid_fct_address(address: Any) -> bool:
    """Check for a valid FCT address, public or private."""
    kind = get_address_kind(address)
    return kind is not None and kind.currency is Currency.FACTOID


def is_valid_fct_public_address(address: Any) -> bool:
    return get_address_kind(address) is AddressKind.FCT_PUBLIC


def is_valid_fct_private_address(address: Any) -> bool:
    return get_address_kind(address) is AddressKind.FCT_PRIVATE


def _require_valid(address: Any) -> DecodedAddress:
    decoded = decode_address(address)
    if decoded is None:
        raise InvalidAddressError(address)
    return decoded


def get_public_address(address: str) -> str:
    """Get the public address corresponding to any address.

    Public addresses are returned unchanged. For private addresses the
    public key is derived from the seed they hold.
    """
    decoded = _require_valid(address)
    if decoded.kind.is_public:
        return address

    public_key = secret_to_public_key(decoded.payload)
    public_kind = decoded.kind.public_counterpart
    logger.debug("Derived %s address from %s address", public_kind.name, decoded.kind.name)

    if public_kind is AddressKind.FCT_PUBLIC:
        return key_to_public_fct_address(public_key)
    return key_to_public_ec_address(public_key)


def address_to_key(address: str) -> bytes:
    """Extract the key contained in an address.

    Cannot be used with public FCT addresses, as those contain a RCD hash
    and not a key (see :func:`address_to_rcd_hash`).
    """
    decoded = _require_valid(address)
    if decoded.kind is AddressKind.FCT_PUBLIC:
        raise RcdHashAddressError(address)
    return decoded.payload


def address_to_rcd_hash(address: str) -> RcdHash:
    """Extract the RCD hash from a public FCT address."""
    decoded = _require_valid(address)
    if decoded.kind is not AddressKind.FCT_PUBLIC:
        raise WrongAddressKindError(f"Address {address} is not a valid public Factoid address")
    return RcdHash(decoded.payload)


def _key_to_address(key: bytes | str, kind: AddressKind, compute_rcd_hash: bool = False) -> str:
    key_bytes = coerce_key(key)
    payload = key_to_rcd1_hash(key_bytes) if compute_rcd_hash else key_bytes
    return encode_address(payload, kind)


def key_to_public_fct_address(key: bytes | str) -> str:
    """Build a public FCT address from an Ed25519 public key."""
    return _key_to_address(key, AddressKind.FCT_PUBLIC, compute_rcd_hash=True)


def rcd_hash_to_public_fct_address(rcd_hash: bytes | str) -> str:
    """Build a public FCT address from a RCD hash."""
    return _key_to_address(rcd_hash, AddressKind.FCT_PUBLIC)


def key_to_private_fct_address(key: bytes | str) -> str:
    """Build a private FCT address from a private seed."""
    return _key_to_address(key, AddressKind.FCT_PRIVATE)


def key_to_public_ec_address(key: bytes | str) -> str:
    """Build a public EC address from a public key."""
    return _key_to_address(key, AddressKind.EC_PUBLIC)


def key_to_private_ec_address(key: bytes | str) -> str:
    """Build a private EC address from a private seed."""
    return _key_to_address(key, AddressKind.EC_PRIVATE)
