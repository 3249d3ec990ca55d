"""Ed25519 public key derivation for private addresses.

Uses PyNaCl (libsodium) as the primary backend, with fallback to
the cryptography package if PyNaCl is unavailable.
"""

from __future__ import annotations

import logging

from .constants import KEY_LENGTH
from .errors import InvalidKeyError

logger = logging.getLogger(__name__)


def _load_nacl():
    """Try to load PyNaCl (libsodium)."""
    try:
        from nacl.signing import SigningKey
        return SigningKey
    except ImportError:
        return None


def _load_crypto():
    """Try to load cryptography package as fallback."""
    try:
        from cryptography.hazmat.primitives.asymmetric.ed25519 import Ed25519PrivateKey
        from cryptography.hazmat.primitives.serialization import Encoding, PublicFormat
        return Ed25519PrivateKey, Encoding, PublicFormat
    except ImportError:
        return None


def _get_backend():
    """Get the best available Ed25519 backend."""
    nacl = _load_nacl()
    if nacl is not None:
        return "nacl", nacl
    crypto = _load_crypto()
    if crypto is not None:
        return "cryptography", crypto
    return None, None


def _require_backend():
    name, backend = _get_backend()
    if backend is None:
        raise ImportError(
            "Deriving public keys requires 'PyNaCl' or 'cryptography'. "
            "Install with: pip install PyNaCl"
        )
    logger.debug("Using %s Ed25519 backend", name)
    return name, backend


def secret_to_public_key(secret: bytes) -> bytes:
    """Derive the 32-byte Ed25519 public key from a 32-byte private seed."""
    secret = bytes(secret)
    if len(secret) != KEY_LENGTH:
        raise InvalidKeyError(f"Secret is {len(secret)} bytes long, expected {KEY_LENGTH}.")

    name, backend = _require_backend()

    if name == "nacl":
        SigningKey = backend
        return bytes(SigningKey(secret).verify_key)

    Ed25519PrivateKey, Encoding, PublicFormat = backend
    private_key = Ed25519PrivateKey.from_private_bytes(secret)
    return private_key.public_key().public_bytes(Encoding.Raw, PublicFormat.Raw)
