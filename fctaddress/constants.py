"""Address layout and the prefix table for Factom addresses."""

from __future__ import annotations

from enum import Enum

# Layout: prefix (2) | payload (32) | checksum (4)
PREFIX_LENGTH = 2
KEY_LENGTH = 32
CHECKSUM_LENGTH = 4
PAYLOAD_END = PREFIX_LENGTH + KEY_LENGTH
ADDRESS_LENGTH = PAYLOAD_END + CHECKSUM_LENGTH

# Every 38-byte address with a known prefix base58-encodes to 52 characters
ADDRESS_TEXT_LENGTH = 52

# Redeem Condition Datum type 1: a single Ed25519 signature
RCD_TYPE_1 = b"\x01"


class Currency(Enum):
    """The two key spaces an address can belong to."""

    ENTRY_CREDIT = "EC"
    FACTOID = "FCT"


class AddressKind(Enum):
    """The four address classes, keyed by their 2-byte prefix.

    The prefixes were chosen so that every 38-byte address carrying them
    base58-encodes to a string starting with ``human_prefix``.
    """

    EC_PUBLIC = (b"\x59\x2a", "EC", Currency.ENTRY_CREDIT, False)
    EC_PRIVATE = (b"\x5d\xb6", "Es", Currency.ENTRY_CREDIT, True)
    FCT_PUBLIC = (b"\x5f\xb1", "FA", Currency.FACTOID, False)
    FCT_PRIVATE = (b"\x64\x78", "Fs", Currency.FACTOID, True)

    def __init__(self, prefix: bytes, human_prefix: str, currency: Currency, private: bool) -> None:
        self.prefix = prefix
        self.human_prefix = human_prefix
        self.currency = currency
        self.private = private

    @classmethod
    def from_prefix(cls, prefix: bytes) -> AddressKind | None:
        """Look up the kind owning a 2-byte prefix, or None if unknown."""
        return _BY_PREFIX.get(bytes(prefix))

    @property
    def is_private(self) -> bool:
        return self.private

    @property
    def is_public(self) -> bool:
        return not self.private

    @property
    def is_factoid(self) -> bool:
        return self.currency is Currency.FACTOID

    @property
    def is_entry_credit(self) -> bool:
        return self.currency is Currency.ENTRY_CREDIT

    @property
    def public_counterpart(self) -> AddressKind:
        """The public kind of the same currency."""
        if self.is_factoid:
            return AddressKind.FCT_PUBLIC
        return AddressKind.EC_PUBLIC


_BY_PREFIX: dict[bytes, AddressKind] = {kind.prefix: kind for kind in AddressKind}
