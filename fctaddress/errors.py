"""Exceptions raised by address extraction and construction."""

from __future__ import annotations


class AddressError(ValueError):
    """Base class for address usage errors."""


class InvalidAddressError(AddressError):
    """The string is not a well-formed address."""

    def __init__(self, address: object) -> None:
        self.address = address
        super().__init__(f"Invalid address {address}.")


class WrongAddressKindError(AddressError):
    """The address is well-formed but of the wrong kind for the operation."""


class RcdHashAddressError(WrongAddressKindError):
    """A public Factoid address was used where a key was expected."""

    def __init__(self, address: str) -> None:
        self.address = address
        super().__init__(
            "A public Factoid address does not hold a public key but a RCD hash. "
            "Use address_to_rcd_hash instead."
        )


class InvalidKeyError(AddressError):
    """A key or RCD hash is malformed or not 32 bytes long."""
