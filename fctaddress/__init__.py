"""fctaddress — Factom Entry Credit and Factoid address codec."""

from .address import (
    address_to_key,
    address_to_rcd_hash,
    get_address_kind,
    get_public_address,
    is_valid_address,
    is_valid_ec_address,
    is_valid_ec_private_address,
    is_valid_ec_public_address,
    is_valid_fct_address,
    is_valid_fct_private_address,
    is_valid_fct_public_address,
    is_valid_private_address,
    is_valid_public_address,
    key_to_private_ec_address,
    key_to_private_fct_address,
    key_to_public_ec_address,
    key_to_public_fct_address,
    rcd_hash_to_public_fct_address,
)
from .codec import DecodedAddress, decode_address, encode_address
from .constants import AddressKind, Currency
from .crypto import RcdHash, checksum, key_to_rcd1_hash, sha256d
from .errors import (
    AddressError,
    InvalidAddressError,
    InvalidKeyError,
    RcdHashAddressError,
    WrongAddressKindError,
)
from .keys import secret_to_public_key

__version__ = "1.0.0"

__all__ = [
    "AddressKind",
    "Currency",
    "DecodedAddress",
    "RcdHash",
    "decode_address",
    "encode_address",
    "sha256d",
    "checksum",
    "key_to_rcd1_hash",
    "secret_to_public_key",
    "is_valid_address",
    "is_valid_public_address",
    "is_valid_private_address",
    "is_valid_ec_address",
    "is_valid_ec_public_address",
    "is_valid_ec_private_address",
    "is_valid_fct_address",
    "is_valid_fct_public_address",
    "is_valid_fct_private_address",
    "get_address_kind",
    "get_public_address",
    "address_to_key",
    "address_to_rcd_hash",
    "key_to_public_fct_address",
    "rcd_hash_to_public_fct_address",
    "key_to_private_fct_address",
    "key_to_public_ec_address",
    "key_to_private_ec_address",
    "AddressError",
    "InvalidAddressError",
    "WrongAddressKindError",
    "RcdHashAddressError",
    "InvalidKeyError",
]
