"""End-to-end tests for the address codec.

Covers every address kind over many keys: encode, validate, classify,
extract, derive the public address, and detect single character typos.
"""

from __future__ import annotations

import hashlib

import base58
import pytest
from nacl.signing import SigningKey

from fctaddress import (
    AddressKind,
    RcdHashAddressError,
    WrongAddressKindError,
    address_to_key,
    address_to_rcd_hash,
    get_address_kind,
    get_public_address,
    is_valid_address,
    is_valid_ec_private_address,
    is_valid_ec_public_address,
    is_valid_fct_private_address,
    is_valid_fct_public_address,
    key_to_private_ec_address,
    key_to_private_fct_address,
    key_to_public_ec_address,
    key_to_public_fct_address,
    key_to_rcd1_hash,
)

KEYS = [bytes(32), b"\xff" * 32, bytes(range(32))] + [
    hashlib.sha256(f"seed-{i}".encode()).digest() for i in range(8)
]

ENCODERS = [
    (key_to_public_ec_address, AddressKind.EC_PUBLIC),
    (key_to_private_ec_address, AddressKind.EC_PRIVATE),
    (key_to_public_fct_address, AddressKind.FCT_PUBLIC),
    (key_to_private_fct_address, AddressKind.FCT_PRIVATE),
]

EXACT_PREDICATES = [
    is_valid_ec_public_address,
    is_valid_ec_private_address,
    is_valid_fct_public_address,
    is_valid_fct_private_address,
]

ALPHABET = base58.BITCOIN_ALPHABET.decode("ascii")


# ────────────────────────────────────────────────────────────────────────────
# 1. Every encoder produces a valid address of its own kind
# ────────────────────────────────────────────────────────────────────────────

class TestRoundTrip:
    @pytest.mark.parametrize("encode,kind", ENCODERS)
    def test_all_keys_valid(self, encode, kind):
        for key in KEYS:
            address = encode(key)
            assert is_valid_address(address)
            assert get_address_kind(address) is kind
            assert address.startswith(kind.human_prefix)
            assert len(address) == 52

    @pytest.mark.parametrize("encode,kind", ENCODERS)
    def test_payload_extraction(self, encode, kind):
        for key in KEYS:
            address = encode(key)
            if kind is AddressKind.FCT_PUBLIC:
                assert address_to_rcd_hash(address) == key_to_rcd1_hash(key)
            else:
                assert address_to_key(address) == key


# ────────────────────────────────────────────────────────────────────────────
# 2. Exactly one exact-kind predicate holds
# ────────────────────────────────────────────────────────────────────────────

class TestClassExclusivity:
    @pytest.mark.parametrize("encode,kind", ENCODERS)
    def test_exactly_one_predicate(self, encode, kind):
        for key in KEYS:
            address = encode(key)
            results = [predicate(address) for predicate in EXACT_PREDICATES]
            assert results.count(True) == 1

    def test_public_and_private_fct_differ(self):
        for key in KEYS:
            public = key_to_public_fct_address(key)
            private = key_to_private_fct_address(key)
            assert public != private
            assert is_valid_fct_public_address(public)
            assert is_valid_fct_private_address(private)
            assert not is_valid_fct_public_address(private)


# ────────────────────────────────────────────────────────────────────────────
# 3. Any single character substitution is caught
# ────────────────────────────────────────────────────────────────────────────

class TestTypoDetection:
    @pytest.mark.parametrize("encode,kind", ENCODERS)
    def test_every_position(self, encode, kind):
        address = encode(KEYS[2])
        for i, char in enumerate(address):
            replacement = ALPHABET[(ALPHABET.index(char) + 1) % len(ALPHABET)]
            typo = address[:i] + replacement + address[i + 1:]
            assert not is_valid_address(typo), f"Typo at {i} not detected: {typo}"

    def test_adjacent_swap(self):
        address = key_to_public_fct_address(KEYS[3])
        for i in range(len(address) - 1):
            if address[i] == address[i + 1]:
                continue
            swapped = address[:i] + address[i + 1] + address[i] + address[i + 2:]
            assert not is_valid_address(swapped)


# ────────────────────────────────────────────────────────────────────────────
# 4. Private to public conversion
# ────────────────────────────────────────────────────────────────────────────

class TestPublicDerivation:
    def test_fct_private_to_public(self):
        for seed in KEYS:
            public_key = bytes(SigningKey(seed).verify_key)
            expected = key_to_public_fct_address(public_key)
            assert get_public_address(key_to_private_fct_address(seed)) == expected

    def test_ec_private_to_public(self):
        for seed in KEYS:
            public_key = bytes(SigningKey(seed).verify_key)
            expected = key_to_public_ec_address(public_key)
            public = get_public_address(key_to_private_ec_address(seed))
            assert public == expected
            assert address_to_key(public) == public_key

    def test_idempotent(self):
        for encode, _ in ENCODERS:
            address = encode(KEYS[4])
            once = get_public_address(address)
            assert get_public_address(once) == once
            assert get_public_address(address) == once

    def test_public_fct_chain(self):
        """A private FCT address derives an FA whose RCD hash binds the public key."""
        seed = KEYS[5]
        public = get_public_address(key_to_private_fct_address(seed))
        public_key = bytes(SigningKey(seed).verify_key)
        assert address_to_rcd_hash(public) == key_to_rcd1_hash(public_key)
        with pytest.raises(RcdHashAddressError):
            address_to_key(public)


# ────────────────────────────────────────────────────────────────────────────
# 5. Kind-restricted extraction
# ────────────────────────────────────────────────────────────────────────────

class TestExtractionErrors:
    def test_rcd_hash_rejects_non_fa(self):
        for encode, kind in ENCODERS:
            if kind is AddressKind.FCT_PUBLIC:
                continue
            with pytest.raises(WrongAddressKindError):
                address_to_rcd_hash(encode(KEYS[6]))

    def test_key_rejects_every_fa(self):
        for key in KEYS:
            with pytest.raises(RcdHashAddressError):
                address_to_key(key_to_public_fct_address(key))
