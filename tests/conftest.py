"""Test fixtures and utilities."""

import random
import struct
from collections.abc import Callable

import pytest

from blskeygen.keys import SecretKey

# Compressed G1 generator, the public key of the secret key 1
GENERATOR_PUBKEY_HEX = (
    "97f1d3a73197d7942695638c4fa9ac0fc3688c4f9774b905a14e3a3f171bac58"
    "6c55e83ff97a1aeffb3af00adb22c6bb"
)

# BLS12-381 subgroup order
CURVE_ORDER = 0x73EDA753299D7D483339D80809A1D80553BDA402FFFE5BFEFFFFFFFF00000001

SK_ONE_HEX = "00" * 31 + "01"


@pytest.fixture
def step_entropy() -> Callable[[int], bytes]:
    """Entropy source yielding little-endian u64 counters 0, 1, 2, ..."""

    def source(n: int) -> bytes:
        words = (n + 7) // 8
        return struct.pack(f"<{words}Q", *range(words))[:n]

    return source


@pytest.fixture
def seeded_entropy() -> Callable[[int], bytes]:
    """Entropy source backed by a fixed-seed PRNG."""
    rng = random.Random(1234)
    return rng.randbytes


@pytest.fixture
def sample_secret_key() -> SecretKey:
    """A valid secret key with a known encoding."""
    return SecretKey.from_bytes(bytes.fromhex("2b" * 31 + "07"))
