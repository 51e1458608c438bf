"""BLS12-381 key material handling.

Secret keys are scalars over the BLS12-381 subgroup order, serialized as 32
big-endian bytes. Public keys are the matching G1 points in their 48-byte
compressed form. Curve arithmetic and the standard ``KeyGen`` expansion are
delegated to py_ecc.
"""

from __future__ import annotations

import binascii
import logging
import os
from collections.abc import Callable
from dataclasses import dataclass

from py_ecc.bls import G2ProofOfPossession as bls
from py_ecc.optimized_bls12_381 import curve_order

from .types import PrivateKeyHex, PubkeyHex

logger = logging.getLogger(__name__)

SECRET_KEY_LENGTH = 32
PUBLIC_KEY_LENGTH = 48
IKM_LENGTH = 32
HEX_PREFIX = "0x"

EntropySource = Callable[[int], bytes]
"""Callable returning the requested number of random bytes."""


class KeyMaterialError(Exception):
    """Base class for key material errors."""


class HexDecodeError(KeyMaterialError):
    """Input is not a well-formed hex string."""


class InvalidKeyError(KeyMaterialError):
    """Bytes do not encode a valid BLS12-381 secret key."""


class KeyGenError(KeyMaterialError):
    """Secret key generation from input key material failed."""


class PublicKey:
    """BLS12-381 public key (compressed G1 point)."""

    __slots__ = ("_data",)

    def __init__(self, data: bytes) -> None:
        if len(data) != PUBLIC_KEY_LENGTH:
            raise ValueError(
                f"Public key must be {PUBLIC_KEY_LENGTH} bytes, got {len(data)}"
            )
        self._data = bytes(data)

    def to_bytes(self) -> bytes:
        """Serialize the public key to 48 bytes (compressed G1 point)."""
        return self._data

    def hex(self) -> PubkeyHex:
        return PubkeyHex(self._data.hex())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PublicKey):
            return NotImplemented
        return self._data == other._data

    def __hash__(self) -> int:
        return hash(self._data)

    def __repr__(self) -> str:
        return f"PublicKey(0x{self.hex()})"


class SecretKey:
    """BLS12-381 secret key.

    The scalar is never included in ``repr()`` output so that keys do not end
    up in logs or tracebacks by accident.
    """

    __slots__ = ("_scalar",)

    def __init__(self, scalar: int) -> None:
        if not 0 < scalar < curve_order:
            raise InvalidKeyError("Invalid private key: scalar out of range")
        self._scalar = scalar

    @classmethod
    def from_bytes(cls, data: bytes) -> SecretKey:
        """Create a SecretKey from 32 big-endian bytes.

        Args:
            data: 32 bytes representing the secret key

        Returns:
            A new SecretKey instance

        Raises:
            InvalidKeyError: If data is not exactly 32 bytes, is zero, or is
                not below the curve order

        """
        if len(data) != SECRET_KEY_LENGTH:
            raise InvalidKeyError(
                f"Invalid private key: expected {SECRET_KEY_LENGTH} bytes, got {len(data)}"
            )
        return cls(int.from_bytes(data, "big"))

    @classmethod
    def from_ikm(cls, ikm: bytes, key_info: bytes = b"") -> SecretKey:
        """Expand input key material into a SecretKey with the standard KeyGen.

        Raises:
            KeyGenError: If the input key material is rejected

        """
        if len(ikm) < IKM_LENGTH:
            raise KeyGenError(
                f"Failed to generate secret key: ikm must be at least {IKM_LENGTH} bytes, "
                f"got {len(ikm)}"
            )
        try:
            scalar = bls.KeyGen(ikm, key_info)
        except (ValueError, TypeError) as e:
            raise KeyGenError(f"Failed to generate secret key: {e}") from e
        return cls(scalar)

    def to_bytes(self) -> bytes:
        """Serialize the secret key to 32 big-endian bytes."""
        return self._scalar.to_bytes(SECRET_KEY_LENGTH, "big")

    def hex(self) -> PrivateKeyHex:
        return PrivateKeyHex(self.to_bytes().hex())

    def public_key(self) -> PublicKey:
        """Get the corresponding public key."""
        return PublicKey(bytes(bls.SkToPk(self._scalar)))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SecretKey):
            return NotImplemented
        return self._scalar == other._scalar

    def __hash__(self) -> int:
        return hash(self._scalar)

    def __repr__(self) -> str:
        return "SecretKey(<redacted>)"


@dataclass(frozen=True, slots=True)
class KeyPair:
    """A generated key pair.

    Attributes:
        secret_key: The secret key
        public_key: The compressed public key bytes (48 bytes)

    """

    secret_key: SecretKey
    public_key: bytes


def generate_secret_key(entropy: EntropySource = os.urandom) -> SecretKey:
    """Generate a new secret key from 32 bytes of entropy.

    Args:
        entropy: Source of random bytes, defaults to the OS CSPRNG

    Raises:
        KeyGenError: If the entropy source misbehaves or KeyGen rejects the ikm

    """
    ikm = entropy(IKM_LENGTH)
    if len(ikm) != IKM_LENGTH:
        raise KeyGenError(
            f"Failed to generate secret key: entropy source returned {len(ikm)} bytes, "
            f"expected {IKM_LENGTH}"
        )
    return SecretKey.from_ikm(ikm)


def parse_private_key(sk_hex: str) -> SecretKey:
    """Parse a hex-encoded secret key, with or without a ``0x`` prefix.

    Only a lowercase ``0x`` prefix is stripped. ``0X`` is left in place and
    fails hex decoding.

    Raises:
        HexDecodeError: If the string is not valid hex
        InvalidKeyError: If the decoded bytes are not a valid secret key

    """
    if sk_hex.startswith(HEX_PREFIX):
        sk_hex = sk_hex[len(HEX_PREFIX):]

    try:
        sk_bytes = binascii.unhexlify(sk_hex)
    except ValueError as e:
        raise HexDecodeError(f"Invalid hex format: {e}") from e

    return SecretKey.from_bytes(sk_bytes)


def derive_public_key(sk: SecretKey) -> bytes:
    """Derive the 48-byte compressed public key for a secret key."""
    pk_bytes = sk.public_key().to_bytes()
    logger.debug(f"Derived public key: 0x{pk_bytes.hex()[:20]}...")
    return pk_bytes


def generate_key_pair(entropy: EntropySource = os.urandom) -> KeyPair:
    """Generate a fresh secret key and derive its public key.

    Raises:
        KeyGenError: If secret key generation fails

    """
    sk = generate_secret_key(entropy)
    return KeyPair(secret_key=sk, public_key=derive_public_key(sk))
