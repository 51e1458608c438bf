"""Type definitions for blskeygen.

NewType aliases for hex-encoded key material, so that raw strings and
validated hex values are not mixed up at call sites.
"""

from typing import NewType

PrivateKeyHex = NewType("PrivateKeyHex", str)
"""Hex-encoded secret key (64 characters, without 0x prefix)."""

PubkeyHex = NewType("PubkeyHex", str)
"""Hex-encoded compressed public key (96 characters, without 0x prefix)."""
