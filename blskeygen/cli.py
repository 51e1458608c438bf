"""CLI entry point for blskeygen."""

import logging
import os
import sys
from collections.abc import Sequence

from .config import get_config
from .keys import (
    EntropySource,
    KeyMaterialError,
    SecretKey,
    derive_public_key,
    generate_key_pair,
    parse_private_key,
)

logger = logging.getLogger(__name__)


def setup_logging(log_level: str) -> None:
    """Configure logging."""
    logging.basicConfig(
        level=getattr(logging, log_level),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )


def format_private_key(sk: SecretKey) -> str:
    return f"Private key: 0x{sk.hex()}"


def format_public_key(pk_bytes: bytes) -> str:
    return f"Public key: 0x{pk_bytes.hex()}"


def run(private_key: str | None, entropy: EntropySource = os.urandom) -> list[str]:
    """Generate or derive keys and return the output lines.

    Raises:
        KeyMaterialError: If parsing, validation or generation fails

    """
    if private_key is None:
        logger.debug("No private key given, generating a new key pair")
        pair = generate_key_pair(entropy)
        return [format_private_key(pair.secret_key), format_public_key(pair.public_key)]

    logger.debug("Deriving public key from supplied private key")
    sk = parse_private_key(private_key)
    return [format_public_key(derive_public_key(sk))]


def main(argv: Sequence[str] | None = None, entropy: EntropySource = os.urandom) -> None:
    """Main entry point."""
    try:
        config = get_config(argv)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    setup_logging(config.normalized_log_level)

    try:
        lines = run(config.private_key, entropy)
    except KeyMaterialError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)
    except Exception:
        logger.exception("Unexpected error")
        sys.exit(1)

    for line in lines:
        print(line)
