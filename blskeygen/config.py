"""Configuration management using msgspec Struct."""

import argparse
from collections.abc import Sequence

import msgspec

from . import __version__

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class Config(msgspec.Struct, frozen=True):
    """Application configuration using msgspec Struct."""

    # Hex-encoded secret key; None selects generate mode
    private_key: str | None = None

    # Logging
    log_level: str = "WARNING"

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        if self.log_level.upper() not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {set(LOG_LEVELS)}, got {self.log_level}")

    @property
    def normalized_log_level(self) -> str:
        """Return normalized uppercase log level."""
        return self.log_level.upper()

    @property
    def generate(self) -> bool:
        """Whether a fresh key pair should be generated."""
        return self.private_key is None


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="blskeygen",
        description="A tool for generating BLS12-381 keys",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )

    parser.add_argument(
        "-p",
        "--private-key",
        default=None,
        help="Private key in hex format (with or without 0x prefix)",
    )
    parser.add_argument(
        "--log-level",
        choices=LOG_LEVELS,
        default="WARNING",
        help="Logging level",
    )
    parser.add_argument(
        "-V", "--version", action="version", version=f"%(prog)s {__version__}"
    )
    return parser


def get_config(argv: Sequence[str] | None = None) -> Config:
    """Parse command line arguments and return configuration."""
    args = build_parser().parse_args(argv)

    config_dict: dict[str, object] = {
        "private_key": args.private_key,
        "log_level": args.log_level,
    }

    try:
        config = msgspec.convert(config_dict, Config)
    except msgspec.ValidationError as e:
        raise ValueError(f"Configuration validation error: {e}")

    return config
