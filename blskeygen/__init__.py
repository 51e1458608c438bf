"""blskeygen - generate or derive BLS12-381 key pairs."""

__version__ = "0.1.0"
