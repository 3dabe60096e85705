from enum import Enum


class IdentifierKind(str, Enum):
    """Fixed-width cryptographic identifiers carried by a transaction."""

    PUBKEY = "pubkey"
    HASH = "hash"
    SIGNATURE = "signature"

    @property
    def width(self) -> int:
        """Decoded size in bytes."""
        return 64 if self is IdentifierKind.SIGNATURE else 32
