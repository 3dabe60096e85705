"""Base58 identifier codec — canonical text to fixed-width solders types."""

import base58
from solders.hash import Hash
from solders.pubkey import Pubkey
from solders.signature import Signature

from loadbench.domain.enums import IdentifierKind
from loadbench.exceptions import EncodingError, SchemaError

_CONSTRUCTORS = {
    IdentifierKind.PUBKEY: Pubkey,
    IdentifierKind.HASH: Hash,
    IdentifierKind.SIGNATURE: Signature,
}


def decode_identifier_bytes(kind: IdentifierKind, text: object) -> bytes:
    """Decode base58 text to exactly ``kind.width`` raw bytes."""
    if not isinstance(text, str):
        raise SchemaError(f"{kind.value} must be a string, got {type(text).__name__}")
    # b58decode tolerates trailing whitespace; canonical text carries none
    if text != text.strip():
        raise EncodingError(f"{kind.value} has surrounding whitespace: {text!r}")
    try:
        raw = base58.b58decode(text)
    except ValueError as exc:
        raise EncodingError(f"{kind.value} is not valid base58: {text!r}") from exc

    if len(raw) != kind.width:
        raise EncodingError(
            f"{kind.value} decodes to {len(raw)} bytes, expected {kind.width}: {text!r}"
        )
    return raw


def decode_identifier(kind: IdentifierKind, text: object) -> Pubkey | Hash | Signature:
    raw = decode_identifier_bytes(kind, text)
    return _CONSTRUCTORS[kind](raw)


def decode_pubkey(text: object) -> Pubkey:
    return Pubkey(decode_identifier_bytes(IdentifierKind.PUBKEY, text))


def decode_hash(text: object) -> Hash:
    return Hash(decode_identifier_bytes(IdentifierKind.HASH, text))


def decode_signature(text: object) -> Signature:
    return Signature(decode_identifier_bytes(IdentifierKind.SIGNATURE, text))
