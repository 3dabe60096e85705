"""Instruction data codec (standard base64)."""

import base64
import binascii

from loadbench.exceptions import EncodingError


def decode_base64(text: str) -> bytes:
    """Decode strict standard base64. The empty string decodes to ``b""``.

    Only canonical text is accepted: exact padding and zero trailing bits.
    """
    try:
        raw = base64.b64decode(text, validate=True)
    except (binascii.Error, ValueError) as exc:
        raise EncodingError(f"Instruction data is not valid base64: {text[:32]!r}") from exc

    if base64.b64encode(raw) != text.encode("ascii"):
        raise EncodingError(f"Instruction data is not canonical base64: {text[:32]!r}")
    return raw
