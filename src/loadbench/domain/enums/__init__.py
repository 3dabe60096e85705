from loadbench.domain.enums.decode_error import DecodeErrorType
from loadbench.domain.enums.identifier import IdentifierKind

__all__ = [
    "DecodeErrorType",
    "IdentifierKind",
]
