from enum import Enum


class DecodeErrorType(str, Enum):
    """Why a transaction was skipped while decoding a block."""

    SCHEMA_ERROR = "SchemaError"
    ENCODING_ERROR = "EncodingError"
    LAYOUT_ERROR = "LayoutError"
