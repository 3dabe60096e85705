"""Message header decoding."""

from loadbench.domain.models import MessageHeader
from loadbench.parser.utils.fields import ensure_object, require_u8


def decode_header(header_data: dict) -> MessageHeader:
    """Read the three u8 header counts; the first failing field aborts."""
    ensure_object(header_data, "header")
    return MessageHeader(
        num_required_signatures=require_u8(header_data, "numRequiredSignatures", "header"),
        num_readonly_signed_accounts=require_u8(header_data, "numReadonlySignedAccounts", "header"),
        num_readonly_unsigned_accounts=require_u8(header_data, "numReadonlyUnsignedAccounts", "header"),
    )
