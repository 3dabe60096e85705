"""Message decoding: header, account keys, recent blockhash, instructions."""

from loadbench.codec.identifiers import decode_hash, decode_pubkey
from loadbench.domain.models import Message
from loadbench.exceptions import SchemaError
from loadbench.parser.header import decode_header
from loadbench.parser.instruction import decode_instruction
from loadbench.parser.utils.fields import ensure_object, keep_decoded, require_array, require_object

RECENT_BLOCKHASH_KEY = "recentBlockhash"
# Older block dumps used the plural key
LEGACY_RECENT_BLOCKHASH_KEY = "recentBlockhashes"


def _recent_blockhash_text(message_data: dict) -> object:
    for key in (RECENT_BLOCKHASH_KEY, LEGACY_RECENT_BLOCKHASH_KEY):
        value = message_data.get(key)
        if value is not None:
            return value
    raise SchemaError(f"message: missing field {RECENT_BLOCKHASH_KEY!r}")


def decode_message(message_data: dict) -> Message:
    """Decode a message record.

    Header and blockhash failures propagate. Account keys and instructions that
    fail to decode are omitted, keeping the survivors in their original order.
    """
    ensure_object(message_data, "message")

    header = decode_header(require_object(message_data, "header", "message"))

    account_keys = keep_decoded(
        require_array(message_data, "accountKeys", "message"),
        decode_pubkey,
        "message.accountKeys",
    )

    recent_blockhash = decode_hash(_recent_blockhash_text(message_data))

    instructions = keep_decoded(
        require_array(message_data, "instructions", "message"),
        decode_instruction,
        "message.instructions",
    )

    return Message(
        header=header,
        account_keys=tuple(account_keys),
        recent_blockhash=recent_blockhash,
        instructions=tuple(instructions),
    )
