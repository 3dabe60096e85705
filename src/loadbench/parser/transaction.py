"""Transaction decoding: signatures plus one message."""

from loadbench.codec.identifiers import decode_signature
from loadbench.domain.models import Transaction
from loadbench.parser.message import decode_message
from loadbench.parser.utils.fields import ensure_object, require_array, require_object


def decode_transaction(entry: dict) -> Transaction:
    """Decode one ``result.transactions[]`` entry.

    Every signature must decode; one bad signature fails the whole transaction.
    """
    ensure_object(entry, "transaction entry")
    tx_data = require_object(entry, "transaction", "transaction entry")

    signatures = tuple(
        decode_signature(sig) for sig in require_array(tx_data, "signatures", "transaction")
    )
    message = decode_message(require_object(tx_data, "message", "transaction"))

    return Transaction(signatures=signatures, message=message)
