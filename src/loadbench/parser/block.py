"""Block decoding — one block record to a list of transactions."""

from __future__ import annotations

import logging

from loadbench.domain.enums import DecodeErrorType
from loadbench.domain.models import DecodeFailure, Transaction
from loadbench.exceptions import DecodeError, EncodingError, LayoutError
from loadbench.parser.layout import validate_layout
from loadbench.parser.transaction import decode_transaction
from loadbench.parser.utils.fields import ensure_object, require_array, require_object

logger = logging.getLogger(__name__)


def block_transactions(block_data: dict) -> list:
    """Locate ``result.transactions``; a block without it is a SchemaError."""
    ensure_object(block_data, "block")
    result = require_object(block_data, "result", "block")
    return require_array(result, "transactions", "block.result")


def _error_type(exc: DecodeError) -> DecodeErrorType:
    if isinstance(exc, LayoutError):
        return DecodeErrorType.LAYOUT_ERROR
    if isinstance(exc, EncodingError):
        return DecodeErrorType.ENCODING_ERROR
    return DecodeErrorType.SCHEMA_ERROR


def decode_block(
    block_data: dict,
    *,
    check_layout: bool = False,
    failures: list[DecodeFailure] | None = None,
    source: str | None = None,
) -> list[Transaction]:
    """Decode every transaction in a block, skipping the ones that fail.

    Skipped entries are logged and, when ``failures`` is given, appended to it.
    """
    transactions: list[Transaction] = []

    for index, entry in enumerate(block_transactions(block_data)):
        try:
            tx = decode_transaction(entry)
            if check_layout:
                validate_layout(tx)
        except DecodeError as exc:
            logger.warning("Skipping transaction %d in %s: %s", index, source or "block", exc)
            if failures is not None:
                failures.append(DecodeFailure(
                    source=source,
                    index=index,
                    error_type=_error_type(exc),
                    message=str(exc),
                ))
            continue
        transactions.append(tx)

    return transactions
