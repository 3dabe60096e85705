"""Compiled instruction decoding."""

import logging

from loadbench.codec.payload import decode_base64
from loadbench.domain.models import CompiledInstruction
from loadbench.parser.utils.fields import (
    ensure_object,
    require_array,
    require_str,
    require_u8,
    try_u8,
)

logger = logging.getLogger(__name__)


def decode_instruction(instruction_data: dict) -> CompiledInstruction:
    """Decode one ``instructions[]`` entry.

    ``programIdIndex`` and ``data`` are required. ``accounts`` must be an array,
    but entries that do not fit in a u8 are dropped rather than failing the
    instruction.
    """
    ensure_object(instruction_data, "instruction")
    program_id_index = require_u8(instruction_data, "programIdIndex", "instruction")

    raw_accounts = require_array(instruction_data, "accounts", "instruction")
    accounts = tuple(a for a in (try_u8(v) for v in raw_accounts) if a is not None)
    if len(accounts) != len(raw_accounts):
        logger.debug(
            "Dropped %d account index(es) outside u8 range", len(raw_accounts) - len(accounts)
        )

    data = decode_base64(require_str(instruction_data, "data", "instruction"))

    return CompiledInstruction(
        program_id_index=program_id_index,
        accounts=accounts,
        data=data,
    )
