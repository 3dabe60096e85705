"""Cross-field layout checks for decoded transactions.

Off by default. When enabled, transactions whose header counts, signatures or
instruction indices disagree with the account-key list are skipped.
"""

from loadbench.domain.models import Transaction
from loadbench.exceptions import LayoutError


def validate_layout(tx: Transaction) -> Transaction:
    """Return ``tx`` unchanged or raise LayoutError."""
    message = tx.message
    header = message.header
    key_count = len(message.account_keys)

    counted = (
        header.num_required_signatures
        + header.num_readonly_signed_accounts
        + header.num_readonly_unsigned_accounts
    )
    if counted > key_count:
        raise LayoutError(f"header counts sum to {counted} but message has {key_count} account keys")

    if header.num_readonly_signed_accounts > header.num_required_signatures:
        raise LayoutError(
            f"{header.num_readonly_signed_accounts} readonly signed accounts exceed "
            f"{header.num_required_signatures} required signatures"
        )

    if len(tx.signatures) != header.num_required_signatures:
        raise LayoutError(
            f"{len(tx.signatures)} signatures for {header.num_required_signatures} required signers"
        )

    for position, ix in enumerate(message.instructions):
        if ix.program_id_index >= key_count:
            raise LayoutError(f"instruction {position}: program index {ix.program_id_index} out of range")
        for account in ix.accounts:
            if account >= key_count:
                raise LayoutError(f"instruction {position}: account index {account} out of range")

    return tx
