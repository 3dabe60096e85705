import pytest
from solders.hash import Hash
from solders.pubkey import Pubkey
from solders.signature import Signature


def pubkey_text(seed: int) -> str:
    return str(Pubkey(bytes([seed]) * 32))


def hash_text(seed: int) -> str:
    return str(Hash(bytes([seed]) * 32))


def signature_text(seed: int) -> str:
    return str(Signature(bytes([seed]) * 64))


@pytest.fixture()
def make_tx_entry():
    """Factory for one ``result.transactions[]`` entry in getBlock JSON shape."""

    def _make(seed: int = 1, signatures: list | None = None, **message_overrides) -> dict:
        message = {
            "header": {
                "numRequiredSignatures": 1,
                "numReadonlySignedAccounts": 0,
                "numReadonlyUnsignedAccounts": 1,
            },
            "accountKeys": [pubkey_text(seed), pubkey_text(seed + 1), pubkey_text(seed + 2)],
            "recentBlockhash": hash_text(seed),
            "instructions": [
                {"programIdIndex": 2, "accounts": [0, 1], "data": "AgAAAADh9QUAAAAA"},
            ],
        }
        message.update(message_overrides)
        return {
            "meta": {"fee": 5000, "err": None},
            "transaction": {
                "signatures": signatures if signatures is not None else [signature_text(seed)],
                "message": message,
            },
        }

    return _make


@pytest.fixture()
def make_block(make_tx_entry):
    """Factory for a whole block record wrapping the given entries."""

    def _make(entries: list | None = None, slot: int = 250_000_000) -> dict:
        if entries is None:
            entries = [make_tx_entry(1), make_tx_entry(10)]
        return {
            "jsonrpc": "2.0",
            "id": 1,
            "result": {
                "blockHeight": slot - 20_000_000,
                "blockTime": 1_700_000_000,
                "parentSlot": slot - 1,
                "transactions": entries,
            },
        }

    return _make
