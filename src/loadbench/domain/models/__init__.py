from loadbench.domain.models.pool import DecodeFailure, TransactionPool
from loadbench.domain.models.transaction import CompiledInstruction, Message, MessageHeader, Transaction

__all__ = [
    "CompiledInstruction",
    "DecodeFailure",
    "Message",
    "MessageHeader",
    "Transaction",
    "TransactionPool",
]
