"""Typed transaction model decoded from block records.

Identifiers are the ``solders`` fixed-width types so the pool can be handed to
the benchmark harness without re-encoding.
"""

from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field
from solders.hash import Hash
from solders.instruction import CompiledInstruction as SoldersCompiledInstruction
from solders.message import Message as SoldersMessage
from solders.pubkey import Pubkey
from solders.signature import Signature
from solders.transaction import Transaction as SoldersTransaction

U8 = Annotated[int, Field(ge=0, le=255)]


class MessageHeader(BaseModel):
    """Signing/permission layout of a message's account keys."""

    model_config = ConfigDict(frozen=True)

    num_required_signatures: U8
    num_readonly_signed_accounts: U8
    num_readonly_unsigned_accounts: U8


class CompiledInstruction(BaseModel):
    """One instruction; indices point into the message's account keys."""

    model_config = ConfigDict(frozen=True)

    program_id_index: U8
    accounts: tuple[U8, ...] = ()
    data: bytes = b""

    def to_solders(self) -> SoldersCompiledInstruction:
        return SoldersCompiledInstruction(self.program_id_index, self.data, bytes(self.accounts))


class Message(BaseModel):
    """Signable body of a transaction."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    header: MessageHeader
    account_keys: tuple[Pubkey, ...] = ()
    recent_blockhash: Hash
    instructions: tuple[CompiledInstruction, ...] = ()

    def to_solders(self) -> SoldersMessage:
        return SoldersMessage.new_with_compiled_instructions(
            self.header.num_required_signatures,
            self.header.num_readonly_signed_accounts,
            self.header.num_readonly_unsigned_accounts,
            list(self.account_keys),
            self.recent_blockhash,
            [ix.to_solders() for ix in self.instructions],
        )


class Transaction(BaseModel):
    """A message plus its authorizing signatures."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    signatures: tuple[Signature, ...] = ()
    message: Message

    def to_solders(self) -> SoldersTransaction:
        """Build the wire-level transaction the benchmark harness submits."""
        return SoldersTransaction.populate(self.message.to_solders(), list(self.signatures))
