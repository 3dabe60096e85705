"""Pool-level results: the decoded transactions plus what was skipped."""

from collections.abc import Iterator

from pydantic import BaseModel, ConfigDict

from loadbench.domain.enums import DecodeErrorType
from loadbench.domain.models.transaction import Transaction


class DecodeFailure(BaseModel):
    """A transaction entry the block decoder skipped."""

    model_config = ConfigDict(frozen=True)

    source: str | None = None  # block file path, when known
    index: int  # position in result.transactions
    error_type: DecodeErrorType
    message: str


class TransactionPool(BaseModel):
    """All decoded transactions of one run, in file order then in-block order."""

    model_config = ConfigDict(frozen=True)

    transactions: tuple[Transaction, ...] = ()
    failures: tuple[DecodeFailure, ...] = ()
    files_loaded: int = 0

    def __len__(self) -> int:
        return len(self.transactions)

    def __iter__(self) -> Iterator[Transaction]:  # type: ignore[override]
        return iter(self.transactions)

    def __getitem__(self, index: int) -> Transaction:
        return self.transactions[index]
