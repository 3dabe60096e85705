"""TransactionPoolBuilder — block directory to an ordered transaction pool."""

from __future__ import annotations

import asyncio
import logging
from pathlib import Path

from loadbench import config
from loadbench.config import Settings
from loadbench.domain.models import DecodeFailure, Transaction, TransactionPool
from loadbench.exceptions import DecodeError, ParseError
from loadbench.infra.block_source import BlockSource, LocalBlockSource, parse_record
from loadbench.parser.block import decode_block

logger = logging.getLogger(__name__)

FileResult = tuple[list[Transaction], list[DecodeFailure]]


class TransactionPoolBuilder:
    """Reads every block file in a directory and concatenates its transactions.

    I/O errors, invalid JSON and files that are not block records are fatal
    to the run. Transactions that fail to decode are skipped and reported in
    ``TransactionPool.failures``.
    """

    def __init__(
        self,
        source: BlockSource | None = None,
        *,
        check_layout: bool = False,
        max_concurrency: int = 8,
    ) -> None:
        self._source = source or LocalBlockSource()
        self._check_layout = check_layout
        self._max_concurrency = max(1, max_concurrency)

    def build(self, directory: str | Path) -> TransactionPool:
        """Decode files one after another."""
        paths = self._source.list_paths(Path(directory))
        results = [self._load_file(path) for path in paths]
        return self._assemble(directory, paths, results)

    async def build_async(self, directory: str | Path) -> TransactionPool:
        """Decode files concurrently; the pool keeps file order, not completion order."""
        paths = await asyncio.to_thread(self._source.list_paths, Path(directory))
        semaphore = asyncio.Semaphore(self._max_concurrency)

        async def load(path: Path) -> FileResult:
            async with semaphore:
                return await asyncio.to_thread(self._load_file, path)

        results = await asyncio.gather(*(load(path) for path in paths))
        return self._assemble(directory, paths, list(results))

    def _load_file(self, path: Path) -> FileResult:
        text = self._source.read_text(path)
        block_data = parse_record(text, source=str(path))

        failures: list[DecodeFailure] = []
        try:
            transactions = decode_block(
                block_data,
                check_layout=self._check_layout,
                failures=failures,
                source=str(path),
            )
        except DecodeError as exc:
            # only the block shape can fail here; bad transactions are skipped
            raise ParseError(f"{path} is not a block record: {exc}") from exc
        logger.debug(
            "Decoded %d TXs from %s (%d skipped)", len(transactions), path.name, len(failures)
        )
        return transactions, failures

    def _assemble(
        self, directory: str | Path, paths: list[Path], results: list[FileResult]
    ) -> TransactionPool:
        transactions: list[Transaction] = []
        failures: list[DecodeFailure] = []
        for file_txs, file_failures in results:
            transactions.extend(file_txs)
            failures.extend(file_failures)

        logger.info(
            "Built pool of %d TXs from %d files in %s (%d skipped)",
            len(transactions), len(paths), directory, len(failures),
        )
        return TransactionPool(
            transactions=tuple(transactions),
            failures=tuple(failures),
            files_loaded=len(paths),
        )


def build_pool(directory: str | Path | None = None, settings: Settings | None = None) -> TransactionPool:
    """Build the transaction pool for ``directory`` (default: ``settings.block_data_dir``)."""
    settings = settings or config.settings
    builder = TransactionPoolBuilder(
        LocalBlockSource(settings.file_pattern),
        check_layout=settings.validate_layout,
        max_concurrency=settings.max_concurrency,
    )
    target = directory if directory is not None else settings.block_data_dir
    if settings.parallel:
        return asyncio.run(builder.build_async(target))
    return builder.build(target)
