from dependency_injector import containers, providers

from loadbench.config import Settings
from loadbench.infra.block_source import LocalBlockSource
from loadbench.pool.builder import TransactionPoolBuilder


class Container(containers.DeclarativeContainer):
    settings = providers.Singleton(Settings)

    block_source = providers.Singleton(
        LocalBlockSource,
        file_pattern=settings.provided.file_pattern,
    )

    pool_builder = providers.Factory(
        TransactionPoolBuilder,
        source=block_source,
        check_layout=settings.provided.validate_layout,
        max_concurrency=settings.provided.max_concurrency,
    )
