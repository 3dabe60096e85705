from loadbench.config import Settings
from loadbench.container import Container
from loadbench.infra.block_source import LocalBlockSource
from loadbench.pool.builder import TransactionPoolBuilder


class TestSettings:
    def test_defaults(self, monkeypatch):
        for key in ("BLOCK_DATA_DIR", "FILE_PATTERN", "PARALLEL", "MAX_CONCURRENCY", "VALIDATE_LAYOUT"):
            monkeypatch.delenv(f"LOADBENCH_{key}", raising=False)
        settings = Settings(_env_file=None)
        assert settings.block_data_dir == "block_data"
        assert settings.file_pattern == "*"
        assert settings.parallel is False
        assert settings.max_concurrency == 8
        assert settings.validate_layout is False

    def test_env_prefix(self, monkeypatch):
        monkeypatch.setenv("LOADBENCH_PARALLEL", "true")
        monkeypatch.setenv("LOADBENCH_MAX_CONCURRENCY", "2")
        settings = Settings(_env_file=None)
        assert settings.parallel is True
        assert settings.max_concurrency == 2


class TestContainer:
    def test_builds_pool_builder_from_settings(self, tmp_path):
        container = Container()
        container.settings.override(Settings(_env_file=None, file_pattern="*.json", validate_layout=True))

        builder = container.pool_builder()

        assert isinstance(builder, TransactionPoolBuilder)
        assert isinstance(container.block_source(), LocalBlockSource)
        assert builder._check_layout is True
        assert len(builder.build(tmp_path)) == 0
