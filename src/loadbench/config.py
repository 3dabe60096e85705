from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    block_data_dir: str = "block_data"
    file_pattern: str = "*"
    parallel: bool = False
    max_concurrency: int = 8
    validate_layout: bool = False  # reject transactions whose header/indices disagree with account keys

    class Config:
        env_file = ".env"
        env_prefix = "LOADBENCH_"


settings = Settings()
