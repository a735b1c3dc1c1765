# passrules/core/config.py

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    ENV: str = "local"

    LOG_LEVEL: str = "INFO"

    # word-prefix dictionary; the bundled map is used when unset
    PREFIX_MAP_PATH: str | None = None
    DEFAULT_LOCALE: str = "en"

    # batch generation
    BATCH_WORKERS: int = 1
    BATCH_SPLIT_LINES: int = 100_000
    PROGRESS_EVERY: int = 1000

    model_config = SettingsConfigDict(
        env_prefix="PASSRULES_",
        env_file=None,
        env_file_encoding="utf-8",
    )


settings = Settings()
