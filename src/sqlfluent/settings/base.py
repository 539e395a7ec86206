from pydantic_settings import BaseSettings, SettingsConfigDict


class SQLFluentBaseSettings(BaseSettings):
    """Base class for all sqlfluent settings.

    Settings are read from environment variables (and an optional ``.env``
    file) with the ``SQLFLUENT_`` prefix. Nested settings use a double
    underscore, e.g. ``SQLFLUENT_ADAPTER_OPTIONS__SCHEMA``.
    """

    model_config = SettingsConfigDict(
        env_prefix="SQLFLUENT_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        env_nested_delimiter="__"
    )
