"""Application configuration via pydantic-settings."""

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", extra="ignore", populate_by_name=True
    )

    # App
    debug: bool = False
    log_level: str = "INFO"
    allowed_origins: list[str] = ["*"]
    # API key (optional): if set, required on the webhook route
    api_key: str = ""
    webhook_rate_limit: str = "60/minute"

    # Trello (KEY / TOKEN are the names the Heyflow function deployments use)
    trello_api_url: str = "https://api.trello.com/1/"
    trello_key: str = Field(default="", validation_alias=AliasChoices("trello_key", "key"))
    trello_token: str = Field(default="", validation_alias=AliasChoices("trello_token", "token"))


settings = Settings()
