from typing import Literal, Optional
from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
    # Dialog Behaviour
    DEFAULT_LOCALE: str = "en-us"
    CANCEL_KEYWORD: str = "cancel"
    BOT_NAME: str = "Bot"
    AUTO_BEGIN_ON_JOIN: bool = False
    ROOT_DIALOG_ID: str = "root"

    # Conversation State Store
    # "memory" is process-local and only suitable for dev/tests
    STATE_BACKEND: Literal["memory", "sql"] = "memory"
    DATABASE_URL: str = "sqlite:///./slot_filling_bot.db"

    # Optional LLM-backed recognizers
    OPENAI_API_KEY: Optional[str] = None
    OPENAI_MODEL: str = "gpt-4o"
    LLM_TEMPERATURE: float = 0.0

    # Loads from a .env file in the root directory
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

# Singleton instance
settings = Settings()
