from typing import List

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """
    Application settings.
    Values are read from environment variables first, then from .env.
    """
    # LLM
    OPENAI_API_KEY: str = Field(default="")
    OPENAI_MODEL_NAME: str = Field(default="gpt-4o")

    # HTTP
    CORS_ORIGINS: List[str] = Field(default=[
        "http://localhost",
        "http://localhost:3000",    # React default port
        "http://localhost:5173",    # Vite default port
        "http://127.0.0.1:3000",
        "http://127.0.0.1:5173",
    ])

    LOG_LEVEL: str = Field(default="INFO")

    # User seeded into every new store
    DEFAULT_USERNAME: str = Field(default="developer")
    DEFAULT_EMAIL: str = Field(default="dev@example.com")
    DEFAULT_PASSWORD: str = Field(default="password123")

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"


settings = Settings()
