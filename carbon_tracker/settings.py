import os
from typing import List

from pydantic import BaseModel, Field
from dotenv import load_dotenv

# take environment variables from .env file
load_dotenv()


class Settings(BaseModel):
    database_url: str = Field(default="sqlite:///./carbon_dev.db", alias="DATABASE_URL")
    cors_origins: List[str] = Field(default_factory=lambda: ["*"], alias="CORS_ORIGINS")
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")
    seed_demo_user: bool = Field(default=True, alias="SEED_DEMO_USER")
    summary_window_days: int = Field(default=30, ge=1, alias="SUMMARY_WINDOW_DAYS")

    @classmethod
    def from_env(cls):
        origins = os.getenv("CORS_ORIGINS", "*")
        data = {
            "DATABASE_URL": os.getenv("DATABASE_URL", "sqlite:///./carbon_dev.db"),
            "CORS_ORIGINS": [o.strip() for o in origins.split(",") if o.strip()] or ["*"],
            "LOG_LEVEL": os.getenv("LOG_LEVEL", "INFO").upper(),
            "SEED_DEMO_USER": os.getenv("SEED_DEMO_USER", "true"),
            "SUMMARY_WINDOW_DAYS": os.getenv("SUMMARY_WINDOW_DAYS", "30"),
        }
        return cls.model_validate(data)


settings = Settings.from_env()
