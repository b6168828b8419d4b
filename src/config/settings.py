# src/config/settings.py
from pathlib import Path
from typing import Literal

import yaml
from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from src.journal.settings import JournalSettings

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class SystemConfig(BaseModel):
    model_config = ConfigDict(validate_assignment=True)

    name: str = "FX Trade Journal"
    version: str = "1.0.0"
    log_level: LogLevel = "INFO"

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, v):
        return v.upper() if isinstance(v, str) else v


class JournalEnvConfig(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="JOURNAL_")

    data_file: str | None = None
    log_level: str | None = None


class Settings(BaseModel):
    system: SystemConfig = Field(default_factory=SystemConfig)
    journal: JournalSettings = Field(default_factory=JournalSettings)

    @classmethod
    def from_yaml(cls, path: Path) -> "Settings":
        """Load settings from YAML file with env var overrides."""
        with open(path) as f:
            data = yaml.safe_load(f) or {}

        settings = cls(**data)

        env = JournalEnvConfig()
        if env.data_file:
            settings.journal.data_file = env.data_file
        if env.log_level:
            settings.system.log_level = env.log_level

        return settings
