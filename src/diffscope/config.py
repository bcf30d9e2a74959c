# src/diffscope/config.py
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_prefix="DIFFSCOPE_", extra="ignore")

    # Git
    repo_path: str = "."
    git_binary: str = "git"
    git_timeout: float = 30.0

    # Diff defaults
    default_context_lines: int = 3
    full_context_lines: int = 999999

    # Server
    host: str = "127.0.0.1"
    port: int = 8765
    log_level: str = "INFO"
