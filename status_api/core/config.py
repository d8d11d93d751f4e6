"""
Configuration settings for the Device Status API
"""

from pydantic_settings import BaseSettings
from typing import List, Optional
from pathlib import Path
from urllib.parse import quote_plus

class Settings(BaseSettings):
    """Application settings"""

    # Database
    db_host: str = "postgres"
    db_port: str = "5432"
    db_name: str = "device_status"
    db_user: str = "status_user"
    db_password: str = "status_password"
    db_password_file: Optional[str] = None  # mounted secret, overrides db_password
    database_url: str = ""

    # Connection pool
    db_pool_size: int = 5
    db_max_overflow: int = 0
    db_pool_timeout: int = 30  # seconds waiting for a free connection
    db_connect_timeout: int = 10  # seconds
    db_statement_timeout_ms: int = 5000
    init_db_on_startup: bool = False

    # API Settings
    api_host: str = "0.0.0.0"
    api_port: int = 8000
    debug: bool = False
    cors_origins: List[str] = ["*"]

    # Logging
    log_level: str = "INFO"

    class Config:
        env_file = ".env"
        case_sensitive = False

    def __init__(self, **kwargs):
        super().__init__(**kwargs)
        if self.db_password_file:
            self.db_password = Path(self.db_password_file).read_text().strip()
        # Build database_url from components unless given explicitly
        if not self.database_url:
            self.database_url = f"postgresql://{self.db_user}:{quote_plus(self.db_password)}@{self.db_host}:{self.db_port}/{self.db_name}"

# Global settings instance
settings = Settings()
