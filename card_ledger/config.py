import os
from pathlib import Path
from typing import List, Optional


class Settings:
    # Database
    DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./data/card_ledger.db")

    # Directories
    BASE_DIR = Path(__file__).parent.parent

    # API Settings
    API_V1_STR = os.getenv("API_V1_STR", "/api/v1")
    RPC_PREFIX = os.getenv("RPC_PREFIX", "/rpc")
    PROJECT_NAME = "Corporate Card Ledger"
    CORS_ORIGINS = os.getenv("CORS_ORIGINS", "*")

    # Logging
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
    LOG_DIR = os.getenv("LOG_DIR", "")

    def __init__(self, **overrides):
        for key, value in overrides.items():
            if not hasattr(self, key):
                raise AttributeError(f"Unknown setting: {key}")
            setattr(self, key, value)

        # Ensure the SQLite data directory exists
        database_path = self.database_path
        if database_path is not None:
            database_path.parent.mkdir(parents=True, exist_ok=True)

    @property
    def database_path(self) -> Optional[Path]:
        """Filesystem path of a file-backed SQLite database, None otherwise."""
        prefix = "sqlite:///"
        if not self.DATABASE_URL.startswith(prefix):
            return None
        location = self.DATABASE_URL[len(prefix):]
        if not location or location == ":memory:":
            return None
        return Path(location)

    @property
    def cors_origins(self) -> List[str]:
        return [origin.strip() for origin in self.CORS_ORIGINS.split(",") if origin.strip()]

    @property
    def log_dir(self) -> Optional[Path]:
        return Path(self.LOG_DIR) if self.LOG_DIR else None


settings = Settings()
