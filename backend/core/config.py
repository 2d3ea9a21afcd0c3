"""
Application settings with validation.
The spreadsheet id is optional at startup and validated when a range is fetched.
"""
from functools import lru_cache
from pathlib import Path
from typing import List, Optional

from dotenv import load_dotenv
from pydantic import SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict

# Find and load .env file from backend/ or project root
_backend_dir = Path(__file__).parent.parent
_env_file = _backend_dir / ".env"
if not _env_file.exists():
    _env_file = _backend_dir.parent / ".env"  # Try project root
load_dotenv(_env_file if _env_file.exists() else None)


class APIKeys(BaseSettings):
    """API keys - optional at startup."""
    model_config = SettingsConfigDict(env_prefix="", extra="ignore")

    logfire_token: Optional[SecretStr] = None  # LOGFIRE_TOKEN env var


class GoogleSheets(BaseSettings):
    """Google Sheets source settings."""
    model_config = SettingsConfigDict(env_prefix="GOOGLE_SHEETS_", extra="ignore")

    id: Optional[str] = None  # GOOGLE_SHEETS_ID
    credentials_file: str = "credentials.json"
    interests_range: str = "Foglio1!A2:D"  # skips the header row
    ratings_range: str = "Foglio2!A2:D"
    scopes: List[str] = ["https://www.googleapis.com/auth/spreadsheets.readonly"]

    def require_spreadsheet_id(self) -> str:
        """Get the spreadsheet id or raise error."""
        if not self.id or not self.id.strip():
            raise ValueError("GOOGLE_SHEETS_ID is required but not set")
        return self.id.strip()


class Logfire(BaseSettings):
    """Logfire settings."""
    model_config = SettingsConfigDict(env_prefix="LOGFIRE_", extra="ignore")

    environment: str = "local"


class Server(BaseSettings):
    """Uvicorn bind settings."""
    model_config = SettingsConfigDict(env_prefix="", extra="ignore")

    host: str = "0.0.0.0"
    port: int = 3000


class Settings(BaseSettings):
    """Main settings container."""
    model_config = SettingsConfigDict(
        env_prefix="",
        extra="ignore",
        env_file=".env",
        env_file_encoding="utf-8",
    )

    # Nested settings
    api_keys: APIKeys = APIKeys()
    google_sheets: GoogleSheets = GoogleSheets()
    logfire: Logfire = Logfire()
    server: Server = Server()

    # App settings
    cors_origins: str = "*"

    def get_cors_origins_list(self) -> List[str]:
        """Parse CORS origins string into list."""
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()

settings = get_settings()
