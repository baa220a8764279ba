# ============================================
# catalog/config.py — Service & Client Settings
# ============================================
# Settings are loaded from the environment (and an optional .env file)
# once, at the edge, and then passed explicitly into create_app() and
# CatalogClient. Nothing below the edge reads os.environ.

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Product service configuration."""

    MONGO_URI: str = "mongodb://localhost:27017"
    MONGO_DB: str = "catalog"
    PORT: int = 5000
    PYTHON_ENV: str = "development"
    LOG_LEVEL: str = "INFO"

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    @property
    def is_production(self) -> bool:
        return self.PYTHON_ENV == "production"

    @property
    def is_development(self) -> bool:
        return self.PYTHON_ENV == "development"


class ClientSettings(BaseSettings):
    """Catalog client configuration (base URL of the product API)."""

    CATALOG_API_URL: str = "http://localhost:5000/api"

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")


@lru_cache
def get_settings() -> Settings:
    return Settings()


@lru_cache
def get_client_settings() -> ClientSettings:
    return ClientSettings()
