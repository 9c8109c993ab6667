from typing import List, Literal
from pydantic_settings import BaseSettings, SettingsConfigDict
from functools import lru_cache


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # App
    app_name: str = "Nutrition Scanner API"
    app_version: str = "1.0.0"
    log_level: str = "INFO"

    # Empty means any origin (matched by regex so credentials still work)
    cors_origins: List[str] = []

    # Open Food Facts
    off_base_url: str = "https://world.openfoodfacts.org"
    off_product_path: str = "/api/v0/product/{barcode}.json"
    off_user_agent: str = "NutritionScanner/1.0"

    # History
    history_backend: Literal["memory", "mongo"] = "memory"
    database_url: str = "mongodb://localhost:27017"
    database_name: str = "appdb"
    history_collection: str = "scan_history"

    def product_url(self, barcode: str) -> str:
        return self.off_base_url.rstrip("/") + self.off_product_path.format(barcode=barcode)


@lru_cache
def get_settings() -> Settings:
    return Settings()
