from pathlib import Path

from pydantic_settings import BaseSettings

_BACKEND_DIR = Path(__file__).resolve().parent.parent


class Settings(BaseSettings):
    app_name: str = "TravelMate"

    # Logging
    log_level: str = "INFO"
    log_dir: Path = _BACKEND_DIR / "logs"
    log_to_file: bool = True

    # Store
    seed_on_startup: bool = True

    # Search
    # Original behavior matches origin OR destination; set true to require both
    flight_search_require_both_cities: bool = False

    # Recommendations
    recommendation_limit: int = 6

    # CORS
    cors_origins: str = "http://localhost:5173"

    @property
    def cors_origin_list(self) -> list[str]:
        return [origin.strip() for origin in self.cors_origins.split(",")]

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8", "extra": "ignore"}


settings = Settings()
