from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import AnyUrl

class Settings(BaseSettings):
    BASE_URL: AnyUrl | None = None         # e.g. https://example-realty.in
    RESULTS_PATH: str = "/properties"      # listings page that consumes the query string

    NOMINATIM_URL: str = "https://nominatim.openstreetmap.org"
    NOMINATIM_USER_AGENT: str = "propsearch/1.0"
    HTTP_TIMEOUT: float = 10.0

    HOST: str = "0.0.0.0"
    PORT: int = 8000

    CORS_ALLOW_ORIGINS: list[str] = ["*"]
    LOG_LEVEL: str = "INFO"                # DEBUG for detailed traces

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

settings = Settings()
