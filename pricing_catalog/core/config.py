from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    CATALOG_API_URL: str = "https://uat.ledgersapi.com/catalog/indiafilings-catalog/api"
    CATALOG_API_KEY: str | None = None

    CATALOG_OPERATION: str = "catalog_v2"
    CATALOG_ID: str = "230"
    CATALOG_TYPE: str = "1"

    PUBLIC_BASE_URL: str = ""
    SURFACE_GRACE_SECONDS: float = 2.0
    WIDGET_DOMAIN: str = "https://nextjs.org/docs"

    ENV: str = "dev"
    LOG_LEVEL: str = "INFO"


settings = Settings()
