from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    ENV: str = "dev"
    LOG_LEVEL: str = "INFO"
    BUSINESS_NAME: str = "Desk4U"

    SUPABASE_URL: str | None = None
    SUPABASE_API_KEY: str | None = None
    RECORD_STORE_TIMEOUT_SECONDS: float = 10.0
    JSON_STORE_DATA_DIR: str = "./data/records"
    SEED_WORKSPACE_TYPES: bool = True

    WHATSAPP_ACCESS_TOKEN: str | None = None
    WHATSAPP_PHONE_NUMBER_ID: str | None = None
    WHATSAPP_API_VERSION: str = "v20.0"

    NOTIFIER_WEBHOOK_URL: str | None = None

    CONFIRMATION_SESSION_TTL_SECONDS: int = 1800

    ADMIN_API_TOKEN: str | None = None
    # Echo confirmation codes back to the client. Demo deployments only.
    DEMO_RETURN_CODE: bool = False

    @property
    def is_local(self) -> bool:
        return self.ENV.lower() in {"dev", "local"}


settings = Settings()
