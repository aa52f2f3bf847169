from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    CLASSIFIER_PROVIDER: str = "http"  # "http" | "mock"
    CLASSIFIER_PREDICT_URL: str = "https://mushroom-backend-fqwe.onrender.com/predict"
    CLASSIFIER_TIMEOUT_SECONDS: float = 30.0

    SESSION_COOKIE_NAME: str = "mushroom_session"
    SESSION_TTL_SECONDS: float = 6 * 60 * 60

    ENV: str = "dev"
    LOG_LEVEL: str = "INFO"


settings = Settings()
