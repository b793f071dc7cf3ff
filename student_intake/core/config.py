from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file='.env',
        env_file_encoding='utf-8',
        extra='ignore'
    )

    APP_NAME: str = "StudentIntake"
    APP_ENV: str = "dev"
    APP_HOST: str = "0.0.0.0"
    APP_PORT: int = 8000
    LOG_LEVEL: str = "INFO"

    # SQLite connection string (read from .env)
    DATABASE_URL: str = "sqlite:///./student_intake.db"

    # Resume uploads land here and are served under UPLOAD_URL_PREFIX
    UPLOAD_DIR: str = "public/uploads"
    UPLOAD_URL_PREFIX: str = "/uploads"
    MAX_RESUME_BYTES: int = 10 * 1024 * 1024  # 10MB

    SUCCESS_REDIRECT_URL: str = "/thank-you"

    # When true, an unparseable list field rejects the request instead of becoming []
    STRICT_LIST_FIELDS: bool = False

    BACKEND_CORS_ORIGINS: str = "http://localhost:8501"

settings = Settings()
