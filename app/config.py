from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
    # --- DB ---
    # single connection string for the relational store
    DATABASE_URL: str = "postgresql+psycopg2://postgres:@localhost:5432/EmployeeManagement"
    SQL_ECHO: bool = False

    # --- App ---
    # "Development" exposes /docs, /redoc and /openapi.json
    ENVIRONMENT: str = "Production"
    FORCE_HTTPS: bool = False
    CORS_ORIGINS: list[str] = [
        "http://localhost:3000",
        "http://127.0.0.1:3000",
    ]

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=True
    )

    @property
    def is_development(self) -> bool:
        return self.ENVIRONMENT.strip().lower() == "development"

settings = Settings()
