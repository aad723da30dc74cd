from pydantic_settings import BaseSettings

class Settings(BaseSettings):
    database_url: str = "sqlite:///./blockly.db"
    # Comma-separated list, e.g. "http://localhost:3000,https://blockly.example.com"
    cors_origins: str = ""
    log_level: str = "INFO"
    # Completed tasks older than this are removed when auto-cleanup is requested
    task_cleanup_days: int = 30

    class Config:
        env_file = ".env"

    @property
    def allow_origins(self) -> list[str]:
        return [o.strip() for o in self.cors_origins.split(",") if o.strip()]

settings = Settings()
