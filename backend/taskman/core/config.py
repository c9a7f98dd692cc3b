from pydantic_settings import BaseSettings

class Settings(BaseSettings):
    APP_NAME: str = "Task Management"

    # DB
    DATABASE_URL: str = "sqlite:///./data/tasks.db"
    SQL_ECHO: bool = False

    LOG_LEVEL: str = "INFO"
    LIST_LIMIT: int = 100

    class Config:
        env_file = ".env"

settings = Settings()
