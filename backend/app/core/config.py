from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=None, extra="ignore")

    ENV: str = "prod"
    LOG_LEVEL: str = "INFO"

    DATABASE_URL: str
    DB_NAME: str = "kid_draughts"

    API_KEY: str

    HOST: str = "0.0.0.0"
    PORT: int = 3000
    API_WORKERS: int = 1

    DB_POOL_SIZE: int = 5
    DB_MAX_OVERFLOW: int = 5
    DB_POOL_TIMEOUT_SECONDS: int = 30
    DB_POOL_RECYCLE_SECONDS: int = 1800
    DB_CONNECT_TIMEOUT_SECONDS: int = 10

    # create tables/indexes at boot (alembic for managed deployments)
    CREATE_SCHEMA_ON_STARTUP: bool = True

    MAX_BODY_BYTES: int = 256 * 1024

settings = Settings()
