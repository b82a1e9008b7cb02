from os import getenv


def _split_csv(value: str) -> list:
    return [item.strip() for item in value.split(",") if item.strip()]


class Settings:
    DATABASE_URL = getenv("DATABASE_URL", "postgresql+psycopg://taskmanager:taskmanager@db:5432/taskmanager")

    JWT_SECRET = getenv("JWT_SECRET", "dev-secret-change-in-prod")
    JWT_ALGORITHM = getenv("JWT_ALGORITHM", "HS256")
    JWT_EXPIRE_MIN = int(getenv("JWT_EXPIRE_MIN", "1440"))  # 24h

    # front React en dev
    ALLOWED_ORIGINS = _split_csv(getenv("ALLOWED_ORIGINS", "http://localhost:3000,http://localhost:5173"))

    LOG_LEVEL = getenv("LOG_LEVEL", "INFO")

    DEFAULT_PAGE_SIZE = int(getenv("DEFAULT_PAGE_SIZE", "10"))
    MAX_PAGE_SIZE = int(getenv("MAX_PAGE_SIZE", "100"))

settings = Settings()
