import ssl
from typing import List, Optional

from pydantic_settings import BaseSettings, SettingsConfigDict
from sqlalchemy.engine import URL


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Database
    DB_HOST: str = "localhost"
    DB_USER: str = "plantstore"
    DB_PASS: str = ""
    DB_NAME: str = "plantstore"
    DB_PORT: int = 5432
    DB_SSL: bool = True
    # Full SQLAlchemy URL, wins over the DB_* parts when set
    DATABASE_URL: Optional[str] = None

    # Server
    HOST: str = "0.0.0.0"
    PORT: int = 5000

    # App
    LOG_LEVEL: str = "INFO"
    ALLOWED_ORIGINS: str = "*"

    @property
    def origins(self) -> List[str]:
        return [o.strip() for o in self.ALLOWED_ORIGINS.split(",")]

    @property
    def database_url(self) -> str | URL:
        if self.DATABASE_URL:
            return self.DATABASE_URL
        return URL.create(
            "postgresql+asyncpg",
            username=self.DB_USER,
            password=self.DB_PASS or None,
            host=self.DB_HOST,
            port=self.DB_PORT,
            database=self.DB_NAME,
        )

    @property
    def connect_args(self) -> dict:
        """Driver arguments; TLS always verifies the server certificate."""
        if not self.DB_SSL or str(self.database_url).startswith("sqlite"):
            return {}
        context = ssl.create_default_context()
        context.check_hostname = True
        context.verify_mode = ssl.CERT_REQUIRED
        return {"ssl": context}


settings = Settings()
