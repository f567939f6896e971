# worktales/core/config.py
import json
from functools import lru_cache
from typing import List, Optional
from urllib.parse import quote_plus

from pydantic_settings import BaseSettings

DEFAULT_CORS_ORIGINS = ",".join([
    "http://localhost:5173",
    "https://intask-client.vercel.app",
    "https://worktales-client.web.app",
    "https://worktales-client.firebaseapp.com",
])


class Settings(BaseSettings):
    # App
    APP_ENV: str = "development"
    HOST: str = "0.0.0.0"
    PORT: int = 5000
    LOG_LEVEL: str = "INFO"
    # allowed browser origins, comma separated or a JSON list
    CORS_ORIGINS: str = DEFAULT_CORS_ORIGINS

    # MongoDB. Either a full URI or Atlas credentials; there is no default secret.
    MONGODB_URI: Optional[str] = None
    DB_USER: Optional[str] = None
    DB_KEY: Optional[str] = None
    MONGODB_CLUSTER: str = "cluster0.hf0b3tt.mongodb.net"
    MONGODB_DB: str = "workTalesDB"

    # Token signing. Required, environment values only.
    ACCESS_TOKEN_SECRET: str
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 60
    COOKIE_SECURE: bool = True
    COOKIE_SAMESITE: str = "none"

    # Pydantic v2 settings: read from .env file
    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }

    @property
    def cors_origins(self) -> List[str]:
        raw = self.CORS_ORIGINS.strip()
        if raw.startswith("["):
            return [str(o).strip() for o in json.loads(raw) if str(o).strip()]
        return [o.strip() for o in raw.split(",") if o.strip()]

    @property
    def mongodb_uri(self) -> str:
        if self.MONGODB_URI:
            return self.MONGODB_URI
        if not (self.DB_USER and self.DB_KEY):
            raise RuntimeError(
                "MongoDB is not configured: set MONGODB_URI, or DB_USER and DB_KEY"
            )
        return (
            f"mongodb+srv://{quote_plus(self.DB_USER)}:{quote_plus(self.DB_KEY)}"
            f"@{self.MONGODB_CLUSTER}/?retryWrites=true&w=majority"
        )


@lru_cache()
def get_settings() -> Settings:
    return Settings()
