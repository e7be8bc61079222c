# app/core/config.py
from functools import lru_cache
from typing import List
import logging
import os

from dotenv import load_dotenv

load_dotenv()

logger = logging.getLogger(__name__)

DEFAULT_JWT_SECRET = "dev-secret-change-me"


class Settings:
    # --- API Info ---
    API_TITLE: str = "Storefront API"
    API_DESCRIPTION: str = "User accounts, products, carts and order history for the storefront."
    API_VERSION: str = "1.0.0"
    API_PREFIX: str = "/api/v1"

    def __init__(
        self,
        database_url: str = "sqlite:///./storefront.db",
        jwt_secret: str = DEFAULT_JWT_SECRET,
        jwt_algorithm: str = "HS256",
        jwt_expires_days: int = 30,
        bcrypt_rounds: int = 12,
        login_rate_limit: str = "10/minute",
        cors_origins: List[str] = None,
        environment: str = "development",
        host: str = "0.0.0.0",
        port: int = 8000,
    ):
        self.DATABASE_URL = database_url
        self.JWT_SECRET = jwt_secret
        self.JWT_ALGORITHM = jwt_algorithm
        self.JWT_EXPIRES_DAYS = jwt_expires_days
        self.BCRYPT_ROUNDS = bcrypt_rounds
        self.LOGIN_RATE_LIMIT = login_rate_limit
        self.CORS_ORIGINS = cors_origins or ["*"]
        self.ENVIRONMENT = environment

        # --- Server Configuration ---
        self.HOST = host
        self.PORT = port

    @property
    def is_development(self) -> bool:
        return self.ENVIRONMENT == "development"

    @classmethod
    def from_env(cls) -> "Settings":
        """Build settings from the process environment (and `.env`, if present)."""
        jwt_secret = os.getenv("JWT_SECRET")
        if not jwt_secret:
            logger.warning("JWT_SECRET not set, falling back to the development secret")
            jwt_secret = DEFAULT_JWT_SECRET

        return cls(
            database_url=os.getenv("DATABASE_URL", "sqlite:///./storefront.db"),
            jwt_secret=jwt_secret,
            jwt_algorithm=os.getenv("JWT_ALGORITHM", "HS256"),
            jwt_expires_days=int(os.getenv("JWT_EXPIRES_DAYS", "30")),
            bcrypt_rounds=int(os.getenv("BCRYPT_ROUNDS", "12")),
            login_rate_limit=os.getenv("LOGIN_RATE_LIMIT", "10/minute"),
            cors_origins=[
                origin.strip()
                for origin in os.getenv("CORS_ORIGINS", "*").split(",")
                if origin.strip()
            ],
            environment=os.getenv("ENVIRONMENT", "development"),
            host=os.getenv("HOST", "0.0.0.0"),
            port=int(os.getenv("PORT", "8000")),
        )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings.from_env()
