"""
Pydantic Settings — centralized configuration loaded from environment variables.
"""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # ── Address Service ───────────────────────
    ADDRESS_API_BASE_URL: str = "https://qa1-ngahservices.ngic.com/QuotingAPI/api/v1"
    ADDRESS_API_AUTH_TOKEN: str = ""
    ADDRESS_API_TIMEOUT_SECONDS: float = 10.0

    # ── HTTP ──────────────────────────────────
    CORS_ALLOW_ORIGINS: list[str] = ["*"]

    # ── Application ───────────────────────────
    APP_ENV: str = "development"
    LOG_LEVEL: str = ""

    @property
    def effective_log_level(self) -> str:
        """Explicit LOG_LEVEL wins, otherwise DEBUG in development."""
        if self.LOG_LEVEL:
            return self.LOG_LEVEL.upper()
        return "DEBUG" if self.APP_ENV == "development" else "INFO"

    model_config = {"env_file": ["../.env", ".env"], "extra": "ignore"}


settings = Settings()
