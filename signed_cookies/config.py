"""Configuration for signed cookies."""
from datetime import datetime
from pydantic import BaseModel
from pydantic_settings import BaseSettings


class CookieOptions(BaseModel):
    """Options applied uniformly to every cookie a signer creates.

    ``keys`` is ordered newest first: the first key signs, every key verifies.
    An empty list disables signed operations.
    """

    keys: list[str] = []
    path: str | None = None
    domain: str | None = None
    expires: datetime | None = None
    max_age: int = 0
    secure: bool = False
    http_only: bool = False


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Signing keys, primary first (JSON list in the environment)
    keys: list[str] = []

    # Cookie attributes
    path: str | None = "/"
    domain: str | None = None
    expires: datetime | None = None
    max_age: int = 0
    secure: bool = False  # Set to True in production with HTTPS
    http_only: bool = True

    class Config:
        env_prefix = "SIGNED_COOKIES_"
        env_file = ".env"
        env_file_encoding = "utf-8"

    def cookie_options(self) -> CookieOptions:
        return CookieOptions(
            keys=list(self.keys),
            path=self.path,
            domain=self.domain,
            expires=self.expires,
            max_age=self.max_age,
            secure=self.secure,
            http_only=self.http_only,
        )


# Global settings instance
settings = Settings()


def get_settings() -> Settings:
    """Return the global settings (overridable as a FastAPI dependency)."""
    return settings
