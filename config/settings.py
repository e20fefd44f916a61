"""Pydantic Settings — typed configuration with .env auto-loading."""

from __future__ import annotations

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment / .env file."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    # ── Service ──────────────────────────────────────────────
    service_port: int = 5000
    cors_origins: list[str] = ["*"]
    debug: bool = False
    log_level: str = "INFO"

    # ── Mock directories ─────────────────────────────────────
    # Artificial latency applied to every directory call (milliseconds).
    simulate_latency: bool = True
    student_latency_ms: int = 300
    class_latency_ms: int = 500
    auth_latency_ms: int = 800

    # ── Sessions ─────────────────────────────────────────────
    session_ttl: int = 3600  # seconds
    token_prefix: str = "mock-jwt-token-"

    # ── Helpers ───────────────────────────────────────────────

    def latency_seconds(self, latency_ms: int) -> float:
        """Convert a configured latency to seconds, honouring the global switch."""
        if not self.simulate_latency:
            return 0.0
        return max(latency_ms, 0) / 1000


@lru_cache
def get_settings() -> Settings:
    """Singleton accessor for application settings."""
    return Settings()
