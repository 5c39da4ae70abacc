"""Application configuration using pydantic-settings.

Defaults point at the public Brewit automation API for the Monad agent.
"""

from functools import lru_cache
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # ======================
    # API
    # ======================
    api_host: str = Field(default="0.0.0.0", description="API server host")
    api_port: int = Field(default=8000, description="API server port")

    # ======================
    # Environment
    # ======================
    environment: str = Field(default="development", description="Runtime environment")
    debug: bool = Field(default=False, description="Enable debug mode")

    # ======================
    # Brewit automation API
    # ======================
    brewit_base_url: str = Field(
        default="https://api.brewit.money", description="Brewit API base URL"
    )
    brewit_agent_path: str = Field(
        default="/automation/agents/monad", description="Automation agent endpoint path"
    )
    brewit_timeout: Optional[float] = Field(
        default=None, description="Outbound request timeout in seconds (None = no timeout)"
    )

    # ======================
    # Automation job envelope
    # ======================
    job_name: str = Field(default="Monad Agent Job", description="Automation job name")
    job_repeat: int = Field(default=5000, description="Automation job repeat interval")
    job_times: int = Field(default=1, description="Number of times the job runs")

    # ======================
    # Validation
    # ======================
    strict_params: bool = Field(
        default=True,
        description="Require every tool body parameter to be a string before dispatch",
    )

    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.environment.lower() == "production"

    @property
    def agent_url(self) -> str:
        """Full URL of the automation agent endpoint."""
        return f"{self.brewit_base_url.rstrip('/')}/{self.brewit_agent_path.lstrip('/')}"

    def get_safe_dict(self) -> dict:
        """Return settings dict suitable for health output."""
        return {
            "environment": self.environment,
            "debug": self.debug,
            "api_host": self.api_host,
            "api_port": self.api_port,
            "brewit": {
                "agent_url": self.agent_url,
                "timeout": self.brewit_timeout,
            },
            "job": {
                "name": self.job_name,
                "repeat": self.job_repeat,
                "times": self.job_times,
            },
            "strict_params": self.strict_params,
        }


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
