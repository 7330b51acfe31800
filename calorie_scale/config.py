"""Application configuration loaded from CLI flags and environment variables."""

from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    app_name: str = "calorie-scale"
    log_level: str = "INFO"

    # Estimation
    threshold: int = Field(6, gt=0, description="Average gap (seconds) treated as zero intensity")
    keyword: str = Field("#youtube", min_length=1, description="Search query sampled from the source")

    # Downstream OSC transport
    osc_host: str = "localhost"
    osc_port: int = Field(8765, ge=1, le=65535)
    osc_address: str = "/calorie"

    # Upstream search source
    twitter_client_id: str = "-"
    twitter_client_secret: str = "-"
    search_result_type: str = "recent"
    search_count: int = Field(100, ge=1, le=100)
    http_timeout_seconds: float = Field(10.0, gt=0.0)

    # Scheduling
    sample_interval_seconds: float = Field(6.0, gt=0.0)
    publish_interval_seconds: float = Field(1.0, gt=0.0)

    model_config = {
        "env_prefix": "CALORIE_SCALE_",
        "env_file": ".env",
        "extra": "ignore",
        "frozen": True,
    }


def load_settings(argv: list[str] | None = None) -> Settings:
    """Build settings from *argv* flags layered over environment variables.

    ``argv=None`` disables CLI parsing entirely, which is what tests want.
    """
    if argv is None:
        return Settings()
    return Settings(_cli_parse_args=argv, _cli_prog_name="calorie-scale")
