"""Configuration management using Pydantic Settings"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Engine configuration loaded from environment variables"""

    model_config = SettingsConfigDict(
        env_prefix="CASHPILOT_", env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )

    # Service
    service_name: str = "cashpilot"
    log_level: str = "INFO"

    # Dashboard defaults
    default_baseline_amount: float = 5000.0
    default_fixed_cost: float = 0.0
    default_chart_scope: str = "month"

    # Custom ranges up to this many days are projected day by day, longer ones monthly
    custom_range_daily_limit_days: int = 60

    # Insights
    insights_top_n: int = 5


settings = Settings()
