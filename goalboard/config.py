"""Application configuration using Pydantic Settings."""
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Settings loaded from GOALBOARD_* environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="GOALBOARD_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Column titles
    weekly_column_title: str = "Weekly"
    monthly_column_title: str = "Monthly"
    yearly_column_title: str = "Yearly"

    # Logging
    log_level: str = "INFO"

    @property
    def column_titles(self) -> dict[str, str]:
        """Map each period value to its column title."""
        return {
            "weekly": self.weekly_column_title,
            "monthly": self.monthly_column_title,
            "yearly": self.yearly_column_title,
        }


settings = Settings()
