from typing import Literal

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def split_statuses(value: str) -> list[str]:
    """Status ids from a comma-separated string, blanks dropped."""
    return [s.strip() for s in value.split(",") if s.strip()]


class Settings(BaseSettings):
    """Application settings loaded from environment (GH_BOARD_*)."""

    model_config = SettingsConfigDict(env_prefix="GH_BOARD_", env_file=".env", extra="ignore")

    # URL of the project board, e.g. https://github.com/orgs/COMPANY/projects/PROJECT
    url: str = ""

    # Session cookies, taken from a logged-in browser
    user_session: str = ""
    github_session: str = ""

    # Comma-separated status ids to list
    statuses: str = ""

    # Filter board items by assignee login
    user: str | None = None

    # Whose contribution calendar to show; falls back to git config
    contributions_user: str = ""
    days: int = 14

    log_level: LogLevel = "WARNING"

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_log_level(cls, value: object) -> object:
        return value.strip().upper() if isinstance(value, str) else value

    def status_list(self) -> list[str]:
        return split_statuses(self.statuses)


def get_settings() -> Settings:
    return Settings()


# =============================================================================
# DISPLAY THRESHOLDS
# =============================================================================

# Days with more contributions than this are highlighted as busy
BUSY_DAY_THRESHOLD = 3
