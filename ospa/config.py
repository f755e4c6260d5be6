"""Application configuration with validation."""
from typing import Optional, Literal, List
from functools import lru_cache
from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


# =============================================================================
# NCR SCHOOLS DIVISION OFFICES
# =============================================================================
# Division names exactly as they appear on the nomination form and in the
# normalized MOV filename ("{division}_{school}_{candidate}.pdf").
# =============================================================================

NCR_DIVISIONS: List[str] = [
    "Caloocan",
    "Las Piñas",
    "Makati",
    "Malabon",
    "Mandaluyong",
    "Manila",
    "Marikina",
    "Muntinlupa",
    "Navotas",
    "Parañaque",
    "Pasay",
    "Pasig",
    "Quezon City",
    "San Juan",
    "Taguig City and Pateros (TAPAT)",
    "Valenzuela",
]


def find_division(name: str) -> Optional[str]:
    """
    Resolve a division name case-insensitively.

    Args:
        name: Division name as typed (e.g., "quezon city")

    Returns:
        Canonical division name, or None if not an NCR division
    """
    wanted = name.lower().strip()
    for division in NCR_DIVISIONS:
        if division.lower() == wanted:
            return division
    return None


class Settings(BaseSettings):
    """OSPA scorer settings."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    APP_NAME: str = "OSPA Scorer"
    APP_VERSION: str = "1.0.0"
    APP_ENV: Literal["development", "staging", "production"] = "development"
    DEBUG: bool = False
    LOG_LEVEL: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    LOG_FORMAT: Literal["json", "console"] = "json"

    # API
    API_V1_PREFIX: str = "/api/v1"

    # Submission endpoint (Google Apps Script web app)
    SUBMISSION_URL: str = Field(
        default="https://script.google.com/macros/s/AKfycbwHlgnvlzqFfvMxy02xY_gor93x8rzZEBB0LUjEJfD3rr5Qj_5c2t5irOvzg8gUA7oN/exec",
        description="Web app URL that stores the MOV in Drive and appends the row to the Sheet",
    )
    SUBMISSION_TIMEOUT_SECONDS: float = Field(default=60.0, ge=1.0, le=600.0)

    # MOV attachment
    MOV_MAX_BYTES: int = Field(
        default=15 * 1024 * 1024,
        ge=1 * 1024 * 1024,
        le=25 * 1024 * 1024,
        description="Apps Script payloads cap near 50MB and base64 inflates by a third",
    )
    MOV_ALLOWED_MIME_TYPES: List[str] = Field(default=["application/pdf"])

    # Performance ratings (Adviser)
    DEFAULT_RATING_SCORE: float = Field(default=4.0, ge=0.0, le=5.0)
    PERFORMANCE_RATING_YEARS: List[str] = Field(
        default=["2024-2025", "2023-2024", "2022-2023", "2021-2022", "2020-2021"]
    )
    RATING_OUTSTANDING_MIN: float = Field(default=4.5, ge=0.0, le=5.0)
    RATING_VERY_SATISFACTORY_MIN: float = Field(default=3.5, ge=0.0, le=5.0)

    # Rubric overrides (JSON documents, see ospa/scoring/rubric.py)
    ADVISER_RUBRIC_PATH: Optional[str] = None
    JOURNALIST_RUBRIC_PATH: Optional[str] = None

    @field_validator("PERFORMANCE_RATING_YEARS")
    @classmethod
    def validate_rating_years(cls, v: List[str]) -> List[str]:
        if len(v) != 5:
            raise ValueError(f"Exactly 5 performance rating years required, got {len(v)}")
        return v

    @model_validator(mode="after")
    def validate_rating_bands(self):
        """Bands must be ordered: Outstanding above Very Satisfactory."""
        if self.RATING_OUTSTANDING_MIN < self.RATING_VERY_SATISFACTORY_MIN:
            raise ValueError(
                "RATING_OUTSTANDING_MIN must be >= RATING_VERY_SATISFACTORY_MIN"
            )
        return self

    @model_validator(mode="after")
    def validate_production_settings(self):
        """Production must post to a secure endpoint."""
        if self.APP_ENV == "production":
            if self.DEBUG:
                raise ValueError("DEBUG must be False in production")
            if not self.SUBMISSION_URL.startswith("https://"):
                raise ValueError("SUBMISSION_URL must use https in production")
        return self


@lru_cache
def get_settings() -> Settings:
    return Settings()


settings = get_settings()
