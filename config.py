"""
Configuration settings for the study planner.

Uses Pydantic Settings for environment variable management with .env file support.
All variables carry the PLANNER_ prefix, e.g. PLANNER_TOTAL_DAILY_HOURS=6.
"""
from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from src.planner.allocator import AdjustmentConfig


class PlannerSettings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="PLANNER_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # ========================================
    # Storage
    # ========================================
    data_file: Path = Field(
        default=Path("study_plan.csv"),
        description="CSV file used by the one-shot CLI commands",
    )

    # ========================================
    # Allocation
    # ========================================
    total_daily_hours: float = Field(
        default=4.0,
        ge=0.0,
        description="Daily study budget distributed across subjects",
    )
    min_slot_hours: float = Field(
        default=0.25,
        ge=0.0,
        description="Floor applied to every subject before renormalization",
    )
    history_window: int = Field(
        default=10,
        ge=1,
        description="Number of recent scores kept for the rolling performance mean",
    )
    default_performance: float = Field(
        default=100.0,
        ge=0.0,
        le=100.0,
        description="Performance score given to subjects added without one",
    )

    # ========================================
    # Adaptive Adjustment
    # ========================================
    low_threshold: float = Field(
        default=70.0,
        description="Subjects scoring below this get boosted",
    )
    high_threshold: float = Field(
        default=90.0,
        description="Subjects scoring above this get reduced",
    )
    boost_factor: float = Field(
        default=1.15,
        gt=0.0,
        description="Multiplier for underperforming subjects",
    )
    reduce_factor: float = Field(
        default=0.9,
        gt=0.0,
        description="Multiplier for strong subjects",
    )
    adjust_min_hours: float = Field(
        default=0.1,
        ge=0.0,
        description="Lower clamp applied to each subject during adjustment",
    )

    # ========================================
    # Logging
    # ========================================
    log_level: Literal["TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="WARNING",
        description="Minimum level written to stderr by the CLI",
    )

    # ========================================
    # Helper Methods
    # ========================================
    def adjustment_config(self) -> AdjustmentConfig:
        """Build the adaptive adjustment parameters from settings."""
        return AdjustmentConfig(
            low_threshold=self.low_threshold,
            high_threshold=self.high_threshold,
            boost_factor=self.boost_factor,
            reduce_factor=self.reduce_factor,
            min_hours=self.adjust_min_hours,
        )


@lru_cache(maxsize=1)
def get_settings() -> PlannerSettings:
    """Get cached settings instance."""
    return PlannerSettings()
