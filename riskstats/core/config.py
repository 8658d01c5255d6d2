"""
Configuration for the riskstats analytics engine.

Provides environment-aware defaults for every tunable threshold so callers
never depend on "magic numbers" buried in the algorithms. Function arguments
always take precedence over these values.
"""

from __future__ import annotations

from pathlib import Path
from typing import Dict, List, Optional

from pydantic import BaseModel, Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


ENSEMBLE_METHODS = ("zscore", "modified_zscore", "iqr", "mad", "grubbs", "isolation")


class TrendConfig(BaseModel):
    """
    Trend detection settings.

    Notes:
    - flat_epsilon: |slope| below this is reported as a flat trend.
    - change_min_slope: both local slopes must reach this magnitude for a
      reversal to count as a trend change.
    - full_confidence_points: sample size at which trend confidence stops
      being discounted.
    """

    flat_epsilon: float = Field(0.01, ge=0.0)
    change_min_slope: float = Field(0.01, ge=0.0)
    full_confidence_points: int = Field(30, ge=1)


class SeasonalityConfig(BaseModel):
    """Autocorrelation peak required before a period is reported."""

    threshold: float = Field(0.5, ge=0.0, le=1.0)


class ForecastConfig(BaseModel):
    """
    Forecast interval settings.

    interval_z is the normal quantile used for prediction bounds (1.96 ~ 95%).
    """

    interval_z: float = Field(1.96, ge=0.0)
    ses_alpha: float = Field(0.3, gt=0.0, le=1.0)


class DetectionConfig(BaseModel):
    """
    Settings shared by the local-baseline and isolation detectors.

    Notes:
    - std_floor: lower bound for the neighbourhood std used by contextual
      detection, so a spike inside a flat stretch still gets a finite score.
    - level_shift_min_run: points that must stay on the new side of a shift.
    - isolation_random_state: fixed seed so isolation scores are reproducible.
    """

    std_floor: float = Field(1e-6, gt=0.0)
    level_shift_min_run: int = Field(3, ge=1)
    isolation_threshold: float = Field(0.6, ge=0.0, le=1.0)
    isolation_n_estimators: int = Field(100, ge=1)
    isolation_random_state: int = Field(42, ge=0)


class DetectorThresholds(BaseModel):
    """Per-method thresholds used by one ensemble sensitivity preset."""

    zscore: float = Field(2.0, ge=0.0)
    modified_zscore: float = Field(3.5, ge=0.0)
    iqr: float = Field(1.5, ge=0.0)
    mad: float = Field(3.0, ge=0.0)
    grubbs: float = Field(0.05, gt=0.0, lt=1.0)
    isolation: float = Field(0.6, ge=0.0, le=1.0)


class EnsembleConfig(BaseModel):
    """
    Ensemble panel configuration.

    The panel membership is fixed per deployment. Confidence is always the
    number of agreeing methods divided by the panel size.
    """

    methods: List[str] = Field(
        default_factory=lambda: ["zscore", "modified_zscore", "iqr", "mad", "grubbs"]
    )
    min_confidence: float = Field(0.0, ge=0.0, le=1.0)
    presets: Dict[str, DetectorThresholds] = Field(
        default_factory=lambda: {
            "low": DetectorThresholds(
                zscore=3.0, modified_zscore=4.0, iqr=2.2, mad=4.0, grubbs=0.01, isolation=0.7
            ),
            "medium": DetectorThresholds(),
            "high": DetectorThresholds(
                zscore=1.8, modified_zscore=3.0, iqr=1.3, mad=2.5, grubbs=0.1, isolation=0.5
            ),
        }
    )

    @model_validator(mode="after")
    def _check_methods(self) -> "EnsembleConfig":
        unknown = [m for m in self.methods if m not in ENSEMBLE_METHODS]
        if unknown:
            raise ValueError(f"Unknown ensemble methods: {unknown}")
        if not self.methods:
            raise ValueError("Ensemble panel must contain at least one method")
        return self


class SeverityConfig(BaseModel):
    """
    Confidence cut-offs for severity levels.

    Rationale: a single agreeing method out of five stays low; a majority
    reaches high.
    """

    low: float = Field(0.2, ge=0.0, le=1.0)
    medium: float = Field(0.4, ge=0.0, le=1.0)
    high: float = Field(0.6, ge=0.0, le=1.0)
    critical: float = Field(0.8, ge=0.0, le=1.0)


class Config(BaseSettings):
    """
    Global configuration with environment overrides.
    """

    model_config = SettingsConfigDict(
        env_prefix="RISKSTATS_",
        env_nested_delimiter="__",
        env_file=".env",
        extra="ignore",
    )

    log_level: str = Field("INFO", description="Default logging level")
    logs_dir: Optional[Path] = Field(None, description="Directory for rotating log files")
    trend: TrendConfig = TrendConfig()
    seasonality: SeasonalityConfig = SeasonalityConfig()
    forecast: ForecastConfig = ForecastConfig()
    detection: DetectionConfig = DetectionConfig()
    ensemble: EnsembleConfig = EnsembleConfig()
    severity: SeverityConfig = SeverityConfig()


config = Config()
