"""AdLens — Normalized Performance Record (Universal Schema).

Every platform extractor normalizes into this format. Adding another ad
platform requires a new extractor, never a schema change.
"""

from typing import Dict, Optional, Literal

from pydantic import BaseModel, ConfigDict, Field, model_validator

from adlens.analyzer.derived_metrics import build_confidence, compute_derived_metrics
from adlens.core.metric_registry import COMPARISON_METRICS, ConfidenceTier, MetricName

EntityType = Literal["account", "campaign"]

# Shared constraints for base and derived metric fields
_METRIC = dict(default=0.0, ge=0, allow_inf_nan=False)


class IdentityHints(BaseModel):
    """Caller-supplied identity for an entity, passed through as strings."""

    entity_id: Optional[str] = None
    entity_name: Optional[str] = None
    entity_type: EntityType = "account"
    date_start: Optional[str] = None
    date_stop: Optional[str] = None


class NormalizedPerformanceRecord(BaseModel):
    """One entity's performance over a date range.

    Derived metrics are only ever filled in by the derived-metric calculator;
    construct records through a platform extractor rather than by hand.
    ``roi`` is None when the source carries no conversion-value signal, and
    ``confidence["roi"]`` is None exactly then.
    """

    model_config = ConfigDict(frozen=True)

    entity_id: str
    entity_name: str
    platform_label: str
    entity_type: EntityType = "account"
    date_start: Optional[str] = None
    date_stop: Optional[str] = None

    # Base metrics
    spend: float = Field(**_METRIC)
    impressions: float = Field(**_METRIC)
    clicks: float = Field(**_METRIC)
    leads: float = Field(**_METRIC)
    ctr: float = Field(**_METRIC, description="Percentage, 0-100 scale")
    engagements: float = Field(**_METRIC)
    interactions: float = Field(**_METRIC)
    all_conversions: float = Field(**_METRIC)

    # Optional metric
    roi: Optional[float] = Field(default=None, allow_inf_nan=False)

    # Derived metrics
    cpl: float = Field(**_METRIC)
    cvr: float = Field(**_METRIC)
    cpc: float = Field(**_METRIC)
    cpm: float = Field(**_METRIC)
    engagement_rate: float = Field(**_METRIC)
    cpe: float = Field(**_METRIC)

    confidence: Dict[MetricName, Optional[ConfidenceTier]] = Field(
        default_factory=dict
    )

    @model_validator(mode="after")
    def _check_consistency(self) -> "NormalizedPerformanceRecord":
        """Derived metrics must match their formulas; confidence must match values."""
        derived = compute_derived_metrics(
            spend=self.spend,
            impressions=self.impressions,
            clicks=self.clicks,
            leads=self.leads,
            engagements=self.engagements,
        )
        for metric, expected in derived.items():
            if self.metric_value(metric) != expected:
                raise ValueError(
                    f"{metric.value}={self.metric_value(metric)} does not match "
                    f"its formula (expected {expected})"
                )
        values = {metric: self.metric_value(metric) for metric in COMPARISON_METRICS}
        if self.confidence != build_confidence(values):
            raise ValueError("confidence does not match the metric values")
        return self

    def metric_value(self, metric: MetricName) -> Optional[float]:
        """Return the value of ``metric`` on this record."""
        return getattr(self, MetricName(metric).value)
