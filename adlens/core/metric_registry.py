"""AdLens — Unified Metric Registry.

Defines the canonical, ordered set of comparable metrics and their
classifications. The comparison engine and the chart projector both read
metric names from here so the two never drift apart.
"""

from enum import Enum
from typing import Dict, Optional

from adlens.core.errors import UnknownMetricError


class MetricName(str, Enum):
    """Every metric a normalized record carries, in comparison order."""

    SPEND = "spend"
    IMPRESSIONS = "impressions"
    CLICKS = "clicks"
    LEADS = "leads"
    CTR = "ctr"
    ROI = "roi"
    CPL = "cpl"
    CVR = "cvr"
    CPC = "cpc"
    CPM = "cpm"
    ENGAGEMENT_RATE = "engagement_rate"
    CPE = "cpe"
    ENGAGEMENTS = "engagements"
    INTERACTIONS = "interactions"
    ALL_CONVERSIONS = "all_conversions"


class ConfidenceTier(str, Enum):
    """Reliability label for a metric value. Absent (None) means not applicable."""

    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class MetricType(str, Enum):
    """How a metric is categorised."""

    VOLUME = "volume"  # Raw counts: impressions, clicks, leads
    COST = "cost"  # Monetary: spend
    RATE = "rate"  # Read from source as a rate: ctr
    DERIVED = "derived"  # Computed from base metrics: cpl, cpc, ...
    ENGAGEMENT = "engagement"  # Engagements, interactions
    RETURN = "return"  # roi, only when the source tracks value


class Polarity(str, Enum):
    """Which direction of change a viewer should read as favourable."""

    HIGHER_IS_BETTER = "higher_is_better"
    LOWER_IS_BETTER = "lower_is_better"
    NEUTRAL = "neutral"


class MetricDefinition:
    """Describes a single metric."""

    def __init__(
        self,
        name: MetricName,
        metric_type: MetricType,
        unit: str = "",
        description: str = "",
        polarity: Polarity = Polarity.NEUTRAL,
    ):
        self.name = name
        self.metric_type = metric_type
        self.unit = unit
        self.description = description
        self.polarity = polarity

    def __repr__(self) -> str:
        return f"<Metric {self.name.value} ({self.metric_type.value})>"


# ─────────────────────────────────────────────
# CANONICAL REGISTRY — ordered as compared
# ─────────────────────────────────────────────

METRICS: Dict[MetricName, MetricDefinition] = {
    MetricName.SPEND: MetricDefinition(
        MetricName.SPEND, MetricType.COST, "currency", "Total amount spent"
    ),
    MetricName.IMPRESSIONS: MetricDefinition(
        MetricName.IMPRESSIONS,
        MetricType.VOLUME,
        "count",
        "Number of times ads were shown",
        Polarity.HIGHER_IS_BETTER,
    ),
    MetricName.CLICKS: MetricDefinition(
        MetricName.CLICKS,
        MetricType.VOLUME,
        "count",
        "Total clicks",
        Polarity.HIGHER_IS_BETTER,
    ),
    MetricName.LEADS: MetricDefinition(
        MetricName.LEADS,
        MetricType.VOLUME,
        "count",
        "Primary conversions",
        Polarity.HIGHER_IS_BETTER,
    ),
    MetricName.CTR: MetricDefinition(
        MetricName.CTR,
        MetricType.RATE,
        "%",
        "Click-through rate",
        Polarity.HIGHER_IS_BETTER,
    ),
    MetricName.ROI: MetricDefinition(
        MetricName.ROI,
        MetricType.RETURN,
        "%",
        "Return on investment",
        Polarity.HIGHER_IS_BETTER,
    ),
    MetricName.CPL: MetricDefinition(
        MetricName.CPL,
        MetricType.DERIVED,
        "currency",
        "Spend / leads",
        Polarity.LOWER_IS_BETTER,
    ),
    MetricName.CVR: MetricDefinition(
        MetricName.CVR,
        MetricType.DERIVED,
        "%",
        "Leads / clicks",
        Polarity.HIGHER_IS_BETTER,
    ),
    MetricName.CPC: MetricDefinition(
        MetricName.CPC,
        MetricType.DERIVED,
        "currency",
        "Spend / clicks",
        Polarity.LOWER_IS_BETTER,
    ),
    MetricName.CPM: MetricDefinition(
        MetricName.CPM,
        MetricType.DERIVED,
        "currency",
        "Cost per 1000 impressions",
        Polarity.LOWER_IS_BETTER,
    ),
    MetricName.ENGAGEMENT_RATE: MetricDefinition(
        MetricName.ENGAGEMENT_RATE,
        MetricType.DERIVED,
        "%",
        "Engagements / impressions",
        Polarity.HIGHER_IS_BETTER,
    ),
    MetricName.CPE: MetricDefinition(
        MetricName.CPE,
        MetricType.DERIVED,
        "currency",
        "Spend / engagements",
        Polarity.LOWER_IS_BETTER,
    ),
    MetricName.ENGAGEMENTS: MetricDefinition(
        MetricName.ENGAGEMENTS,
        MetricType.ENGAGEMENT,
        "count",
        "Post, page, comment and reaction engagements",
        Polarity.HIGHER_IS_BETTER,
    ),
    MetricName.INTERACTIONS: MetricDefinition(
        MetricName.INTERACTIONS,
        MetricType.ENGAGEMENT,
        "count",
        "All tracked actions",
        Polarity.HIGHER_IS_BETTER,
    ),
    MetricName.ALL_CONVERSIONS: MetricDefinition(
        MetricName.ALL_CONVERSIONS,
        MetricType.VOLUME,
        "count",
        "Every conversion type, not only the primary one",
        Polarity.HIGHER_IS_BETTER,
    ),
}


# ─────────────────────────────────────────────
# HELPERS
# ─────────────────────────────────────────────

COMPARISON_METRICS = tuple(METRICS)

DERIVED_METRICS = tuple(
    m for m, d in METRICS.items() if d.metric_type == MetricType.DERIVED
)

# Metrics that may legitimately be None on a record
OPTIONAL_METRICS = (MetricName.ROI,)

BASE_METRICS = tuple(
    m for m in COMPARISON_METRICS if m not in DERIVED_METRICS and m not in OPTIONAL_METRICS
)

# Metrics shown as bar charts on comparison views
CHART_METRICS = (
    MetricName.SPEND,
    MetricName.IMPRESSIONS,
    MetricName.CLICKS,
    MetricName.CTR,
    MetricName.INTERACTIONS,
    MetricName.ENGAGEMENTS,
)


def get_metric(name: str | MetricName) -> MetricDefinition:
    """Look up a metric by name."""
    try:
        return METRICS[MetricName(name)]
    except ValueError:
        raise UnknownMetricError(str(name)) from None


def metrics_by_type(metric_type: MetricType) -> list[MetricDefinition]:
    """Return all metrics of a given type."""
    return [m for m in METRICS.values() if m.metric_type == metric_type]


def favourable_side(
    name: str | MetricName, value1: Optional[float], value2: Optional[float]
) -> Optional[str]:
    """Judge which side reads better for a viewer, using the metric's polarity.

    Returns "primary", "secondary", or None for neutral metrics and ties.
    This is separate from the magnitude-based ``better`` field of a
    comparison, which makes no value judgment.
    """
    polarity = get_metric(name).polarity
    v1 = value1 or 0.0
    v2 = value2 or 0.0
    if polarity == Polarity.NEUTRAL or v1 == v2:
        return None
    if polarity == Polarity.HIGHER_IS_BETTER:
        return "primary" if v1 > v2 else "secondary"
    return "primary" if v1 < v2 else "secondary"
