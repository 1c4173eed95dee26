"""AdLens — Comparison & Chart Output Models."""

from typing import Dict, List, Literal, Optional

from pydantic import BaseModel

from adlens.core.metric_registry import MetricName
from adlens.models.normalized_models import NormalizedPerformanceRecord

Side = Literal["primary", "secondary"]


class MetricDifference(BaseModel):
    """Difference between two records for one metric."""

    absolute: float
    percentage: float
    better: Side  # larger magnitude, not a value judgment


class ComparisonResult(BaseModel):
    """Metric-by-metric comparison of exactly two records."""

    primary: Optional[NormalizedPerformanceRecord] = None
    secondary: Optional[NormalizedPerformanceRecord] = None
    differences: Dict[MetricName, MetricDifference] = {}


class EntityComparison(BaseModel):
    """N-way comparison view: raw entities, pairwise diff only for two."""

    entities: List[NormalizedPerformanceRecord] = []
    comparison: Optional[ComparisonResult] = None


class ChartPoint(BaseModel):
    """One bar in a comparison chart."""

    label: str
    value: float
    color_key: str
    color: str = ""
