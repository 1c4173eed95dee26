"""AdLens — Chart-Series Projector.

Maps normalized records onto (label, value, color) points, one series per
metric, so comparison charts colour each platform consistently.
"""

from typing import Dict, List, Sequence

from adlens.config import settings
from adlens.core.metric_registry import CHART_METRICS, MetricName, get_metric
from adlens.models.comparison_models import ChartPoint
from adlens.models.normalized_models import NormalizedPerformanceRecord

NEUTRAL_COLOR_KEY = "neutral"


def _color_keys() -> Dict[str, str]:
    return {
        settings.meta_platform_label: "meta",
        settings.google_platform_label: "google",
    }


def _palette() -> Dict[str, str]:
    return {
        "meta": settings.meta_color,
        "google": settings.google_color,
        NEUTRAL_COLOR_KEY: settings.neutral_color,
    }


def color_key_for(platform_label: str) -> str:
    """Fixed colour key for a platform label."""
    return _color_keys().get(platform_label, NEUTRAL_COLOR_KEY)


def project(
    records: Sequence[NormalizedPerformanceRecord], metric: str | MetricName
) -> List[ChartPoint]:
    """One chart point per record for ``metric``. None values chart as 0."""
    metric = get_metric(metric).name
    palette = _palette()

    points: List[ChartPoint] = []
    for record in records:
        key = color_key_for(record.platform_label)
        value = record.metric_value(metric)
        points.append(
            ChartPoint(
                label=record.entity_name or record.platform_label,
                value=value if value is not None else 0.0,
                color_key=key,
                color=palette[key],
            )
        )
    return points


def project_all(
    records: Sequence[NormalizedPerformanceRecord],
    metrics: Sequence[str | MetricName] = CHART_METRICS,
) -> Dict[MetricName, List[ChartPoint]]:
    """Fan out one series per metric."""
    return {get_metric(m).name: project(records, m) for m in metrics}
