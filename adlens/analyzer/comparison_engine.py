"""AdLens — Comparison Engine.

Compares two normalized records metric by metric: absolute difference,
percentage difference against the secondary, and which side has the larger
magnitude. Inputs are read, never modified.
"""

from typing import Dict, List, Optional

from adlens.core.logging import get_logger
from adlens.core.metric_registry import COMPARISON_METRICS, MetricName
from adlens.models.comparison_models import (
    ComparisonResult,
    EntityComparison,
    MetricDifference,
)
from adlens.models.normalized_models import NormalizedPerformanceRecord

logger = get_logger("analyzer.comparison")


def _difference(
    value1: Optional[float], value2: Optional[float]
) -> Optional[MetricDifference]:
    """Difference for one metric; None when neither side has a value."""
    if value1 is None and value2 is None:
        return None
    v1 = value1 if value1 is not None else 0.0
    v2 = value2 if value2 is not None else 0.0

    # Zero baseline reports 0%, not infinity
    percentage = ((v1 - v2) / v2) * 100 if v2 != 0 else 0.0
    return MetricDifference(
        absolute=v1 - v2,
        percentage=percentage,
        better="primary" if abs(v1) > abs(v2) else "secondary",
    )


def compare(
    primary: Optional[NormalizedPerformanceRecord],
    secondary: Optional[NormalizedPerformanceRecord],
) -> ComparisonResult:
    """Compare two records over every metric in the registry order.

    If either record is missing, the result carries whichever record is
    present and no differences.
    """
    if primary is None or secondary is None:
        return ComparisonResult(primary=primary, secondary=secondary)

    differences: Dict[MetricName, MetricDifference] = {}
    for metric in COMPARISON_METRICS:
        diff = _difference(primary.metric_value(metric), secondary.metric_value(metric))
        if diff is not None:
            differences[metric] = diff

    logger.info(
        f"Compared {primary.entity_id} ({primary.platform_label}) with "
        f"{secondary.entity_id} ({secondary.platform_label}): "
        f"{len(differences)} metrics"
    )
    return ComparisonResult(
        primary=primary, secondary=secondary, differences=differences
    )


def compare_entities(
    records: List[Optional[NormalizedPerformanceRecord]],
) -> EntityComparison:
    """N-way comparison for multi-entity views.

    Absent entities are dropped. Pairwise differences are only computed when
    exactly two entities remain.
    """
    entities = [r for r in records if r is not None]
    comparison = compare(entities[0], entities[1]) if len(entities) == 2 else None
    return EntityComparison(entities=entities, comparison=comparison)
