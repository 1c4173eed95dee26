"""AdLens — Derived Metric Calculator.

Computes CPL, CVR, CPC, CPM, engagement rate and CPE from the base metrics
of a single record. These formulas are the only place derived metrics are
computed; every extractor goes through them. A zero denominator yields 0,
and so does a ratio that overflows the float range.
"""

from typing import Dict, Mapping, Optional

from adlens.core.coercion import to_number
from adlens.core.metric_registry import (
    COMPARISON_METRICS,
    ConfidenceTier,
    MetricName,
)


def cost_per_lead(spend: float, leads: float) -> float:
    return to_number(spend / leads) if leads > 0 else 0.0


def conversion_rate(leads: float, clicks: float) -> float:
    return to_number((leads / clicks) * 100) if clicks > 0 else 0.0


def cost_per_click(spend: float, clicks: float) -> float:
    return to_number(spend / clicks) if clicks > 0 else 0.0


def cost_per_mille(spend: float, impressions: float) -> float:
    return to_number((spend / impressions) * 1000) if impressions > 0 else 0.0


def engagement_rate(engagements: float, impressions: float) -> float:
    return to_number((engagements / impressions) * 100) if impressions > 0 else 0.0


def cost_per_engagement(spend: float, engagements: float) -> float:
    return to_number(spend / engagements) if engagements > 0 else 0.0


def compute_derived_metrics(
    spend: float,
    impressions: float,
    clicks: float,
    leads: float,
    engagements: float,
) -> Dict[MetricName, float]:
    """Compute every derived metric from base metrics."""
    return {
        MetricName.CPL: cost_per_lead(spend, leads),
        MetricName.CVR: conversion_rate(leads, clicks),
        MetricName.CPC: cost_per_click(spend, clicks),
        MetricName.CPM: cost_per_mille(spend, impressions),
        MetricName.ENGAGEMENT_RATE: engagement_rate(engagements, impressions),
        MetricName.CPE: cost_per_engagement(spend, engagements),
    }


def build_confidence(
    values: Mapping[MetricName, Optional[float]],
) -> Dict[MetricName, Optional[ConfidenceTier]]:
    """Assign a confidence tier per metric.

    Defined values are HIGH; a None value has no confidence at all.
    """
    return {
        metric: (None if values.get(metric) is None else ConfidenceTier.HIGH)
        for metric in COMPARISON_METRICS
    }
