"""AdLens — Google Ads Raw → Normalized Extractor.

Google reports cost in micro-units (unless a ``cost`` field is already
converted), CTR as a fraction, and conversions as a plain numeric field.
"""

from typing import Any, Dict, Optional

from adlens.config import settings
from adlens.connectors.base import PlatformExtractor
from adlens.core.coercion import to_number
from adlens.core.logging import get_logger
from adlens.core.metric_registry import MetricName
from adlens.models.normalized_models import IdentityHints, NormalizedPerformanceRecord

logger = get_logger("google.extractor")

MICROS_PER_UNIT = 1_000_000


def _metrics(raw: Dict[str, Any]) -> Dict[str, Any]:
    """Locate the metrics object for a customer or campaign payload."""
    metrics = raw.get("metrics")
    if isinstance(metrics, dict):
        return metrics
    performance = raw.get("performance")
    if isinstance(performance, dict):
        overview = performance.get("overview")
        return overview if isinstance(overview, dict) else performance
    return {}


def _spend(metrics: Dict[str, Any]) -> float:
    if metrics.get("cost") is not None:
        return to_number(metrics["cost"])
    return to_number(metrics.get("cost_micros")) / MICROS_PER_UNIT


def _roi(spend: float, metrics: Dict[str, Any]) -> Optional[float]:
    """ROI percentage; None unless both spend and conversion value are positive."""
    conversion_value = to_number(metrics.get("conversions_value"))
    if spend > 0 and conversion_value > 0:
        return ((conversion_value - spend) / spend) * 100
    return None


class GoogleExtractor(PlatformExtractor):
    """Google Ads customer / campaign extractor."""

    platform = "google"

    @property
    def label(self) -> str:
        return settings.google_platform_label

    def extract(
        self, raw: Any, hints: Optional[IdentityHints] = None
    ) -> Optional[NormalizedPerformanceRecord]:
        hints = hints or IdentityHints()
        if self._is_absent(raw):
            logger.info(
                "No Google payload supplied", extra={"platform": self.platform}
            )
            return None

        metrics = _metrics(raw)
        spend = _spend(metrics)

        base: Dict[MetricName, float] = {
            MetricName.SPEND: spend,
            MetricName.IMPRESSIONS: to_number(metrics.get("impressions")),
            MetricName.CLICKS: to_number(metrics.get("clicks")),
            MetricName.LEADS: to_number(metrics.get("conversions")),
            # Fraction → percentage
            MetricName.CTR: to_number(metrics.get("ctr")) * 100,
            MetricName.ENGAGEMENTS: to_number(metrics.get("engagements")),
            MetricName.INTERACTIONS: to_number(metrics.get("interactions")),
            MetricName.ALL_CONVERSIONS: to_number(metrics.get("all_conversions")),
        }

        entity_id = self._first_string(
            [
                hints.entity_id,
                raw.get("customer_id"),
                raw.get("campaign_id"),
                raw.get("id"),
            ],
            fallback="unknown",
        )
        entity_name = self._first_string(
            [
                hints.entity_name,
                raw.get("descriptive_name"),
                raw.get("campaign_name"),
                raw.get("name"),
            ],
            fallback=entity_id,
        )

        record = self._build_record(
            hints, entity_id, entity_name, base, _roi(spend, metrics)
        )
        logger.debug(
            f"Normalized Google {hints.entity_type} {entity_id}: "
            f"spend={record.spend} roi={record.roi}",
            extra={"platform": self.platform, "entity_id": entity_id},
        )
        return record
