"""AdLens — Meta Raw → Normalized Extractor.

Reads a Meta ad account or campaign payload (an ``insights`` object with an
``action_type``-tagged ``actions`` array) into a NormalizedPerformanceRecord.
"""

from typing import Any, Dict, List, Optional

from adlens.config import settings
from adlens.connectors.base import PlatformExtractor
from adlens.core.coercion import dig, to_int, to_number
from adlens.core.logging import get_logger
from adlens.core.metric_registry import MetricName
from adlens.models.normalized_models import IdentityHints, NormalizedPerformanceRecord

logger = get_logger("meta.extractor")

# Exact action types counted as leads when no ``results`` count is present
LEAD_ACTION_TYPES = frozenset(
    {
        "lead",
        "purchase",
        "offsite_conversion.fb_pixel_purchase",
        "offsite_conversion.fb_pixel_lead",
        "onsite_conversion.lead_grouped",
    }
)

ENGAGEMENT_ACTION_TYPES = frozenset(
    {"post_engagement", "page_engagement", "comment", "post_reaction"}
)


def _insights(raw: Dict[str, Any]) -> Dict[str, Any]:
    """Locate the insights row for an account or campaign payload."""
    insights = raw.get("insights")
    if insights is None:
        insights = raw.get("insights_data")
    # Graph API envelope: {"data": [row, ...]}
    if isinstance(insights, dict) and isinstance(insights.get("data"), list):
        insights = dig(insights, "data", 0)
    return insights if isinstance(insights, dict) else {}


def _actions(insights: Dict[str, Any]) -> List[Dict[str, Any]]:
    actions = insights.get("actions")
    if not isinstance(actions, list):
        return []
    return [a for a in actions if isinstance(a, dict)]


def _sum_actions(actions: List[Dict[str, Any]], predicate) -> int:
    return sum(
        to_int(a.get("value"))
        for a in actions
        if predicate(str(a.get("action_type") or ""))
    )


def _extract_action_metrics(insights: Dict[str, Any]) -> Dict[MetricName, float]:
    """Extract action-based metrics (leads, engagements, interactions, ...)."""
    actions = _actions(insights)

    results_count = dig(insights, "results", 0, "values", 0, "value")
    if results_count is not None:
        leads = to_int(results_count)
    else:
        leads = _sum_actions(actions, lambda t: t in LEAD_ACTION_TYPES)

    return {
        MetricName.LEADS: leads,
        MetricName.ENGAGEMENTS: _sum_actions(
            actions, lambda t: t in ENGAGEMENT_ACTION_TYPES
        ),
        MetricName.INTERACTIONS: _sum_actions(actions, lambda t: True),
        MetricName.ALL_CONVERSIONS: _sum_actions(
            actions, lambda t: "conversion" in t or t == "purchase"
        ),
    }


def _extract_roi(raw: Dict[str, Any], insights: Dict[str, Any]) -> Optional[float]:
    """ROI only when the payload explicitly carries it, even as 0."""
    for source in (raw, insights):
        if source.get("roi") is not None:
            return to_number(source["roi"])
    return None


class MetaExtractor(PlatformExtractor):
    """Meta Ads account / campaign extractor."""

    platform = "meta"

    @property
    def label(self) -> str:
        return settings.meta_platform_label

    def extract(
        self, raw: Any, hints: Optional[IdentityHints] = None
    ) -> Optional[NormalizedPerformanceRecord]:
        hints = hints or IdentityHints()
        if self._is_absent(raw):
            logger.info("No Meta payload supplied", extra={"platform": self.platform})
            return None

        insights = _insights(raw)

        base: Dict[MetricName, float] = {
            MetricName.SPEND: to_number(insights.get("spend")),
            MetricName.IMPRESSIONS: to_int(insights.get("impressions")),
            MetricName.CLICKS: to_int(insights.get("clicks")),
            MetricName.CTR: to_number(insights.get("ctr")),
        }
        base.update(_extract_action_metrics(insights))

        entity_id = self._first_string(
            [
                hints.entity_id,
                raw.get("account_id"),
                raw.get("campaign_id"),
                raw.get("id"),
                insights.get("account_id"),
                insights.get("campaign_id"),
            ],
            fallback="unknown",
        )
        entity_name = self._first_string(
            [
                hints.entity_name,
                raw.get("account_name"),
                raw.get("campaign_name"),
                raw.get("name"),
                insights.get("campaign_name"),
                insights.get("account_name"),
            ],
            fallback=entity_id,
        )

        record = self._build_record(
            hints, entity_id, entity_name, base, _extract_roi(raw, insights)
        )
        logger.debug(
            f"Normalized Meta {hints.entity_type} {entity_id}: "
            f"spend={record.spend} leads={record.leads}",
            extra={"platform": self.platform, "entity_id": entity_id},
        )
        return record
