"""AdLens — Abstract Platform Extractor."""

from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional

from adlens.analyzer.derived_metrics import build_confidence, compute_derived_metrics
from adlens.core.coercion import to_number, to_safe_string
from adlens.core.metric_registry import BASE_METRICS, MetricName
from adlens.models.normalized_models import IdentityHints, NormalizedPerformanceRecord


class PlatformExtractor(ABC):
    """Abstract base for turning one platform's raw payload into a record.

    Each ad platform is its own subclass. Subclasses read base metrics only;
    derived metrics and confidence come from ``_build_record`` so every
    platform shares the same math.
    """

    platform: str = ""

    @property
    @abstractmethod
    def label(self) -> str:
        """Human-readable platform name stamped on every record."""
        ...

    @abstractmethod
    def extract(
        self, raw: Any, hints: Optional[IdentityHints] = None
    ) -> Optional[NormalizedPerformanceRecord]:
        """Normalize a raw account or campaign payload.

        Args:
            raw: The already-fetched JSON payload for one entity.
            hints: Identity fields from the caller. They win over ids and
                   names found in the payload.

        Returns:
            A record, or None when the payload is absent (None or empty).
        """
        ...

    # ── Shared helpers ──

    @staticmethod
    def _is_absent(raw: Any) -> bool:
        return not isinstance(raw, dict) or not raw

    @staticmethod
    def _first_string(candidates: List[Any], fallback: str) -> str:
        """First usable string among candidates, else ``fallback``."""
        for value in candidates:
            text = to_safe_string(value, "")
            if text:
                return text
        return fallback

    def _build_record(
        self,
        hints: IdentityHints,
        entity_id: str,
        entity_name: str,
        base: Dict[MetricName, float],
        roi: Optional[float],
    ) -> NormalizedPerformanceRecord:
        """Assemble a record from base metrics and an optional ROI."""
        # Every base metric finite and non-negative; overflowed sums become 0
        base = {
            metric: max(0.0, to_number(base.get(metric))) for metric in BASE_METRICS
        }
        if roi is not None:
            roi = to_number(roi)
        derived = compute_derived_metrics(
            spend=base[MetricName.SPEND],
            impressions=base[MetricName.IMPRESSIONS],
            clicks=base[MetricName.CLICKS],
            leads=base[MetricName.LEADS],
            engagements=base[MetricName.ENGAGEMENTS],
        )
        values: Dict[MetricName, Optional[float]] = {**base, **derived}
        values[MetricName.ROI] = roi

        return NormalizedPerformanceRecord(
            entity_id=entity_id,
            entity_name=entity_name,
            platform_label=self.label,
            entity_type=hints.entity_type,
            date_start=hints.date_start,
            date_stop=hints.date_stop,
            confidence=build_confidence(values),
            **{metric.value: value for metric, value in values.items()},
        )
