import copy

import pytest

from adlens.connectors.meta.extractor import MetaExtractor
from adlens.core.metric_registry import ConfidenceTier, MetricName
from adlens.models.normalized_models import IdentityHints

extractor = MetaExtractor()


def test_account_payload(meta_account_payload):
    record = extractor.extract(meta_account_payload)

    assert record.entity_id == "act_1001"
    assert record.entity_name == "Storefront EU"
    assert record.platform_label == "Meta Ads"
    assert record.spend == 150.5
    assert record.impressions == 10000
    assert record.clicks == 200
    assert record.ctr == 2.0
    assert record.leads == 5
    assert record.cpc == 0.7525
    assert record.cpm == pytest.approx(15.05)
    assert record.cpl == 30.1


def test_action_sums(meta_account_payload):
    record = extractor.extract(meta_account_payload)

    assert record.engagements == 43  # post_engagement + comment
    assert record.interactions == 240  # every action, unfiltered
    assert record.all_conversions == 17  # purchase + offsite_conversion.*


def test_results_count_takes_precedence_over_actions(meta_account_payload):
    meta_account_payload["insights"]["results"] = [
        {"indicator": "actions:lead", "values": [{"value": "9"}]}
    ]
    record = extractor.extract(meta_account_payload)
    assert record.leads == 9
    assert record.cpl == 150.5 / 9


def test_lead_action_match_is_case_sensitive():
    record = extractor.extract(
        {"insights": {"actions": [{"action_type": "Purchase", "value": "4"}]}}
    )
    assert record.leads == 0
    assert record.interactions == 4


def test_roi_absent_is_null(meta_account_payload):
    record = extractor.extract(meta_account_payload)
    assert record.roi is None
    assert record.confidence[MetricName.ROI] is None
    assert record.confidence[MetricName.SPEND] == ConfidenceTier.HIGH


def test_roi_present_even_when_zero(meta_account_payload):
    meta_account_payload["roi"] = 0
    record = extractor.extract(meta_account_payload)
    assert record.roi == 0.0
    assert record.confidence[MetricName.ROI] == ConfidenceTier.HIGH


def test_roi_string_is_coerced(meta_account_payload):
    meta_account_payload["roi"] = "135.5"
    assert extractor.extract(meta_account_payload).roi == 135.5


@pytest.mark.parametrize("payload", [None, {}, [], "raw"])
def test_absent_payload_returns_none(payload):
    assert extractor.extract(payload) is None


def test_zero_payload_still_yields_record():
    record = extractor.extract({"account_id": "act_0", "insights": {}})
    assert record is not None
    assert record.spend == 0
    assert record.cpc == 0
    assert record.cvr == 0


def test_malformed_fields_coerce_to_zero():
    record = extractor.extract(
        {
            "account_id": "act_2",
            "insights": {
                "spend": {"amount": 10},
                "impressions": "n/a",
                "clicks": None,
                "ctr": "NaN",
                "actions": [None, "bad", {"action_type": "comment", "value": "x"}],
            },
        }
    )
    for metric in ("spend", "impressions", "clicks", "ctr", "engagements", "interactions"):
        assert getattr(record, metric) == 0


def test_negative_values_clamp_to_zero():
    record = extractor.extract({"insights": {"spend": "-12", "clicks": "3"}})
    assert record.spend == 0
    assert record.cpc == 0


def test_campaign_payload_with_graph_envelope():
    record = extractor.extract(
        {
            "campaign_id": "238",
            "insights_data": {
                "data": [{"campaign_name": "Spring Sale", "spend": "20", "clicks": "10"}]
            },
        },
        IdentityHints(entity_type="campaign", date_start="2026-10-01", date_stop="2026-10-07"),
    )
    assert record.entity_id == "238"
    assert record.entity_name == "Spring Sale"
    assert record.entity_type == "campaign"
    assert record.date_start == "2026-10-01"
    assert record.cpc == 2.0


def test_hints_override_payload_identity(meta_account_payload):
    record = extractor.extract(
        meta_account_payload, IdentityHints(entity_id="act_9", entity_name="Renamed")
    )
    assert record.entity_id == "act_9"
    assert record.entity_name == "Renamed"


def test_extraction_is_deterministic_and_pure(meta_account_payload):
    snapshot = copy.deepcopy(meta_account_payload)
    first = extractor.extract(meta_account_payload)
    second = extractor.extract(meta_account_payload)
    assert first == second
    assert first.model_dump() == second.model_dump()
    assert meta_account_payload == snapshot


def test_action_values_truncate_to_whole_counts():
    record = extractor.extract(
        {"insights": {"actions": [
            {"action_type": "comment", "value": "2.7"},
            {"action_type": "post_reaction", "value": 1.9},
        ]}}
    )
    assert record.engagements == 3
    assert record.interactions == 3


def test_huge_spend_overflowing_cpm_reports_zero():
    record = extractor.extract({"insights": {"spend": "1e306", "impressions": "1"}})
    assert record.spend == 1e306
    assert record.cpm == 0.0


def test_overflowing_action_sum_reports_zero():
    record = extractor.extract(
        {"insights": {"actions": [
            {"action_type": "comment", "value": "1e308"},
            {"action_type": "comment", "value": "1e308"},
        ]}}
    )
    assert record.engagements == 0
    assert record.interactions == 0


def test_huge_json_integer_falls_back():
    record = extractor.extract({"insights": {"clicks": 10**400, "spend": 10**400}})
    assert record.clicks == 0
    assert record.spend == 0
