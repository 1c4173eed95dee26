"""Shared raw payload fixtures."""

import pytest


@pytest.fixture
def meta_account_payload():
    return {
        "account_id": "act_1001",
        "account_name": "Storefront EU",
        "insights": {
            "spend": "150.5",
            "impressions": "10000",
            "clicks": "200",
            "ctr": "2.0",
            "actions": [
                {"action_type": "purchase", "value": "5"},
                {"action_type": "post_engagement", "value": "40"},
                {"action_type": "comment", "value": "3"},
                {"action_type": "link_click", "value": "180"},
                {"action_type": "offsite_conversion.fb_pixel_add_to_cart", "value": "12"},
            ],
        },
    }


@pytest.fixture
def google_customer_payload():
    return {
        "customer_id": 1234567890,
        "descriptive_name": "Search - Brand",
        "metrics": {
            "cost": "100",
            "impressions": 4000,
            "clicks": "50",
            "ctr": 0.0125,
            "conversions": "10",
            "conversions_value": "300",
            "all_conversions": 14.5,
            "interactions": 60,
            "engagements": 8,
        },
    }
