"""
Unit Tests for recommendation request objects.

These tests verify:
1. Request validation messages
2. Conversion of requests to engine profiles
3. Comparison request validation
4. Reward estimate DTO rendering
"""

from card_advisor.application.dto import (
    ComparisonRequest,
    RecommendationRequest,
    RewardEstimateDTO,
)
from card_advisor.service.recommendation import CreditScoreBand, RewardEstimate


class TestRecommendationRequest:
    """Tests for RecommendationRequest."""

    def test_empty_request_is_valid(self):
        assert RecommendationRequest().validate() == []

    def test_negative_values_rejected(self):
        request = RecommendationRequest(
            monthly_income=-1,
            max_annual_fee=-5,
            spending_habits={"fuel": -100, "dining": 50},
        )
        errors = request.validate()

        assert "monthly_income cannot be negative" in errors
        assert "max_annual_fee cannot be negative" in errors
        assert "spending_habits cannot be negative: fuel" in errors

    def test_unknown_credit_band_rejected(self):
        errors = RecommendationRequest(credit_score="stellar").validate()
        assert len(errors) == 1
        assert errors[0].startswith("credit_score must be one of")

    def test_limit_range(self):
        assert RecommendationRequest(limit=1).validate() == []
        assert RecommendationRequest(limit=20).validate() == []
        assert RecommendationRequest(limit=0).validate() == ["limit must be between 1 and 20"]
        assert RecommendationRequest(limit=21).validate() == ["limit must be between 1 and 20"]

    def test_to_profile(self):
        """Request fields carry over and the band becomes an enum."""
        habits = {"fuel": 4000}
        request = RecommendationRequest(
            monthly_income=50000,
            spending_habits=habits,
            preferred_benefits=["cashback"],
            credit_score="good",
            max_annual_fee=1000,
        )
        profile = request.to_profile()

        assert profile.monthly_income == 50000
        assert profile.spending_habits == {"fuel": 4000}
        assert profile.spending_habits is not habits
        assert profile.preferred_benefits == ["cashback"]
        assert profile.credit_score is CreditScoreBand.GOOD
        assert profile.max_annual_fee == 1000

    def test_to_profile_keeps_absent_fields_absent(self):
        profile = RecommendationRequest().to_profile()

        assert profile.monthly_income is None
        assert profile.spending_habits is None
        assert profile.credit_score is None


class TestComparisonRequest:
    """Tests for ComparisonRequest."""

    def test_two_ids_valid(self):
        assert ComparisonRequest(card_ids=[1, 2]).validate() == []

    def test_single_id_rejected(self):
        assert ComparisonRequest(card_ids=[1]).validate() == [
            "At least 2 card IDs are required for comparison"
        ]

    def test_duplicate_ids_count_once(self):
        assert ComparisonRequest(card_ids=[3, 3]).validate() != []


class TestRewardEstimateDTO:
    """Tests for RewardEstimateDTO."""

    def test_from_estimate(self):
        estimate = RewardEstimate(
            annual_spending=60000,
            reward_rate="5% on fuel",
            rate_percent=5.0,
            estimated_rewards=3000,
            net_benefit=2500.5,
        )
        dto = RewardEstimateDTO.from_estimate(estimate)

        assert dto.annual_spending == "₹60,000"
        assert dto.estimated_rewards == "₹3,000"
        assert dto.net_benefit == "₹2,501"
        assert dto.annual_spending_amount == 60000
        assert dto.net_benefit_amount == 2501
