"""Unit tests for approval scoring logic"""

import math
import pytest
from dataclasses import replace
from loan_engine.domain.models import ApplicantProfile, EmploymentType
from loan_engine.domain.scoring import (
    APPROVAL_THRESHOLD,
    APPROVED_RECOMMENDATION,
    REVIEW_RECOMMENDATION,
    WEIGHTS,
    affordability_factor,
    clamp,
    compute_factor_scores,
    compute_probability,
    credit_score_factor,
    decide,
    weighted_probability,
)


def test_weights_total_100():
    assert sum(WEIGHTS.values()) == 100


def test_clamp_handles_nan_and_bounds():
    assert clamp(float("nan")) == 0
    assert clamp(-5) == 0
    assert clamp(250) == 100
    assert clamp(42.5) == 42.5


def test_clamp_handles_oversized_ints():
    """Ints beyond float range saturate instead of overflowing"""
    assert clamp(10**400) == 100
    assert clamp(-(10**400)) == 0
    assert credit_score_factor(10**400) == 100


@pytest.mark.parametrize(
    "credit_score, expected",
    [(300, 0), (600, 50), (900, 100), (720, 70), (100, 0), (1200, 100)],
)
def test_credit_score_factor_clamps_before_mapping(credit_score, expected):
    """Out-of-range bureau scores clamp to [300, 900] first"""
    assert credit_score_factor(credit_score) == pytest.approx(expected)


def test_factor_scores_strong_profile(strong_profile: ApplicantProfile):
    """Breakdown for the demo applicant"""
    factors = compute_factor_scores(strong_profile)

    assert factors.credit == pytest.approx(70)
    assert factors.affordability == 100  # surplus covers the installment 7.8x
    assert factors.loan_size == pytest.approx(50)
    assert factors.employment == pytest.approx(90.5)
    assert factors.age == pytest.approx(100 * 32 / 75)
    assert factors.as_list() == list(factors)
    assert len(factors.labels) == 5


def test_factor_scores_risky_profile(risky_profile: ApplicantProfile):
    """Huge loan and low credit push both sub-scores near zero"""
    factors = compute_factor_scores(risky_profile)

    assert factors.credit < 5
    assert factors.loan_size == 0
    assert factors.affordability == pytest.approx(15)


def test_probability_uses_same_factors_as_breakdown(strong_profile: ApplicantProfile):
    """Weighted total and chart breakdown come from one computation"""
    factors = compute_factor_scores(strong_profile)
    assert compute_probability(strong_profile) == weighted_probability(factors)


def test_probability_strong_profile(strong_profile: ApplicantProfile):
    probability = compute_probability(strong_profile)

    # 70*.40 + 100*.35 + 50*.15 + 90.5*.07 + 42.67*.03
    assert probability == pytest.approx(78.115, abs=0.01)
    assert probability >= APPROVAL_THRESHOLD


def test_probability_risky_profile(risky_profile: ApplicantProfile):
    probability = compute_probability(risky_profile)

    assert probability == pytest.approx(14.2, abs=0.05)
    assert probability < APPROVAL_THRESHOLD


def test_affordability_negative_surplus_clamps_to_zero(strong_profile: ApplicantProfile):
    """Debts above income give a negative ratio, which clamps to 0"""
    indebted = replace(strong_profile, co_applicant_monthly_income=0, monthly_debt_obligations=80000)
    assert affordability_factor(indebted) == 0


def test_employment_factor_unknown_type(strong_profile: ApplicantProfile):
    """Missing employment type scores with the default 10% rate"""
    factors = compute_factor_scores(replace(strong_profile, employment_type=None))
    assert factors.employment == pytest.approx(90)


@pytest.mark.parametrize(
    "overrides",
    [
        {"monthly_income": 0},
        {"monthly_income": -1000, "requested_loan_amount": -5},
        {"requested_loan_amount": 0},
        {"tenure_months": 0},
        {"tenure_months": -12},
        {"credit_score": -50},
        {"credit_score": 10_000},
        {"age": -10},
        {"age": 500},
        {"monthly_debt_obligations": 1e12},
        {"monthly_income": float("inf")},
        {"requested_loan_amount": float("inf")},
        {"credit_score": float("nan"), "age": float("nan")},
        {"employment_type": EmploymentType.STUDENT, "monthly_income": 1},
        {"credit_score": 10**400},
        {"age": 10**400},
        {"monthly_income": 10**400, "requested_loan_amount": 10**400},
        {"requested_loan_amount": -(10**400), "tenure_months": 10**400},
        {"monthly_debt_obligations": 10**400, "co_applicant_monthly_income": 10**400},
    ],
)
def test_scores_always_in_range(strong_profile: ApplicantProfile, overrides):
    """Probability and every factor stay in [0, 100] and never go NaN"""
    profile = replace(strong_profile, **overrides)

    probability = compute_probability(profile)
    assert not math.isnan(probability)
    assert 0 <= probability <= 100

    for score in compute_factor_scores(profile):
        assert not math.isnan(score)
        assert 0 <= score <= 100


def test_decide_threshold_boundary():
    """65 itself is an approval; anything below needs review"""
    approved = decide(65.0)
    assert approved.approved is True
    assert approved.outcome == "likely_approved"
    assert approved.recommendation == APPROVED_RECOMMENDATION
    assert approved.headline == "✅ Loan likely to be approved (Score: 65.0%)"

    review = decide(64.99)
    assert review.approved is False
    assert review.outcome == "needs_review"
    assert review.recommendation == REVIEW_RECOMMENDATION
    assert review.headline.startswith("⚠️ Loan may be risky")
