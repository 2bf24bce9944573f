"""Approval scoring engine - weighted multi-factor heuristic for loan decisions"""

import math
from loan_engine.domain.emi import rate_for_employment
from loan_engine.domain.models import ApplicantProfile, Decision, FactorScores

# Weights sum to 100
WEIGHTS = {
    "credit": 40,
    "affordability": 35,
    "loan_size": 15,
    "employment": 7,
    "age": 3,
}

APPROVAL_THRESHOLD = 65.0

CREDIT_SCORE_MIN = 300
CREDIT_SCORE_MAX = 900
AGE_CAP = 75

APPROVED_RECOMMENDATION = "Loan likely to be approved."
REVIEW_RECOMMENDATION = "Consider reducing loan amount or improving credit score."


def as_float(value: float) -> float:
    """float() that maps ints too large for a double to signed infinity"""
    try:
        return float(value)
    except OverflowError:
        return math.inf if value > 0 else -math.inf


def clamp(value: float, low: float = 0.0, high: float = 100.0) -> float:
    """Clamp into [low, high]; NaN collapses to low"""
    value = as_float(value)
    if math.isnan(value):
        return low
    return max(low, min(high, value))


def credit_score_factor(credit_score: float) -> float:
    """Linear map of the clamped [300, 900] bureau score onto [0, 100]"""
    bounded = clamp(credit_score, CREDIT_SCORE_MIN, CREDIT_SCORE_MAX)
    return clamp((bounded - CREDIT_SCORE_MIN) / (CREDIT_SCORE_MAX - CREDIT_SCORE_MIN) * 100)


def affordability_factor(profile: ApplicantProfile) -> float:
    """
    Household surplus relative to the average monthly installment.

    surplus = income + co-applicant income - debts (may be negative, which
    clamps to 0). Average installment = loan / tenure, tenure floored at 1.
    """
    surplus = (
        as_float(profile.monthly_income)
        + as_float(profile.co_applicant_monthly_income)
        - as_float(profile.monthly_debt_obligations)
    )
    tenure = as_float(profile.tenure_months)
    if not tenure > 0:
        tenure = 1.0
    average_installment = as_float(profile.requested_loan_amount) / tenure

    if not average_installment > 0:
        return 100.0 if surplus > 0 else 0.0

    return clamp(100 * surplus / average_installment)


def loan_size_factor(profile: ApplicantProfile) -> float:
    """Penalize loans that are large relative to yearly primary income"""
    annual_income = as_float(profile.monthly_income) * 12
    loan = as_float(profile.requested_loan_amount)
    if not annual_income > 0:
        return 100.0 if loan <= 0 else 0.0

    return clamp(100 * (1 - loan / annual_income))


def employment_factor(profile: ApplicantProfile) -> float:
    """Lower employment risk rate means higher stability"""
    return clamp(100 - rate_for_employment(profile.employment_type) * 100)


def age_factor(age: float) -> float:
    """Income-earning longevity proxy, linear up to AGE_CAP"""
    return clamp(100 * as_float(age) / AGE_CAP)


def compute_factor_scores(profile: ApplicantProfile) -> FactorScores:
    """Sub-scores shared by the weighted total and the breakdown chart"""
    return FactorScores(
        credit=credit_score_factor(profile.credit_score),
        affordability=affordability_factor(profile),
        loan_size=loan_size_factor(profile),
        employment=employment_factor(profile),
        age=age_factor(profile.age),
    )


def weighted_probability(factors: FactorScores) -> float:
    """
    Combine sub-scores into an approval probability in [0, 100].

    Scoring weights:
    - 40%: Credit score
    - 35%: Affordability
    - 15%: Loan size vs annual income
    - 7%:  Employment stability
    - 3%:  Age
    """
    weighted = (
        factors.credit * WEIGHTS["credit"] / 100
        + factors.affordability * WEIGHTS["affordability"] / 100
        + factors.loan_size * WEIGHTS["loan_size"] / 100
        + factors.employment * WEIGHTS["employment"] / 100
        + factors.age * WEIGHTS["age"] / 100
    )
    return clamp(weighted)


def compute_probability(profile: ApplicantProfile) -> float:
    """Approval probability for a profile; never raises, never NaN"""
    return weighted_probability(compute_factor_scores(profile))


def decide(probability: float) -> Decision:
    """
    Classify a probability against the fixed approval threshold.

    - >= 65: likely approved
    - < 65:  risky, needs review
    """
    if probability >= APPROVAL_THRESHOLD:
        return Decision(
            approved=True,
            outcome="likely_approved",
            recommendation=APPROVED_RECOMMENDATION,
            headline=f"✅ Loan likely to be approved (Score: {probability:.1f}%)",
        )

    return Decision(
        approved=False,
        outcome="needs_review",
        recommendation=REVIEW_RECOMMENDATION,
        headline=f"⚠️ Loan may be risky (Score: {probability:.1f}%)",
    )
