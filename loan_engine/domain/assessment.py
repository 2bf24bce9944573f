"""Loan assessment - orchestrates EMI, amortization and approval scoring"""

import logging
from typing import Optional
from loan_engine.domain.amortization import generate_amortization
from loan_engine.domain.emi import compute_emi, rate_for_employment
from loan_engine.domain.models import ApplicantProfile, AssessmentResult, EmploymentType
from loan_engine.domain.scoring import compute_factor_scores, decide, weighted_probability

logger = logging.getLogger(__name__)


def assess(profile: ApplicantProfile) -> AssessmentResult:
    """
    Main entry point: score a validated applicant and price the loan.

    Returns a fresh AssessmentResult; nothing is retained between calls.
    """
    annual_rate = rate_for_employment(profile.employment_type)
    loan = profile.requested_loan_amount
    tenure = profile.tenure_months

    emi = compute_emi(loan, annual_rate, tenure)
    schedule = generate_amortization(loan, annual_rate, tenure)

    factors = compute_factor_scores(profile)
    probability = weighted_probability(factors)

    # Totals derive from the single emi value above
    total_repayment = emi * tenure
    total_interest = total_repayment - loan

    income = profile.monthly_income or 1

    logger.debug(
        "Assessment computed",
        extra={"emi": emi, "approval_probability": probability, "tenure_months": tenure},
    )

    return AssessmentResult(
        emi=emi,
        annual_rate=annual_rate,
        approval_probability=probability,
        factor_scores=factors,
        amortization_schedule=schedule,
        total_repayment=total_repayment,
        total_interest=total_interest,
        emi_to_income_pct=emi / income * 100,
        loan_to_annual_income_pct=loan / (income * 12) * 100,
        decision=decide(probability),
    )


def preview_emi(
    loan_amount: Optional[float],
    tenure_months: Optional[int],
    employment: Optional[str | EmploymentType] = None,
) -> float:
    """EMI shown while the form is still being filled; incomplete input gives 0"""
    if not loan_amount or not tenure_months:
        return 0.0
    return compute_emi(loan_amount, rate_for_employment(EmploymentType.parse(employment)), tenure_months)
