"""Amortization schedule generation for level-payment loans"""

from typing import List
from loan_engine.domain.emi import compute_emi
from loan_engine.domain.models import AmortizationRow


def generate_amortization(
    principal: float,
    annual_rate: float,
    months: int,
) -> List[AmortizationRow]:
    """
    Build the period-by-period split of each EMI into principal and interest.

    Requirements:
    - One row per period 1..months; months <= 0 gives an empty schedule
    - Same EMI for every period (computed once)
    - Balance floors at zero so float drift cannot push it negative
    - Running balance and interest stay unrounded; only row values are rounded

    Args:
        principal: Loan amount
        annual_rate: Nominal annual rate as a decimal (0.095 = 9.5%)
        months: Tenure in months

    Returns:
        List of AmortizationRow objects

    Example:
        1200 at 0% over 12 months → 12 rows of 100.00 principal, 0.00 interest
    """
    if months <= 0:
        return []

    monthly_rate = annual_rate / 12
    emi = compute_emi(principal, annual_rate, months)

    balance = principal
    total_interest = 0.0

    schedule = []
    for period in range(1, months + 1):
        interest = balance * monthly_rate
        principal_portion = emi - interest
        balance = max(0.0, balance - principal_portion)
        total_interest += interest

        schedule.append(
            AmortizationRow(
                period=period,
                principal=round(principal_portion, 2),
                interest=round(interest, 2),
                cumulative_principal=round(principal - balance, 2),
                cumulative_interest=round(total_interest, 2),
                balance=round(balance, 2),
            )
        )

    return schedule
