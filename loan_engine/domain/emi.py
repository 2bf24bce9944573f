"""EMI (equated monthly installment) calculation"""

from typing import Dict, Optional
from loan_engine.domain.models import EmploymentType

# Annual risk rate per employment type. Doubles as the interest rate quoted to
# the applicant and as the input of the employment stability sub-score.
EMPLOYMENT_RATES: Dict[EmploymentType, float] = {
    EmploymentType.GOVERNMENT: 0.085,
    EmploymentType.SALARIED: 0.095,
    EmploymentType.SELF_EMPLOYED: 0.11,
    EmploymentType.STUDENT: 0.14,
}
DEFAULT_EMPLOYMENT_RATE = 0.1


def rate_for_employment(employment_type: Optional[EmploymentType]) -> float:
    """Annual rate for an employment type; unknown or missing types get the default"""
    return EMPLOYMENT_RATES.get(employment_type, DEFAULT_EMPLOYMENT_RATE)


def compute_emi(principal: float, annual_rate: float, months: int) -> float:
    """
    Fixed monthly payment that amortizes `principal` over `months`.

    Formula: P * r / (1 - (1 + r)^-n) with r = annual_rate / 12.

    Edge cases:
    - Zero principal or non-positive months: 0.0 (not a financial answer)
    - Zero rate: straight division P / n
    """
    if not principal or months <= 0:
        return 0.0

    monthly_rate = annual_rate / 12
    if monthly_rate == 0:
        return principal / months

    return principal * monthly_rate / (1 - (1 + monthly_rate) ** (-months))
