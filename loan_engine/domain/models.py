"""Domain models - pure Python dataclasses representing loan assessment entities"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterator, List, Optional


class EmploymentType(str, Enum):
    """Applicant employment category"""

    GOVERNMENT = "government"
    SALARIED = "salaried"
    SELF_EMPLOYED = "self-employed"
    STUDENT = "student"

    @classmethod
    def parse(cls, value: object) -> Optional["EmploymentType"]:
        """Map a form value (including the short UI aliases) to a member, or None"""
        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            return None
        key = value.strip().lower().replace("_", "-")
        return _EMPLOYMENT_ALIASES.get(key)


_EMPLOYMENT_ALIASES = {
    "government": EmploymentType.GOVERNMENT,
    "govt": EmploymentType.GOVERNMENT,
    "salaried": EmploymentType.SALARIED,
    "self-employed": EmploymentType.SELF_EMPLOYED,
    "self": EmploymentType.SELF_EMPLOYED,
    "student": EmploymentType.STUDENT,
}


@dataclass(frozen=True)
class ApplicantProfile:
    """Validated applicant data supplied by the form collaborator"""

    name: str
    employment_type: Optional[EmploymentType]
    monthly_income: float
    requested_loan_amount: float
    tenure_months: int
    credit_score: float
    age: float
    co_applicant_monthly_income: float = 0.0
    monthly_debt_obligations: float = 0.0
    purpose: str = ""

    @property
    def household_income(self) -> float:
        return self.monthly_income + self.co_applicant_monthly_income


@dataclass(frozen=True)
class FactorScores:
    """The five weighted sub-scores, each in [0, 100]"""

    credit: float
    affordability: float
    loan_size: float
    employment: float
    age: float

    labels = ("Credit", "Affordability", "Loan-size", "Employment", "Age")

    def as_list(self) -> List[float]:
        return [self.credit, self.affordability, self.loan_size, self.employment, self.age]

    def __iter__(self) -> Iterator[float]:
        return iter(self.as_list())


@dataclass(frozen=True)
class AmortizationRow:
    """Single period of an amortization schedule (money rounded to 2 dp)"""

    period: int
    principal: float
    interest: float
    cumulative_principal: float
    cumulative_interest: float
    balance: float


@dataclass(frozen=True)
class Decision:
    """Threshold classification of an approval probability"""

    approved: bool
    outcome: str  # "likely_approved" or "needs_review"
    recommendation: str
    headline: str


@dataclass(frozen=True)
class AssessmentResult:
    """Output of a single loan assessment"""

    emi: float
    annual_rate: float
    approval_probability: float
    factor_scores: FactorScores
    amortization_schedule: List[AmortizationRow] = field(repr=False)
    total_repayment: float
    total_interest: float
    emi_to_income_pct: float
    loan_to_annual_income_pct: float
    decision: Decision
