"""Pydantic schemas for API request/response validation"""

from pydantic import BaseModel, Field
from typing import List, Optional, Union

# Form inputs arrive as typed numbers or as raw text from HTML inputs
FormValue = Optional[Union[float, str]]


class ApplicantForm(BaseModel):
    """Raw applicant form for POST /v1/assessment and POST /v1/export"""

    name: Optional[str] = None
    employment_type: Optional[str] = Field(None, description="government | salaried | self-employed | student")
    monthly_income: FormValue = None
    co_applicant_monthly_income: FormValue = None
    monthly_debt_obligations: FormValue = None
    requested_loan_amount: FormValue = None
    tenure_months: FormValue = None
    credit_score: FormValue = None
    age: FormValue = None
    purpose: Optional[str] = None


class FactorScoreSchema(BaseModel):
    """One bar in the score breakdown chart"""

    label: str
    score: float = Field(..., ge=0, le=100)


class AmortizationRowSchema(BaseModel):
    """Single period in the amortization table"""

    period: int
    principal: float
    interest: float
    cumulative_principal: float
    cumulative_interest: float
    balance: float


class DecisionSchema(BaseModel):
    """Threshold outcome with canned recommendation"""

    approved: bool
    outcome: str
    recommendation: str
    headline: str


class DisplaySchema(BaseModel):
    """Pre-formatted KPI strings for the dashboard"""

    emi: str
    total_repayment: str
    total_interest: str
    emi_to_income: str
    loan_to_annual_income: str
    probability: str


class AssessmentResponse(BaseModel):
    """Response for POST /v1/assessment"""

    emi: float
    annual_rate: float
    approval_probability: float = Field(..., ge=0, le=100)
    factor_scores: List[FactorScoreSchema]
    amortization_schedule: List[AmortizationRowSchema]
    total_repayment: float
    total_interest: float
    emi_to_income_pct: float
    loan_to_annual_income_pct: float
    decision: DecisionSchema
    display: DisplaySchema


class EmiPreviewResponse(BaseModel):
    """Response for GET /v1/emi-preview"""

    emi: float
    text: str
