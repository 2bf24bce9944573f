"""Form validation boundary - raw form input to ApplicantProfile"""

import math
from typing import Any, Dict, Mapping, Optional
from loan_engine.domain.exceptions import FieldOutOfRangeError, MissingRequiredFieldsError
from loan_engine.domain.models import ApplicantProfile, EmploymentType

# Longest schedule the engine builds eagerly (50 years)
MAX_TENURE_MONTHS = 600

# Presence-checked fields, in form order
REQUIRED_FIELDS = (
    "name",
    "monthly_income",
    "requested_loan_amount",
    "tenure_months",
    "credit_score",
    "age",
)

SAMPLE_FORM: Dict[str, Any] = {
    "name": "Rahul Sharma",
    "employment_type": "salaried",
    "monthly_income": 50000,
    "requested_loan_amount": 300000,
    "tenure_months": 36,
    "credit_score": 720,
    "age": 32,
    "purpose": "Home repair",
    "co_applicant_monthly_income": 20000,
    "monthly_debt_obligations": 5000,
}


def to_number(value: Any) -> Optional[float]:
    """Coerce a form value to float; blanks and garbage give None"""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, str):
        value = value.strip()
        if not value:
            return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    if not math.isfinite(number):
        return None
    return number


def _text(value: Any) -> str:
    return value.strip() if isinstance(value, str) else ""


def parse_applicant(raw: Mapping[str, Any]) -> ApplicantProfile:
    """
    Validate raw form data and build an ApplicantProfile.

    Rules:
    - Required fields must be present, numeric where numeric, and non-zero
    - Co-applicant income and debts default to 0 when absent or non-numeric
    - Unknown employment types are kept as None (scored with the default rate)
    - Tenure is truncated to whole months and capped at MAX_TENURE_MONTHS

    Raises:
        MissingRequiredFieldsError: listing every missing field; no profile is built
        FieldOutOfRangeError: tenure longer than MAX_TENURE_MONTHS
    """
    name = _text(raw.get("name"))
    numbers = {
        field: to_number(raw.get(field))
        for field in REQUIRED_FIELDS
        if field != "name"
    }
    if numbers["tenure_months"] is not None:
        numbers["tenure_months"] = float(int(numbers["tenure_months"]))

    missing = [
        field
        for field in REQUIRED_FIELDS
        if not (name if field == "name" else numbers[field])
    ]
    if missing:
        raise MissingRequiredFieldsError(missing)

    if numbers["tenure_months"] > MAX_TENURE_MONTHS:
        raise FieldOutOfRangeError("tenure_months", numbers["tenure_months"], MAX_TENURE_MONTHS)

    return ApplicantProfile(
        name=name,
        employment_type=EmploymentType.parse(raw.get("employment_type")),
        monthly_income=numbers["monthly_income"],
        requested_loan_amount=numbers["requested_loan_amount"],
        tenure_months=int(numbers["tenure_months"]),
        credit_score=numbers["credit_score"],
        age=numbers["age"],
        co_applicant_monthly_income=to_number(raw.get("co_applicant_monthly_income")) or 0.0,
        monthly_debt_obligations=to_number(raw.get("monthly_debt_obligations")) or 0.0,
        purpose=_text(raw.get("purpose")),
    )


def sample_form() -> Dict[str, Any]:
    """Prefill data for the demo applicant"""
    return dict(SAMPLE_FORM)
