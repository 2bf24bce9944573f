"""POST /v1/assessment - loan EMI, approval score and amortization endpoint"""

import time
import logging
from fastapi import APIRouter, Depends, HTTPException

from loan_engine.api.v1.schemas import (
    AmortizationRowSchema,
    ApplicantForm,
    AssessmentResponse,
    DecisionSchema,
    DisplaySchema,
    FactorScoreSchema,
)
from loan_engine.api.dependencies import get_request_id
from loan_engine.domain.assessment import assess
from loan_engine.domain.exceptions import FieldOutOfRangeError, MissingRequiredFieldsError
from loan_engine.domain.models import ApplicantProfile, AssessmentResult
from loan_engine.domain.validation import parse_applicant
from loan_engine.infrastructure.observability.metrics import record_assessment, validation_failure_counter
from loan_engine.infrastructure.observability.logging import log_assessment
from loan_engine.utils.currency import format_inr

router = APIRouter()


def validate_form(form: ApplicantForm, request_id: str) -> ApplicantProfile:
    """Run the form through the validation boundary, mapping rejections to 422"""
    try:
        return parse_applicant(form.model_dump())
    except MissingRequiredFieldsError as e:
        validation_failure_counter.inc()
        logging.warning(f"Rejected form: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=422, detail={"missing_fields": e.fields})
    except FieldOutOfRangeError as e:
        validation_failure_counter.inc()
        logging.warning(f"Rejected form: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=422, detail={"invalid_fields": {e.field: str(e)}})


def to_response(result: AssessmentResult) -> AssessmentResponse:
    """Map domain result to API schema, adding display strings"""
    factors = result.factor_scores
    return AssessmentResponse(
        emi=result.emi,
        annual_rate=result.annual_rate,
        approval_probability=result.approval_probability,
        factor_scores=[
            FactorScoreSchema(label=label, score=score)
            for label, score in zip(factors.labels, factors)
        ],
        amortization_schedule=[
            AmortizationRowSchema(
                period=row.period,
                principal=row.principal,
                interest=row.interest,
                cumulative_principal=row.cumulative_principal,
                cumulative_interest=row.cumulative_interest,
                balance=row.balance,
            )
            for row in result.amortization_schedule
        ],
        total_repayment=result.total_repayment,
        total_interest=result.total_interest,
        emi_to_income_pct=result.emi_to_income_pct,
        loan_to_annual_income_pct=result.loan_to_annual_income_pct,
        decision=DecisionSchema(
            approved=result.decision.approved,
            outcome=result.decision.outcome,
            recommendation=result.decision.recommendation,
            headline=result.decision.headline,
        ),
        display=DisplaySchema(
            emi=format_inr(result.emi),
            total_repayment=format_inr(result.total_repayment),
            total_interest=format_inr(result.total_interest),
            emi_to_income=f"{result.emi_to_income_pct:.1f}%",
            loan_to_annual_income=f"{result.loan_to_annual_income_pct:.1f}%",
            probability=f"{result.approval_probability:.1f}%",
        ),
    )


@router.post("/assessment", response_model=AssessmentResponse)
def create_assessment(
    form: ApplicantForm,
    request_id: str = Depends(get_request_id),
):
    """
    Assess a loan application from raw form data.

    Flow:
    1. Validate required fields (422 with the missing field names otherwise)
    2. Compute EMI, amortization schedule and factor scores
    3. Classify against the approval threshold
    4. Record metrics and log the outcome
    """
    start_time = time.time()
    profile = validate_form(form, request_id)

    try:
        result = assess(profile)
    except Exception as e:
        logging.error(f"Unexpected error: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=500, detail="Internal server error")

    duration_ms = (time.time() - start_time) * 1000
    record_assessment(result.decision.outcome, result.approval_probability)
    log_assessment(request_id, result.decision.outcome, result.approval_probability, result.emi, duration_ms)

    return to_response(result)
