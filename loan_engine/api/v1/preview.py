"""GET /v1/emi-preview and GET /v1/sample - form helper endpoints"""

from typing import Any, Dict, Optional
from fastapi import APIRouter, Query

from loan_engine.api.v1.schemas import EmiPreviewResponse
from loan_engine.domain.assessment import preview_emi
from loan_engine.domain.validation import sample_form, to_number
from loan_engine.utils.currency import format_inr

router = APIRouter()


@router.get("/emi-preview", response_model=EmiPreviewResponse)
def get_emi_preview(
    loan_amount: Optional[str] = Query(None, description="Requested loan amount"),
    tenure_months: Optional[str] = Query(None, description="Tenure in months"),
    employment: Optional[str] = Query(None, description="Employment type"),
):
    """
    Live EMI while the form is being filled.

    Incomplete or non-numeric input previews as 0 rather than an error.
    """
    tenure = to_number(tenure_months)
    emi = preview_emi(to_number(loan_amount), int(tenure) if tenure else None, employment)
    return EmiPreviewResponse(emi=emi, text=f"EMI preview: {format_inr(emi)}")


@router.get("/sample")
def get_sample() -> Dict[str, Any]:
    """Prefill values for the demo applicant"""
    return sample_form()
