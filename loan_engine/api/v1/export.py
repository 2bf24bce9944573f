"""POST /v1/export - CSV download of an assessed application"""

import logging
from fastapi import APIRouter, Depends, HTTPException
from starlette.responses import Response

from loan_engine.api.v1.assessment import validate_form
from loan_engine.api.v1.schemas import ApplicantForm
from loan_engine.api.dependencies import get_request_id
from loan_engine.domain.assessment import assess
from loan_engine.export.csv_export import content_disposition, export_csv
from loan_engine.infrastructure.observability.metrics import export_counter

router = APIRouter()


@router.post("/export")
def export_assessment(
    form: ApplicantForm,
    request_id: str = Depends(get_request_id),
):
    """
    Assess the submitted form and return it as a one-row CSV attachment.

    The CSV is built from the assessment of this exact submission, so the
    exported EMI and probability always match the exported inputs.
    """
    profile = validate_form(form, request_id)

    try:
        result = assess(profile)
        content = export_csv(profile, result)
        disposition = content_disposition(profile)
    except Exception as e:
        logging.error(f"Unexpected error: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=500, detail="Internal server error")

    export_counter.inc()
    logging.info("CSV exported", extra={"request_id": request_id, "step": "export"})

    return Response(
        content=content,
        media_type="text/csv; charset=utf-8",
        headers={"Content-Disposition": disposition},
    )
