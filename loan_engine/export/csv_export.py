"""Single-row CSV export of an assessed application"""

from datetime import date
from typing import List
from urllib.parse import quote
import pandas as pd

from loan_engine.config import settings
from loan_engine.domain.models import ApplicantProfile, AssessmentResult

CSV_HEADERS = [
    "Name",
    "Employment",
    "Income",
    "CoIncome",
    "Debts",
    "Loan Amount",
    "Tenure",
    "Credit Score",
    "Age",
    "Purpose",
    "EMI",
    "Probability",
]


def _plain(value: float) -> str:
    """Whole numbers without a fractional part (50000, not 50000.0)"""
    number = float(value)
    return str(int(number)) if number.is_integer() else str(number)


def export_row(profile: ApplicantProfile, result: AssessmentResult) -> List[str]:
    """Values in CSV_HEADERS order"""
    return [
        profile.name,
        profile.employment_type.value if profile.employment_type else "",
        _plain(profile.monthly_income),
        _plain(profile.co_applicant_monthly_income),
        _plain(profile.monthly_debt_obligations),
        _plain(profile.requested_loan_amount),
        _plain(profile.tenure_months),
        _plain(profile.credit_score),
        _plain(profile.age),
        profile.purpose,
        f"{result.emi:.2f}",
        f"{result.approval_probability:.1f}",
    ]


def export_csv(profile: ApplicantProfile, result: AssessmentResult) -> str:
    """
    Render header plus exactly one data row.

    The result is passed in explicitly; it must be the assessment of this same
    profile. Free-text fields containing commas, quotes or newlines are quoted.
    """
    frame = pd.DataFrame([export_row(profile, result)], columns=CSV_HEADERS)
    return frame.to_csv(index=False, lineterminator="\n")


def export_filename(profile: ApplicantProfile, on: date | None = None, ascii_only: bool = False) -> str:
    """
    <name>_<YYYY-MM-DD>.csv, falling back to the configured placeholder name.

    With ascii_only, the name keeps only printable ASCII other than `"` and `\\`,
    so it can sit inside a quoted header value.
    """
    on = on or date.today()
    stem = profile.name
    if ascii_only:
        stem = "".join(c for c in stem if " " <= c <= "~" and c not in '"\\').strip()
    stem = stem or settings.export_filename_fallback
    return f"{stem}_{on.isoformat()}.csv"


def content_disposition(profile: ApplicantProfile, on: date | None = None) -> str:
    """
    Attachment header value that survives any applicant name.

    Header values are latin-1 on the wire, so `filename` carries an ASCII
    fallback and `filename*` (RFC 5987) carries the exact UTF-8 name.
    """
    on = on or date.today()
    fallback = export_filename(profile, on, ascii_only=True)
    exact = quote(export_filename(profile, on), safe="")
    return f"attachment; filename=\"{fallback}\"; filename*=UTF-8''{exact}"
