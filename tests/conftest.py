"""Pytest fixtures for testing"""

import pytest
from typing import Any, Dict
from fastapi.testclient import TestClient
from loan_engine.api.main import create_app
from loan_engine.domain.models import ApplicantProfile, EmploymentType


@pytest.fixture
def client() -> TestClient:
    """Create FastAPI test client"""
    return TestClient(create_app())


@pytest.fixture
def sample_form() -> Dict[str, Any]:
    """Raw form as submitted by the UI for the demo applicant"""
    return {
        "name": "Rahul Sharma",
        "employment_type": "salaried",
        "monthly_income": 50000,
        "co_applicant_monthly_income": 20000,
        "monthly_debt_obligations": 5000,
        "requested_loan_amount": 300000,
        "tenure_months": 36,
        "credit_score": 720,
        "age": 32,
        "purpose": "Home repair",
    }


@pytest.fixture
def strong_profile() -> ApplicantProfile:
    """Salaried applicant with healthy household income - expected approval"""
    return ApplicantProfile(
        name="Rahul Sharma",
        employment_type=EmploymentType.SALARIED,
        monthly_income=50000,
        co_applicant_monthly_income=20000,
        monthly_debt_obligations=5000,
        requested_loan_amount=300000,
        tenure_months=36,
        credit_score=720,
        age=32,
        purpose="Home repair",
    )


@pytest.fixture
def risky_profile() -> ApplicantProfile:
    """Loan of 20x annual income with a near-floor credit score"""
    return ApplicantProfile(
        name="Asha Verma",
        employment_type=EmploymentType.SALARIED,
        monthly_income=50000,
        requested_loan_amount=12_000_000,
        tenure_months=36,
        credit_score=320,
        age=32,
    )
