"""Shared test fixtures for the projection engine test suite."""

import threading

import pytest

from advisors.common.analysis import AnalysisResult, Swot
from subjects.domain_subject import RiskClassification
from subjects.profiles import (
    BusinessProfile,
    GovernmentProfile,
    PersonalProfile,
    StudentProfile,
)

START_YEAR = 2026


# ── Profiles ─────────────────────────────────────────────────────────────

@pytest.fixture
def start_year():
    return START_YEAR


@pytest.fixture
def make_personal():
    """Factory for PersonalProfile with the reference scenario as defaults.

    Usage:
        profile = make_personal(health_status="EXCELLENT")
    """
    def _factory(**overrides):
        defaults = {
            "full_name": "Sara",
            "age": 30,
            "job_title": "Accountant",
            "monthly_income": 5000,
            "savings": 10000,
            "health_status": "GOOD",
            "social_status": "SINGLE",
            "lifestyle": "ACTIVE",
            "decision": "Quit my job and open an online store",
        }
        defaults.update(overrides)
        return PersonalProfile(**defaults)

    return _factory


@pytest.fixture
def all_profiles(make_personal):
    """One representative profile per domain."""
    return [
        make_personal(),
        StudentProfile(
            level="SECONDARY",
            stream="SCIENTIFIC",
            subject_scores={"الفيزياء": 92, "الحاسوب": 88},
            elective="الحاسوب",
            hobbies="robotics",
        ),
        BusinessProfile(
            company_name="Nile Tech",
            industry="تكنولوجيا",
            capital=250000,
            target_market="Khartoum",
            decision="Open a second branch",
        ),
        GovernmentProfile(
            entity_name="Ministry of Health",
            sector="Health",
            population=4000000,
            challenges="Staff shortages",
            goals="Rural clinic coverage",
            planning_period="LONG",
        ),
    ]


# ── Advisory ─────────────────────────────────────────────────────────────

@pytest.fixture
def make_analysis():
    def _factory(risk=RiskClassification.DANGER, **overrides):
        defaults = {
            "risk_level": RiskClassification(risk),
            "swot": Swot(
                strengths=["Stable income"],
                weaknesses=["Two months of runway"],
                opportunities=["Growing e-commerce"],
                threats=["Established competitors"],
            ),
            "prediction": "Savings run out before the store breaks even.",
            "strategy": "Validate the store part-time first.",
            "execution_steps": ["Build a landing page", "Pre-sell ten orders"],
        }
        defaults.update(overrides)
        return AnalysisResult(**defaults)

    return _factory


class FakeAdvisoryService:
    """Advisory service double.

    - result: what analyze() returns (AnalysisResult or None)
    - error: exception analyze() raises instead, if set
    - gate: when set, analyze() blocks until gate.set() is called
    """

    def __init__(self, result=None, error=None, gate=None):
        self.result = result
        self.error = error
        self.gate = gate
        self.calls = []

    def analyze(self, domain, payload):
        self.calls.append((domain, payload))
        if self.gate is not None:
            self.gate.wait(timeout=5)
        if self.error is not None:
            raise self.error
        return self.result


@pytest.fixture
def fake_advisor():
    return FakeAdvisoryService()


@pytest.fixture
def gate():
    g = threading.Event()
    yield g
    g.set()  # never leave a worker blocked
