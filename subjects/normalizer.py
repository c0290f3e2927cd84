# subjects/normalizer.py

import re

from subjects.curriculum import electives
from subjects.domain_subject import Domain
from subjects.profiles import (
    BusinessProfile,
    GovernmentProfile,
    PersonalProfile,
    StudentProfile,
)

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def to_number(value) -> int:
    """
    Coerce a user-entered field to an integer.

    Rules:
    - Leading digits are read, trailing text is ignored ("5000 SDG" -> 5000)
    - Real numbers are truncated toward zero
    - Anything unparseable (or empty) becomes 0, never an error
    """
    if isinstance(value, bool) or value is None:
        return 0
    if isinstance(value, (int, float)):
        try:
            return int(value)
        except (OverflowError, ValueError):
            return 0

    match = _LEADING_INT.match(str(value))
    if not match:
        return 0
    try:
        return int(match.group(1))
    except ValueError:
        # past the interpreter's digit limit
        return 0


def _choice(value, allowed, default):
    if not isinstance(value, str):
        return default
    value = value.strip().upper()
    return value if value in allowed else default


def _text(value) -> str:
    return value if isinstance(value, str) else ""


def normalize_personal(raw: dict) -> PersonalProfile:
    return PersonalProfile(
        full_name=_text(raw.get("fullName")),
        age=to_number(raw.get("age")),
        job_title=_text(raw.get("jobTitle")),
        monthly_income=to_number(raw.get("monthlyIncome")),
        savings=to_number(raw.get("savings")),
        health_status=_choice(raw.get("healthStatus"), {"EXCELLENT", "GOOD", "AVERAGE"}, "GOOD"),
        social_status=_choice(raw.get("socialStatus"), {"SINGLE", "MARRIED", "FAMILY"}, "SINGLE"),
        lifestyle=_choice(
            raw.get("lifestyle"), {"ACTIVE", "STRESSED", "SEDENTARY", "BALANCED"}, "ACTIVE"
        ),
        decision=_text(raw.get("decision")),
    )


def normalize_student(raw: dict) -> StudentProfile:
    level = _choice(raw.get("level"), {"PRIMARY", "MIDDLE", "SECONDARY"}, "SECONDARY")

    stream = None
    if level == "SECONDARY":
        stream = _choice(raw.get("stream"), {"SCIENTIFIC", "LITERARY"}, "SCIENTIFIC")

    subjects = raw.get("subjects")
    scores = {
        str(name): to_number(score)
        for name, score in (subjects if isinstance(subjects, dict) else {}).items()
        if str(name).strip()
    }

    # An elective outside the active stream is treated as "not selected"
    elective = raw.get("elective") or None
    if elective not in electives(level, stream):
        elective = None
    if elective is not None:
        scores.setdefault(elective, 0)

    return StudentProfile(
        level=level,
        stream=stream,
        subject_scores=scores,
        elective=elective,
        hobbies=_text(raw.get("hobbies")),
    )


def normalize_business(raw: dict) -> BusinessProfile:
    return BusinessProfile(
        company_name=_text(raw.get("companyName")),
        industry=_text(raw.get("industry")),
        capital=to_number(raw.get("capital")),
        target_market=_text(raw.get("targetMarket")),
        decision=_text(raw.get("decision")),
    )


def normalize_government(raw: dict) -> GovernmentProfile:
    return GovernmentProfile(
        entity_name=_text(raw.get("entityName")),
        sector=_text(raw.get("sector")),
        population=to_number(raw.get("population")),
        challenges=_text(raw.get("challenges")),
        goals=_text(raw.get("goals")),
        planning_period=_choice(raw.get("planningPeriod"), {"SHORT", "MEDIUM", "LONG"}, "MEDIUM"),
    )


NORMALIZERS = {
    Domain.PERSONAL: normalize_personal,
    Domain.STUDENT: normalize_student,
    Domain.BUSINESS: normalize_business,
    Domain.GOVERNMENT: normalize_government,
}


def normalize_profile(domain, raw: dict | None):
    """
    Turn raw form fields into the typed profile for `domain`.
    An unknown domain raises ValueError.
    """
    return NORMALIZERS[Domain(domain)](raw or {})
