# projection/models.py
#
# One pure function per domain: (profile, risk, year_offset) -> metrics.
# Every output is clamped on its own; composites read the already
# clamped siblings of the same year.

import math

from config.settings import HORIZON_YEARS
from projection.risk_policy import modulate
from subjects.domain_subject import Domain, RiskClassification


def clamp(value: float) -> float:
    return float(max(0.0, min(100.0, value)))


def _score(value, unit, weight) -> float:
    """min(100, value / unit * weight); ints too large for a float saturate."""
    try:
        ratio = value / unit
    except OverflowError:
        ratio = math.inf if value > 0 else -math.inf
    return min(100, ratio * weight)


def _check_offset(year_offset: int):
    if not 0 <= year_offset <= HORIZON_YEARS:
        raise ValueError(f"year offset out of range: {year_offset}")


def project_personal(profile, risk, year_offset: int) -> dict[str, float]:
    _check_offset(year_offset)
    risk = RiskClassification(risk)
    params = modulate(risk)
    i = year_offset

    income_score = _score(profile.monthly_income, 5000, 50)
    savings_score = _score(profile.savings, 10000, 30)

    health_base = {"EXCELLENT": 95, "GOOD": 80}.get(profile.health_status, 60)
    if profile.lifestyle == "STRESSED":
        health_base -= 10

    wealth_base = (income_score + savings_score) / 2

    year_effect = i * params.decay_factor
    if risk is RiskClassification.DANGER:
        wealth_effect = i * -10
    elif risk is RiskClassification.POSITIVE:
        wealth_effect = i * 10
    else:
        wealth_effect = i * 5
    damper = 0.9 if risk is RiskClassification.DANGER else 1

    health = clamp(health_base - i * 2 - year_effect)
    wealth = clamp((wealth_base + wealth_effect) * damper)
    relationships = clamp(70 - year_effect)

    return {
        "health": health,
        "wealth": wealth,
        "relationships": relationships,
        "happiness": clamp((health + wealth + relationships) / 3),
    }


def project_business(profile, risk, year_offset: int) -> dict[str, float]:
    """
    Capital, industry and market are advisor context only.
    """
    _check_offset(year_offset)
    risk = RiskClassification(risk)
    i = year_offset

    risk_effect = {
        RiskClassification.DANGER: -10,
        RiskClassification.POSITIVE: 10,
    }.get(risk, 0)

    return {
        "revenue": clamp(50 + i * 10 + i * risk_effect),
        "marketShare": clamp(10 + i * 5),
        "innovation": clamp(80 - i * 2),
    }


def project_government(profile, risk, year_offset: int) -> dict[str, float]:
    # Risk is accepted for a uniform signature but does not move this model.
    _check_offset(year_offset)
    i = year_offset
    return {
        "economicGrowth": clamp(30 + i * 4),
        "publicSatisfaction": clamp(50 + math.sin(i) * 10),
        "socialStability": clamp(60 + i * 2),
    }


def project_student(profile, risk, year_offset: int) -> dict[str, float]:
    _check_offset(year_offset)
    i = year_offset

    market_demand = clamp(60 + i * 5)
    skill_development = clamp(20 + i * 15)

    return {
        "academicFit": clamp(70 + i * 2),
        "marketDemand": market_demand,
        "skillDevelopment": skill_development,
        "financialProspects": clamp(market_demand * 0.8 + skill_development * 0.2),
    }


DOMAIN_MODELS = {
    Domain.PERSONAL: project_personal,
    Domain.STUDENT: project_student,
    Domain.BUSINESS: project_business,
    Domain.GOVERNMENT: project_government,
}

METRIC_NAMES = {
    Domain.PERSONAL: ("health", "wealth", "relationships", "happiness"),
    Domain.STUDENT: ("academicFit", "marketDemand", "skillDevelopment", "financialProspects"),
    Domain.BUSINESS: ("revenue", "marketShare", "innovation"),
    Domain.GOVERNMENT: ("economicGrowth", "publicSatisfaction", "socialStability"),
}
